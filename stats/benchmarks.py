#!/usr/bin/env python3
"""
Benchmarks for the splay tree data structure.

This script measures:
 1. Full SplayTree build times for random and sequential key orders
 2. Structure statistics of a large random tree
 3. Per-operation cost (insert / search / remove) into trees of various sizes
 4. Search cost under uniform vs. Zipf-skewed access patterns

Usage:
    python -m stats.benchmarks [--sizes 100 1000 10000] [--trials T] [--space S]
                               [--seed N] [--workload uniform|zipf|both]
"""
import argparse
import random
import time
import gc
from pprint import pprint
from dataclasses import asdict
from statistics import mean, variance

from tqdm import tqdm

from splay_trees.profiling import PerformanceTracker
from splay_trees.validation import splay_tree_stats_
from stats.stats_splay_tree import (
    create_splay_tree_from,
    random_keys,
    random_splay_tree_of_size,
    zipf_keys,
)


def bench_build(sizes: list[int], space: int, seed: int) -> None:
    """Measure build time for random and for monotonically increasing keys."""
    for n in sizes:
        keys = random_keys(n, space, seed)
        t0 = time.perf_counter()
        create_splay_tree_from(keys)
        elapsed = time.perf_counter() - t0
        print(f"[bench] random build({n}):     {elapsed:.4f}s")

        t0 = time.perf_counter()
        tree = create_splay_tree_from(list(range(n)))
        elapsed = time.perf_counter() - t0
        print(f"[bench] sequential build({n}): {elapsed:.4f}s  height={tree.height()}")


def bench_tree_stats(n: int, space: int, seed: int) -> None:
    tree = random_splay_tree_of_size(n, space, seed)
    stats = splay_tree_stats_(tree)
    print(f"[bench] random_splay_tree_of_size({n}) stats:")
    pprint(asdict(stats))
    print(f"[bench] counters: {tree.counters()}")


def measure_single_ops(n: int, space: int, trials: int, seed: int) -> dict:
    """
    Measure per-operation cost on trees of exactly `n` keys, averaged
    over `trials` independent trees.
    Returns {op: (mean_time_s, variance_time_s)}.
    """
    rng = random.Random(seed)
    trees = []
    members = []
    for i in tqdm(range(trials), desc=f"build n={n}", leave=False):
        keys = random_keys(n, space, seed + i)
        trees.append(create_splay_tree_from(keys))
        members.append(rng.choice(keys))

    times = {"search": [], "insert": [], "remove": []}
    gc.collect()
    gc.disable()
    try:
        for tree, key in zip(trees, members):
            t0 = time.perf_counter()
            tree.search(key)
            times["search"].append(time.perf_counter() - t0)

            t0 = time.perf_counter()
            tree.remove(key)
            times["remove"].append(time.perf_counter() - t0)

            t0 = time.perf_counter()
            tree.insert(key)
            times["insert"].append(time.perf_counter() - t0)
    finally:
        gc.enable()

    return {op: (mean(ts), variance(ts) if len(ts) > 1 else 0.0) for op, ts in times.items()}


def bench_single_ops(sizes: list[int], space: int, trials: int, seed: int) -> None:
    for n in sizes:
        results = measure_single_ops(n, space, trials, seed)
        for op, (avg, var) in results.items():
            print(
                f"[bench] {op:<6} in size {n:<7} → avg {avg*1e6:8.2f} µs   σ²={var*1e12:8.2f} µs²"
            )


def bench_access_pattern(n: int, lookups: int, workload: str, seed: int) -> None:
    """Compare splay work per search for uniform and Zipf-skewed lookups."""
    patterns = []
    if workload in ("uniform", "both"):
        rng = random.Random(seed)
        patterns.append(("uniform", [rng.randrange(n) for _ in range(lookups)]))
    if workload in ("zipf", "both"):
        patterns.append(("zipf", zipf_keys(lookups, n, seed=seed)))

    for name, probes in patterns:
        tree = create_splay_tree_from(random_keys(n, n + 1, seed))
        tree.reset_counters()
        t0 = time.perf_counter()
        for key in tqdm(probes, desc=name, leave=False):
            tree.search(key)
        elapsed = time.perf_counter() - t0
        c = tree.counters()
        print(
            f"[bench] {name:<8} {lookups} searches on {n} keys: {elapsed:.4f}s, "
            f"{(c.zigzig_count + c.zigzag_count) / lookups:.2f} steps/search, "
            f"height={tree.height()}"
        )


def main():
    parser = argparse.ArgumentParser(description="SplayTree benchmarks")
    parser.add_argument("--space", type=int, default=1 << 24,
                        help="Key space for random keys")
    parser.add_argument("--sizes", nargs='+', type=int, default=[100, 1000, 10_000],
                        help="Tree sizes for build and single-op benchmarks")
    parser.add_argument("--trials", type=int, default=100,
                        help="Number of trials for single-op benchmarks")
    parser.add_argument("--lookups", type=int, default=100_000,
                        help="Number of searches for access-pattern benchmarks")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--workload", choices=["uniform", "zipf", "both"], default="both")
    args = parser.parse_args()

    print("\n=== Full SplayTree Build ===")
    bench_build(args.sizes, args.space, args.seed)

    print("\n=== random_splay_tree_of_size Stats ===")
    bench_tree_stats(max(args.sizes), args.space, args.seed)

    tracker = PerformanceTracker.get_instance()
    tracker.enable()

    print("\n=== Single-Operation Benchmarks ===")
    bench_single_ops(args.sizes, args.space, args.trials, args.seed)

    print("\n=== Access-Pattern Benchmarks ===")
    bench_access_pattern(max(args.sizes), args.lookups, args.workload, args.seed)

    print("\n=== Method-Level Performance Breakdown ===")
    print(tracker.report())
    tracker.reset()
    tracker.disable()


if __name__ == "__main__":
    main()
