"""Statistics for splay trees."""
# pylint: skip-file

import os
import logging
import math
import random
import time
from statistics import mean
from typing import List, Optional, Tuple
from datetime import datetime
import numpy as np

from splay_trees.base import INT32_MAX
from splay_trees.splay_tree import SplayTree
from splay_trees.validation import (
    Stats,
    splay_tree_stats_,
)

TREE_FLAGS = (
    "is_search_tree",
    "parents_consistent",
    "root_is_parentless",
    "size_consistent",
)


def assert_invariants(t: SplayTree, stats: Stats) -> None:
    """Check all invariants, but only log ERROR messages on failures."""
    for flag in TREE_FLAGS:
        if not getattr(stats, flag):
            logging.error("Invariant failed: %s is False", flag)

    if not t.is_empty():
        if stats.node_count <= 0:
            logging.error(
                "Invariant failed: node_count=%d ≤ 0 for non-empty tree",
                stats.node_count
            )
        if stats.height <= 0:
            logging.error(
                "Invariant failed: height=%d ≤ 0 for non-empty tree",
                stats.height
            )
        if t.size() <= 0:
            logging.error(
                "Invariant failed: size=%d ≤ 0 for non-empty tree",
                t.size()
            )


def random_keys(n: int, space: int = 1 << 24, seed: Optional[int] = None) -> List[int]:
    """Draw `n` distinct keys uniformly from range(space)."""
    if space <= n:
        raise ValueError(f"Key-space too small! Required: {n + 1}, Available: {space}")
    if space > INT32_MAX:
        raise ValueError(f"Key-space {space} exceeds 32-bit keys")
    rng = random.Random(seed)
    return rng.sample(range(space), k=n)


def zipf_keys(n: int, universe: int, alpha: float = 1.2,
              seed: Optional[int] = None) -> List[int]:
    """
    Draw `n` keys from range(universe) with Zipf-distributed popularity.

    Ranks are drawn from numpy's Zipf distribution and folded into the
    universe, then mapped through a fixed permutation so the popular keys
    are not simply the smallest ones.
    """
    if alpha <= 1.0:
        raise ValueError("alpha must be > 1")
    rng = np.random.default_rng(seed)
    ranks = (rng.zipf(alpha, size=n) - 1) % universe
    perm = rng.permutation(universe)
    return [int(perm[r]) for r in ranks]


def create_splay_tree_from(keys: List[int]) -> SplayTree:
    tree = SplayTree()
    tree_insert = tree.insert
    for key in keys:
        tree_insert(key)
    return tree


def random_splay_tree_of_size(n: int, space: int = 1 << 24,
                              seed: Optional[int] = None) -> SplayTree:
    """Build a SplayTree from `n` distinct random keys."""
    return create_splay_tree_from(random_keys(n, space, seed))


def check_keys(
    tree: SplayTree,
    expected_keys: Optional[List[int]] = None
) -> Tuple[List[int], bool, bool]:
    """
    Walk the tree in order once (without splaying) and compute:
      1. presence_ok: if `expected_keys` is provided, does the tree hold exactly
                      that multiset of keys? Otherwise always True.
      2. order_ok: is the in-order key sequence non-decreasing?

    Returns:
        (keys, presence_ok, order_ok)
    """
    keys = tree.keys()
    order_ok = all(a <= b for a, b in zip(keys, keys[1:]))

    presence_ok = True
    if expected_keys is not None:
        presence_ok = sorted(expected_keys) == keys

    return keys, presence_ok, order_ok


def repeated_experiment(size: int, repetitions: int, lookups: int = 1000) -> None:
    """
    Repeatedly build random splay trees of `size` keys, then run `lookups`
    random searches on each. Aggregates heights, splay work and timings.
    """
    t_all_0 = time.perf_counter()

    results = []
    times_build = []
    times_lookup = []

    for _ in range(repetitions):
        keys = random_keys(size)

        t0 = time.perf_counter()
        tree = create_splay_tree_from(keys)
        times_build.append(time.perf_counter() - t0)
        build_counters = tree.counters()

        probes = random.choices(keys, k=lookups)
        t0 = time.perf_counter()
        for key in probes:
            tree.search(key)
        times_lookup.append(time.perf_counter() - t0)

        stats = splay_tree_stats_(tree)
        assert_invariants(tree, stats)
        results.append((stats, build_counters, tree.counters()))

    perfect_height = math.ceil(math.log2(size + 1)) if size > 0 else 0

    avg_height       = mean(s.height for s, _, _ in results)
    avg_height_amp   = mean(s.height / perfect_height for s, _, _ in results) if perfect_height else 0
    avg_build_steps  = mean((b.zigzig_count + b.zigzag_count) / size for _, b, _ in results)
    avg_zigzig_share = mean(
        c.zigzig_count / max(1, c.zigzig_count + c.zigzag_count) for _, _, c in results
    )
    avg_compares     = mean(c.compare_count / (size + lookups) for _, _, c in results)

    rows = [
        ("Height",               avg_height),
        ("Perfect height",       perfect_height),
        ("Height amplification", avg_height_amp),
        ("Steps per insert",     avg_build_steps),
        ("Zig-zig share",        avg_zigzig_share),
        ("Compares per op",      avg_compares),
    ]

    header = f"{'Metric':<22} {'Avg':>15}"
    sep_line = "-" * len(header)
    logging.info(header)
    logging.info(sep_line)
    for name, avg in rows:
        logging.info(f"{name:<22} {avg:15.2f}")

    logging.info("")
    logging.info("Performance summary:")
    logging.info(f"{'Build time (s)':<22}{mean(times_build):13.6f}")
    logging.info(f"{'Lookup time (s)':<22}{mean(times_lookup):13.6f}")
    logging.info(sep_line)
    logging.info("Execution time: %.3f seconds", time.perf_counter() - t_all_0)


if __name__ == "__main__":
    log_dir = os.path.join(os.getcwd(), "stats/logs")
    os.makedirs(log_dir, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_path = os.path.join(log_dir, f"run_{ts}.log")

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.FileHandler(log_path, mode="w"),
            logging.StreamHandler()
        ]
    )

    sizes = [1000, 10_000]
    repetitions = 3

    for n in sizes:
        logging.info("")
        logging.info(f"---------------- NOW RUNNING EXPERIMENT: n = {n}, repetitions = {repetitions} ----------------")
        t0 = time.perf_counter()
        repeated_experiment(size=n, repetitions=repetitions)
        logging.info(f"Total experiment time: {time.perf_counter() - t0:.3f} seconds")
