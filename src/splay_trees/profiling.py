"""Performance profiling utilities for splay tree operations."""

import time
import functools
from typing import Dict, List, Callable, Optional
from dataclasses import dataclass, field
import statistics
from collections import defaultdict


@dataclass
class OperationMetrics:
    """Timing and splay-work statistics for a single tree operation."""
    call_count: int = 0
    total_time: float = 0.0
    max_time: float = 0.0
    zigzig_steps: int = 0
    zigzag_steps: int = 0
    times: List[float] = field(default_factory=list)

    def add_measurement(self, elapsed: float, zigzig: int = 0, zigzag: int = 0) -> None:
        """Add one call's execution time and the splay steps it performed."""
        self.call_count += 1
        self.total_time += elapsed
        self.max_time = max(self.max_time, elapsed)
        self.zigzig_steps += zigzig
        self.zigzag_steps += zigzag
        self.times.append(elapsed)

    @property
    def avg_time(self) -> float:
        return self.total_time / self.call_count if self.call_count > 0 else 0

    @property
    def median_time(self) -> float:
        return statistics.median(self.times) if self.times else 0

    @property
    def avg_splay_steps(self) -> float:
        """Average zig-zig plus zig-zag steps per call."""
        steps = self.zigzig_steps + self.zigzag_steps
        return steps / self.call_count if self.call_count > 0 else 0

    def __str__(self) -> str:
        return (f"Calls: {self.call_count}, "
                f"Total: {self.total_time:.6f}s, "
                f"Avg: {self.avg_time:.6f}s, "
                f"Median: {self.median_time:.6f}s, "
                f"Steps/call: {self.avg_splay_steps:.2f}")


class PerformanceTracker:
    """Central metrics collector for splay tree operations."""

    _instance = None

    @classmethod
    def get_instance(cls) -> 'PerformanceTracker':
        """Singleton accessor."""
        if cls._instance is None:
            cls._instance = PerformanceTracker()
        return cls._instance

    def __init__(self):
        self.metrics: Dict[str, OperationMetrics] = defaultdict(OperationMetrics)
        # Off by default, the benchmarks switch it on.
        self.enabled = False

    def add_measurement(self, name: str, elapsed: float,
                        zigzig: int = 0, zigzag: int = 0) -> None:
        if self.enabled:
            self.metrics[name].add_measurement(elapsed, zigzig, zigzag)

    def reset(self) -> None:
        self.metrics.clear()

    def enable(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        self.enabled = False

    def report(self, sort_by: str = 'total_time') -> str:
        """Generate a per-operation report sorted by the given metric."""
        if not self.metrics:
            return "No performance data collected."

        lines = ["Performance Metrics:"]
        lines.append("-" * 88)
        lines.append(f"{'Operation':<32} {'Calls':>8} {'Total (s)':>12} "
                     f"{'Avg (s)':>12} {'Median (s)':>12} {'Steps/call':>10}")
        lines.append("-" * 88)

        sorted_items = sorted(
            self.metrics.items(),
            key=lambda x: getattr(x[1], sort_by),
            reverse=True
        )

        for name, m in sorted_items:
            lines.append(f"{name:<32} {m.call_count:>8} {m.total_time:>12.6f} "
                         f"{m.avg_time:>12.6f} {m.median_time:>12.6f} "
                         f"{m.avg_splay_steps:>10.2f}")

        return "\n".join(lines)


def track_performance(method: Optional[Callable] = None, *,
                      tag: Optional[str] = None) -> Callable:
    """
    Decorator to track a tree method's execution time and splay work.

    The splay work is read from the `zigzig_count` / `zigzag_count`
    attributes of the instance the method is bound to, if it has them.

    Args:
        method: The method to track
        tag: Optional custom tag to use instead of the qualified method name

    Returns:
        Decorated method with performance tracking
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            tracker = PerformanceTracker.get_instance()
            if not tracker.enabled:
                return func(self, *args, **kwargs)

            name = tag or f"{func.__qualname__}"
            zz0 = getattr(self, "zigzig_count", 0)
            zg0 = getattr(self, "zigzag_count", 0)
            start_time = time.perf_counter()
            result = func(self, *args, **kwargs)
            elapsed = time.perf_counter() - start_time
            tracker.add_measurement(
                name,
                elapsed,
                getattr(self, "zigzig_count", 0) - zz0,
                getattr(self, "zigzag_count", 0) - zg0,
            )
            return result
        return wrapper

    # Handle both @track_performance and @track_performance(tag="name") forms
    if method is None:
        return decorator
    return decorator(method)
