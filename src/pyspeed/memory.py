# src/pyspeed/memory.py
"""
Explicit release of large in-memory sequences.
"""

import gc
import logging
import tracemalloc
from dataclasses import dataclass

import psutil


logger = logging.getLogger(__name__)


@dataclass
class ReleaseReport:
    """Memory observed around the lifetime of one large sequence."""
    size: int
    allocated_bytes: int  # Traced bytes while the sequence was alive
    retained_bytes: int  # Traced bytes still held after ``del`` and collection
    rss_before_mb: float
    rss_after_mb: float
    collected: int  # Objects reclaimed by gc.collect()

    @property
    def released_bytes(self) -> int:
        return max(0, self.allocated_bytes - self.retained_bytes)


def release_sequence(size: int) -> ReleaseReport:
    """Build a list of ``size`` integers, delete it and collect garbage."""
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")

    process = psutil.Process()
    rss_before = process.memory_info().rss / 1024**2

    already_tracing = tracemalloc.is_tracing()
    if not already_tracing:
        tracemalloc.start()
    try:
        baseline, _ = tracemalloc.get_traced_memory()
        data = list(range(size))
        alive, _ = tracemalloc.get_traced_memory()
        del data
        collected = gc.collect()
        after, _ = tracemalloc.get_traced_memory()
    finally:
        if not already_tracing:
            tracemalloc.stop()

    rss_after = process.memory_info().rss / 1024**2
    report = ReleaseReport(
        size=size,
        allocated_bytes=max(0, alive - baseline),
        retained_bytes=max(0, after - baseline),
        rss_before_mb=rss_before,
        rss_after_mb=rss_after,
        collected=collected
    )
    logger.info(f"Released {report.released_bytes / 1024**2:.2f} MB "
                f"from a {size}-item list ({collected} objects collected)")
    return report
