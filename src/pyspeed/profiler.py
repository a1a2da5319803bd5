# src/pyspeed/profiler.py
"""
Time and memory profiling for the pyspeed toolkit.
"""

import cProfile
import io
import logging
import pstats
import threading
import time
import tracemalloc
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

import psutil

from .config import BenchmarkConfig


logger = logging.getLogger(__name__)


@dataclass
class FunctionStat:
    """One row of a cProfile report."""
    filename: str
    line: int
    function: str
    calls: int
    total_time: float  # Time spent in the function itself
    cumulative_time: float  # Time including sub-calls


@dataclass
class ProfileReport:
    """Outcome of profiling a single call."""
    result: Any
    wall_time: float
    primitive_calls: int
    total_calls: int
    text: str
    top: List[FunctionStat] = field(default_factory=list)


def profile_call(func: Callable, *args, sort_by: str = "cumulative", limit: int = 10, **kwargs) -> ProfileReport:
    """
    Run ``func(*args, **kwargs)`` under cProfile.

    Args:
        func: The callable to profile
        sort_by: Any pstats sort key ('cumulative', 'tottime', 'calls', ...)
        limit: Number of rows kept in the report

    Returns:
        ProfileReport: result of the call plus the collected statistics
    """
    profiler = cProfile.Profile()
    start = time.perf_counter()
    profiler.enable()
    try:
        result = func(*args, **kwargs)
    finally:
        profiler.disable()
    wall_time = time.perf_counter() - start

    stream = io.StringIO()
    stats = pstats.Stats(profiler, stream=stream).sort_stats(sort_by)
    stats.print_stats(limit)

    top = []
    # fcn_list holds the keys in the requested sort order
    for key in stats.fcn_list[:limit]:
        filename, line, function = key
        cc, nc, tt, ct, _callers = stats.stats[key]
        top.append(FunctionStat(
            filename=filename,
            line=line,
            function=function,
            calls=nc,
            total_time=tt,
            cumulative_time=ct
        ))

    logger.info(f"Profiled {getattr(func, '__name__', func)!s}: "
                f"{stats.total_calls} calls in {wall_time:.4f}s")

    return ProfileReport(
        result=result,
        wall_time=wall_time,
        primitive_calls=stats.prim_calls,
        total_calls=stats.total_calls,
        text=stream.getvalue(),
        top=top
    )


def peak_allocation(func: Callable, *args, **kwargs) -> Tuple[Any, int]:
    """
    Return ``(result, peak_bytes)`` allocated while ``func`` ran.

    If tracing is already active the caller's peak is left untouched, so the
    figure is an upper bound covering everything since the caller's last reset.
    """
    already_tracing = tracemalloc.is_tracing()
    if not already_tracing:
        tracemalloc.start()
        tracemalloc.reset_peak()
    baseline, _ = tracemalloc.get_traced_memory()
    try:
        result = func(*args, **kwargs)
        _, peak = tracemalloc.get_traced_memory()
    finally:
        if not already_tracing:
            tracemalloc.stop()
    return result, max(0, peak - baseline)


class PerformanceProfiler:
    """Wall-time and memory statistics collection."""

    def __init__(self, config: Optional[BenchmarkConfig] = None):
        self.config = config or BenchmarkConfig()
        self.stats = {}
        self.peak_memory = 0.0
        self.process = psutil.Process()
        self._lock = threading.Lock()

    def profile_memory(self) -> Dict[str, float]:
        """Profile current process and system memory usage in MB."""
        vm = psutil.virtual_memory()
        return {
            'rss': self.process.memory_info().rss / 1024**2,
            'used': (vm.total - vm.available) / 1024**2,
            'free': vm.available / 1024**2,
            'total': vm.total / 1024**2
        }

    @contextmanager
    def track(self, name: str):
        """Record wall time and RSS delta of the enclosed block under ``name``."""
        start_rss = self.process.memory_info().rss
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed = time.perf_counter() - start
            delta = (self.process.memory_info().rss - start_rss) / 1024**2
            self.update_stats(name, elapsed, delta)
            if self.config.verbose:
                logger.info(f"{name}: {elapsed:.4f}s, memory {delta:+.2f} MB")

    def update_stats(self, name: str, seconds: float, memory_delta: float = 0.0):
        """Update timing and memory statistics for a named block."""
        with self._lock:
            if name not in self.stats:
                self.stats[name] = {
                    'count': 0,
                    'total_time': 0.0,
                    'peak_time': 0.0,
                    'total_memory': 0.0,
                    'peak_memory': 0.0
                }

            entry = self.stats[name]
            entry['count'] += 1
            entry['total_time'] += seconds
            entry['peak_time'] = max(entry['peak_time'], seconds)
            entry['total_memory'] += memory_delta
            entry['peak_memory'] = max(entry['peak_memory'], memory_delta)

            self.peak_memory = max(self.peak_memory, memory_delta)

    def get_memory_pressure(self) -> float:
        """Get current system memory pressure (0.0 to 1.0)."""
        stats = self.profile_memory()
        return 1.0 - (stats['free'] / stats['total'])

    def summary(self) -> Dict[str, Any]:
        """Summarize recorded blocks; empty dict if nothing was tracked."""
        with self._lock:
            if not self.stats:
                return {}
            slowest = max(self.stats.items(), key=lambda item: item[1]['total_time'])
            heaviest = max(self.stats.items(), key=lambda item: item[1]['peak_memory'])
            return {
                'total_time': sum(s['total_time'] for s in self.stats.values()),
                'slowest': slowest[0],
                'heaviest': heaviest[0],
                'blocks': dict(self.stats)
            }
