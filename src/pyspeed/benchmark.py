# src/pyspeed/benchmark.py
"""
Timing harness comparing a baseline and an optimized version of each technique.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional

import numpy as np

from .comprehensions import squares_comprehension, squares_loop
from .config import BenchmarkConfig
from .enums import Technique
from .generators import sum_of_squares
from .memory import release_sequence
from .parallel import busy_sum, process_map, run_threads, simulated_io
from .profiler import peak_allocation, profile_call
from .runtime import RuntimeManager
from .slots import Record, SlottedRecord, compare_footprint
from .vectorized import squares_vectorized


logger = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Timing statistics of one measured callable, in seconds."""
    name: str
    times: List[float]

    @property
    def mean(self) -> float:
        return float(np.mean(self.times))

    @property
    def std(self) -> float:
        return float(np.std(self.times))

    @property
    def min(self) -> float:
        return float(np.min(self.times))

    @property
    def max(self) -> float:
        return float(np.max(self.times))


@dataclass
class Comparison:
    """Baseline versus candidate measurement for one technique."""
    baseline: BenchmarkResult
    candidate: BenchmarkResult
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def speedup(self) -> float:
        if self.candidate.mean == 0:
            return float('inf')
        return self.baseline.mean / self.candidate.mean


def measure(func: Callable[[], Any], repeat: int = 5, warmup: int = 1,
            name: Optional[str] = None) -> BenchmarkResult:
    """
    Measure average run time of a zero-argument callable.

    Args:
        func: The callable to benchmark
        repeat: Number of timed runs
        warmup: Number of untimed runs before timing

    Returns:
        BenchmarkResult: per-run times and their statistics
    """
    if repeat < 1:
        raise ValueError(f"repeat must be at least 1, got {repeat}")

    for _ in range(warmup):
        func()

    times = []
    for _ in range(repeat):
        start = time.perf_counter()
        func()
        times.append(time.perf_counter() - start)

    return BenchmarkResult(name=name or getattr(func, '__name__', 'callable'), times=times)


def compare(baseline: BenchmarkResult, candidate: BenchmarkResult, **extra) -> Comparison:
    """Pair two results; ``speedup`` > 1 means the candidate is faster."""
    return Comparison(baseline=baseline, candidate=candidate, extra=extra)


class BenchmarkSuite:
    """Runs every technique of the guide against its naive counterpart."""

    def __init__(self, config: Optional[BenchmarkConfig] = None):
        self.config = config or BenchmarkConfig()
        self.results = {}

        # Set up logging based on config
        if self.config.verbose:
            logging.getLogger("pyspeed").setLevel(logging.INFO)

        self._runners = {
            Technique.PROFILING: self._run_profiling,
            Technique.COMPREHENSION: self._run_comprehension,
            Technique.GENERATOR: self._run_generator,
            Technique.VECTORIZED: self._run_vectorized,
            Technique.MULTIPROCESSING: self._run_multiprocessing,
            Technique.THREADING: self._run_threading,
            Technique.SLOTS: self._run_slots,
            Technique.MEMORY_RELEASE: self._run_memory_release,
            Technique.JIT: self._run_jit,
        }

    def _measure(self, func, name):
        return measure(func, repeat=self.config.repeat, warmup=self.config.warmup, name=name)

    def run(self, techniques: Optional[Iterable[Technique]] = None) -> Dict[Technique, Any]:
        """Run the requested techniques (all by default) and return their results."""
        selected = list(techniques) if techniques is not None else list(Technique)
        for technique in selected:
            if self.config.verbose:
                logger.info(f"Benchmarking {technique.value}...")
            self.results[technique] = self._runners[technique]()
            if isinstance(self.results[technique], Comparison):
                logger.info(f"  {technique.value}: speedup {self.results[technique].speedup:.2f}x")
        return {t: self.results[t] for t in selected}

    def _run_profiling(self):
        return profile_call(
            squares_loop, self.config.sequence_size,
            sort_by=self.config.profile_sort, limit=self.config.profile_limit
        )

    def _run_comprehension(self):
        n = self.config.sequence_size
        return compare(
            self._measure(lambda: squares_loop(n), "loop"),
            self._measure(lambda: squares_comprehension(n), "comprehension")
        )

    def _run_generator(self):
        n = self.config.sequence_size
        _, list_peak = peak_allocation(sum_of_squares, n, lazy=False)
        _, lazy_peak = peak_allocation(sum_of_squares, n, lazy=True)
        return compare(
            self._measure(lambda: sum_of_squares(n, lazy=False), "list"),
            self._measure(lambda: sum_of_squares(n, lazy=True), "generator"),
            list_peak_bytes=list_peak,
            generator_peak_bytes=lazy_peak
        )

    def _run_vectorized(self):
        n = self.config.sequence_size
        backend = self.config.vector_backend
        return compare(
            self._measure(lambda: squares_loop(n), "loop"),
            self._measure(lambda: squares_vectorized(n, backend), f"vectorized[{backend}]"),
            backend=backend
        )

    def _run_multiprocessing(self):
        workers = self.config.pool_workers
        work = [self.config.sequence_size] * workers
        return compare(
            self._measure(lambda: [busy_sum(n) for n in work], "serial"),
            self._measure(lambda: process_map(busy_sum, work, workers=workers), "processes"),
            workers=workers
        )

    def _run_threading(self):
        target = simulated_io(self.config.io_delay)
        items = list(range(self.config.thread_count))
        return compare(
            self._measure(lambda: [target(item) for item in items], "serial"),
            self._measure(lambda: run_threads(items, target, self.config.thread_count), "threads"),
            threads=self.config.thread_count
        )

    def _run_slots(self):
        count = self.config.sequence_size
        footprint = compare_footprint(count)
        return compare(
            self._measure(lambda: [Record(1, 2, 3) for _ in range(count)], "plain"),
            self._measure(lambda: [SlottedRecord(1, 2, 3) for _ in range(count)], "slotted"),
            plain_bytes=footprint.plain_bytes,
            slotted_bytes=footprint.slotted_bytes,
            saving=footprint.saving
        )

    def _run_memory_release(self):
        return release_sequence(self.config.sequence_size)

    def _run_jit(self):
        return RuntimeManager().info()
