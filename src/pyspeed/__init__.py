# src/pyspeed/__init__.py
"""
pyspeed: the classic Python performance techniques, measured
Profiling, comprehensions, generators, vectorization, processes, threads,
__slots__, explicit memory release and JIT interpreters
"""

__version__ = "0.1.0"

from .enums import Technique, WorkloadKind
from .config import BenchmarkConfig, DeviceInfo, RuntimeInfo
from .exceptions import PySpeedError, SnippetError, ThreadTaskError, UnsupportedBackendError
from .profiler import PerformanceProfiler, ProfileReport, peak_allocation, profile_call
from .comprehensions import filtered_squares, square, squares_comprehension, squares_loop
from .generators import chunked, lazy_squares, sum_of_squares, take
from .vectorized import dot, scale, squares_vectorized
from .parallel import announce_url, busy_sum, process_map, run_threads, simulated_io
from .slots import Record, SlottedRecord, compare_footprint, footprint
from .memory import ReleaseReport, release_sequence
from .runtime import RuntimeManager
from .benchmark import BenchmarkResult, BenchmarkSuite, Comparison, compare, measure
from .guide import GuideReport, Snippet, check_syntax, extract_snippets, run_snippet, validate_guide

__all__ = [
    "Technique",
    "WorkloadKind",
    "BenchmarkConfig",
    "DeviceInfo",
    "RuntimeInfo",
    "PySpeedError",
    "SnippetError",
    "ThreadTaskError",
    "UnsupportedBackendError",
    "PerformanceProfiler",
    "ProfileReport",
    "peak_allocation",
    "profile_call",
    "filtered_squares",
    "square",
    "squares_comprehension",
    "squares_loop",
    "chunked",
    "lazy_squares",
    "sum_of_squares",
    "take",
    "dot",
    "scale",
    "squares_vectorized",
    "announce_url",
    "busy_sum",
    "process_map",
    "run_threads",
    "simulated_io",
    "Record",
    "SlottedRecord",
    "compare_footprint",
    "footprint",
    "ReleaseReport",
    "release_sequence",
    "RuntimeManager",
    "BenchmarkResult",
    "BenchmarkSuite",
    "Comparison",
    "compare",
    "measure",
    "GuideReport",
    "Snippet",
    "check_syntax",
    "extract_snippets",
    "run_snippet",
    "validate_guide",
]
