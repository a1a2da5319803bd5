# src/pyspeed/enums.py
"""
Enumeration types for the pyspeed toolkit.
"""

from enum import Enum


class Technique(Enum):
    """Optimization techniques covered by the guide."""
    PROFILING = "profiling"
    COMPREHENSION = "comprehension"
    GENERATOR = "generator"
    VECTORIZED = "vectorized"
    MULTIPROCESSING = "multiprocessing"
    THREADING = "threading"
    SLOTS = "slots"
    MEMORY_RELEASE = "memory_release"
    JIT = "jit"


class WorkloadKind(Enum):
    """Broad shape of the work being optimized."""
    CPU_BOUND = "cpu"
    IO_BOUND = "io"
    NUMERIC = "numeric"
    MEMORY_BOUND = "memory"
