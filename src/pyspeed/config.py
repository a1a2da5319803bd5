# src/pyspeed/config.py
"""
Configuration and data structures for the pyspeed toolkit.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class DeviceInfo:
    """Compute device information."""
    device_id: int
    device_type: str  # 'cuda' or 'cpu'
    total_memory: int
    available_memory: int
    device_name: str = ""


@dataclass
class RuntimeInfo:
    """Interpreter and host information."""
    implementation: str  # 'CPython', 'PyPy', ...
    version: str
    is_jit: bool
    physical_cores: int
    logical_cores: int
    total_memory: int
    available_memory: int
    devices: List[DeviceInfo] = field(default_factory=list)


@dataclass
class BenchmarkConfig:
    """Benchmark and technique configuration."""
    repeat: int = 5  # Timed runs per measurement
    warmup: int = 1  # Untimed runs before measuring
    sequence_size: int = 100_000  # Size of the sequences fed to each technique
    pool_workers: int = 4  # Worker processes for the process pool
    thread_count: int = 10  # Threads started for I/O-bound work
    io_delay: float = 0.01  # Seconds each simulated I/O call blocks
    profile_sort: str = "cumulative"  # pstats sort key
    profile_limit: int = 10  # Rows kept from the profile
    vector_backend: str = "numpy"  # "numpy" or "torch"

    # Debug/Verbose mode
    verbose: bool = False  # Enable detailed logging for debugging
