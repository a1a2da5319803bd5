# src/pyspeed/slots.py
"""
Memory-compact records through ``__slots__``.
"""

import tracemalloc
from dataclasses import dataclass
from typing import Tuple, Type


class Record:
    """Plain record; attributes live in a per-instance ``__dict__``."""

    def __init__(self, x, y, z):
        self.x = x
        self.y = y
        self.z = z

    def as_tuple(self) -> Tuple:
        return (self.x, self.y, self.z)


class SlottedRecord:
    """Same record with a fixed attribute set and no ``__dict__``."""

    __slots__ = ("x", "y", "z")

    def __init__(self, x, y, z):
        self.x = x
        self.y = y
        self.z = z

    def as_tuple(self) -> Tuple:
        return (self.x, self.y, self.z)


@dataclass
class FootprintComparison:
    """Bytes allocated for ``count`` plain versus slotted instances."""
    count: int
    plain_bytes: int
    slotted_bytes: int

    @property
    def saving(self) -> float:
        """Fraction of the plain footprint saved by slots."""
        if self.plain_bytes == 0:
            return 0.0
        return 1.0 - self.slotted_bytes / self.plain_bytes


def footprint(cls: Type, count: int) -> int:
    """Bytes allocated while ``count`` instances of ``cls`` are alive."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")

    already_tracing = tracemalloc.is_tracing()
    if not already_tracing:
        tracemalloc.start()
    try:
        before, _ = tracemalloc.get_traced_memory()
        # Small ints are cached, so the values add nothing per instance
        instances = [cls(1, 2, 3) for _ in range(count)]
        after, _ = tracemalloc.get_traced_memory()
        del instances
    finally:
        if not already_tracing:
            tracemalloc.stop()
    return max(0, after - before)


def compare_footprint(count: int = 10_000) -> FootprintComparison:
    """Measure both record classes at the same instance count."""
    return FootprintComparison(
        count=count,
        plain_bytes=footprint(Record, count),
        slotted_bytes=footprint(SlottedRecord, count)
    )
