# src/pyspeed/generators.py
"""
Lazy sequences: values are produced on demand instead of materialized.
"""

from itertools import islice
from typing import Iterable, Iterator, List, TypeVar

T = TypeVar("T")


def lazy_squares(upper: int) -> Iterator[int]:
    """Yield ``x * x`` for ``x`` in ``range(upper)``, one at a time."""
    for x in range(upper):
        yield x * x


def sum_of_squares(upper: int, lazy: bool = True) -> int:
    """Sum the squares below ``upper``, lazily or through a full list."""
    if lazy:
        return sum(lazy_squares(upper))
    return sum([x * x for x in range(upper)])


def take(iterable: Iterable[T], k: int) -> List[T]:
    """First ``k`` items of ``iterable``; consumes nothing past them."""
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")
    return list(islice(iterable, k))


def chunked(iterable: Iterable[T], size: int) -> Iterator[List[T]]:
    """Yield lists of at most ``size`` consecutive items."""
    if size <= 0:
        raise ValueError(f"size must be positive, got {size}")
    iterator = iter(iterable)
    while True:
        chunk = list(islice(iterator, size))
        if not chunk:
            return
        yield chunk
