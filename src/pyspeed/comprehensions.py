# src/pyspeed/comprehensions.py
"""
Loop-based versus comprehension-based list construction.
"""

from typing import Callable, List


def square(x: int) -> int:
    """Square a number. Module level so process pools can pickle it."""
    return x * x


def squares_loop(n: int) -> List[int]:
    """Build ``[0, 1, 4, ...]`` with an explicit loop and ``append``."""
    result = []
    for i in range(n):
        result.append(i * i)
    return result


def squares_comprehension(n: int) -> List[int]:
    """Build the same list as :func:`squares_loop` with a comprehension."""
    return [i * i for i in range(n)]


def filtered_squares(n: int, predicate: Callable[[int], bool]) -> List[int]:
    """Squares of the values in ``range(n)`` accepted by ``predicate``."""
    return [i * i for i in range(n) if predicate(i)]
