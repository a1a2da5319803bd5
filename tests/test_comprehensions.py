# tests/test_comprehensions.py
"""
Unit tests for loop and comprehension list construction.
"""

import pytest
from pyspeed import filtered_squares, square, squares_comprehension, squares_loop


class TestSquares:
    """Loop and comprehension must agree."""

    @pytest.mark.parametrize("n", [0, 1, 10, 1000])
    def test_loop_matches_comprehension(self, n):
        """Both constructions give identical lists for the same range."""
        assert squares_loop(n) == squares_comprehension(n)

    def test_values(self):
        """First values are the perfect squares."""
        assert squares_comprehension(5) == [0, 1, 4, 9, 16]

    def test_negative_range_is_empty(self):
        """Negative sizes behave like range and give an empty list."""
        assert squares_loop(-3) == []
        assert squares_comprehension(-3) == []

    def test_square(self):
        """The picklable helper squares its argument."""
        assert square(7) == 49
        assert square(-3) == 9

    def test_filtered(self):
        """Only accepted values are squared."""
        assert filtered_squares(10, lambda i: i % 2 == 0) == [0, 4, 16, 36, 64]
        assert filtered_squares(10, lambda i: False) == []
