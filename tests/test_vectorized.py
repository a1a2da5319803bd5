# tests/test_vectorized.py
"""
Unit tests for the NumPy and PyTorch vectorized backends.
"""

import numpy as np
import pytest
from pyspeed import UnsupportedBackendError, dot, scale, squares_comprehension, squares_vectorized


BACKENDS = ["numpy", "torch"]


class TestSquaresVectorized:
    """Vectorized squares agree with the comprehension."""

    @pytest.mark.parametrize("backend", BACKENDS)
    def test_matches_comprehension(self, backend):
        """Whole-array squares equal the element-wise ones."""
        result = squares_vectorized(1000, backend)

        assert isinstance(result, np.ndarray)
        assert result.dtype == np.int64
        assert result.tolist() == squares_comprehension(1000)

    @pytest.mark.parametrize("backend", BACKENDS)
    def test_empty(self, backend):
        """Zero and negative sizes give empty arrays."""
        assert squares_vectorized(0, backend).size == 0
        assert squares_vectorized(-5, backend).size == 0

    def test_unknown_backend(self):
        """Unknown backends raise a dedicated error."""
        with pytest.raises(UnsupportedBackendError) as exc_info:
            squares_vectorized(10, "cupy")
        assert exc_info.value.backend == "cupy"


class TestScale:
    """Test scale()."""

    @pytest.mark.parametrize("backend", BACKENDS)
    def test_scale(self, backend):
        """Every element is multiplied."""
        result = scale([1.0, 2.0, 3.0], 2.5, backend)
        np.testing.assert_allclose(result, [2.5, 5.0, 7.5])

    def test_unknown_backend(self):
        with pytest.raises(UnsupportedBackendError):
            scale([1.0], 2.0, "jax")


class TestDot:
    """Test dot()."""

    @pytest.mark.parametrize("backend", BACKENDS)
    def test_dot(self, backend):
        """Inner product of two short vectors."""
        assert dot([1, 2, 3], [4, 5, 6], backend) == pytest.approx(32.0)

    def test_length_mismatch(self):
        """Different lengths are rejected."""
        with pytest.raises(ValueError):
            dot([1, 2, 3], [1, 2])

    def test_two_dimensional_rejected(self):
        """Only one-dimensional inputs are accepted."""
        with pytest.raises(ValueError):
            dot([[1, 2], [3, 4]], [[1, 2], [3, 4]])
