# src/pyspeed/vectorized.py
"""
Whole-array numeric computation through NumPy or PyTorch.
"""

import logging
from functools import lru_cache
from typing import Sequence

import numpy as np
import torch

from .exceptions import UnsupportedBackendError
from .runtime import RuntimeManager


logger = logging.getLogger(__name__)

BACKENDS = ("numpy", "torch")


@lru_cache(maxsize=1)
def _torch_device() -> torch.device:
    return RuntimeManager().primary_device


def _check_backend(backend: str):
    if backend not in BACKENDS:
        raise UnsupportedBackendError(backend)


def _to_numpy(tensor: torch.Tensor) -> np.ndarray:
    return tensor.detach().cpu().numpy()


def squares_vectorized(n: int, backend: str = "numpy") -> np.ndarray:
    """Squares of ``range(n)`` as an ``int64`` array, computed in one operation."""
    _check_backend(backend)
    n = max(n, 0)
    if backend == "numpy":
        values = np.arange(n, dtype=np.int64)
        return values * values

    values = torch.arange(n, dtype=torch.int64, device=_torch_device())
    return _to_numpy(values * values)


def scale(values: Sequence[float], factor: float, backend: str = "numpy") -> np.ndarray:
    """Multiply every element of ``values`` by ``factor``."""
    _check_backend(backend)
    if backend == "numpy":
        return np.asarray(values) * factor

    tensor = torch.as_tensor(np.asarray(values), device=_torch_device())
    return _to_numpy(tensor * factor)


def dot(a: Sequence[float], b: Sequence[float], backend: str = "numpy") -> float:
    """Inner product of two equal-length sequences."""
    _check_backend(backend)
    left = np.asarray(a, dtype=np.float64)
    right = np.asarray(b, dtype=np.float64)
    if left.ndim != 1 or right.ndim != 1:
        raise ValueError("dot expects one-dimensional sequences")
    if left.shape != right.shape:
        raise ValueError(f"Length mismatch: {left.shape} vs {right.shape}")

    if backend == "numpy":
        return float(np.dot(left, right))

    device = _torch_device()
    logger.debug(f"dot on {device} with {left.size} elements")
    return float(torch.dot(torch.from_numpy(left).to(device), torch.from_numpy(right).to(device)))
