"""Custom exception types for pyspeed."""

from __future__ import annotations

from typing import List, Optional, Tuple


class PySpeedError(Exception):
    """Base class for pyspeed errors."""


class UnsupportedBackendError(PySpeedError):
    """Raised when a vectorized computation names an unknown array backend."""

    def __init__(self, backend: str, message: Optional[str] = None) -> None:
        if message is None:
            message = f"Unsupported array backend {backend!r}; use 'numpy' or 'torch'."
        super().__init__(message)
        self.backend = backend


class SnippetError(PySpeedError):
    """Raised when a code block of the guide fails to compile or run."""

    def __init__(self, index: int, line: int, message: str) -> None:
        super().__init__(f"snippet #{index} (line {line}): {message}")
        self.index = index
        self.line = line


class ThreadTaskError(PySpeedError):
    """Raised after all threads joined when at least one target failed."""

    def __init__(self, failures: List[Tuple[int, BaseException]]) -> None:
        first_index, first_exc = failures[0]
        super().__init__(
            f"{len(failures)} thread task(s) failed; first at item {first_index}: {first_exc!r}"
        )
        self.failures = failures


__all__ = ["PySpeedError", "UnsupportedBackendError", "SnippetError", "ThreadTaskError"]
