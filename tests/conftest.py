# tests/conftest.py
"""
Pytest configuration and fixtures for pyspeed tests.
"""

import gc
from pathlib import Path

import pytest
import torch


GUIDE_PATH = Path(__file__).resolve().parents[1] / "README.md"


@pytest.fixture(autouse=True)
def cleanup_memory():
    """Collect garbage before and after each test so memory probes start clean."""
    gc.collect()
    if torch.cuda.is_available():
        torch.cuda.empty_cache()

    yield

    gc.collect()
    if torch.cuda.is_available():
        torch.cuda.empty_cache()


@pytest.fixture
def guide_path():
    """Path of the Markdown guide shipped with the package."""
    return GUIDE_PATH


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "benchmark: Performance benchmark tests"
    )
    config.addinivalue_line(
        "markers", "slow: Slow tests that take significant time"
    )
    config.addinivalue_line(
        "markers", "gpu: Tests that require GPU"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: Unit tests"
    )
