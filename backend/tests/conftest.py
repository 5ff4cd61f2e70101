"""Root conftest — shared test configuration."""

import os

import pytest

# Human-readable logs if a test triggers the lifespan
os.environ.setdefault("LOG_FORMAT", "text")


@pytest.fixture
def fixed_random_source():
    """Deterministic RandomSource: always returns bytes 0, 1, 2, ..."""
    def source(size: int) -> bytes:
        return bytes(range(size))
    return source
