"""
Pytest configuration and shared fixtures for seqkit tests.
"""

import numpy as np
import pytest

from seqkit import config


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Run every test against default settings, whatever the environment holds."""
    monkeypatch.delenv(config.ENV_VECTORIZE, raising=False)
    monkeypatch.delenv(config.ENV_VECTORIZE_THRESHOLD, raising=False)
    config.reset_config()
    yield
    config.reset_config()


@pytest.fixture
def records():
    """Rows sharing ids, in a fixed order."""
    return [
        {"id": 0, "value": "a"},
        {"id": 1, "value": "b"},
        {"id": 2, "value": "c"},
        {"id": 1, "value": "d"},
        {"id": 0, "value": "e"},
    ]


@pytest.fixture
def same_id():
    """Equality comparator on the ``id`` field."""

    def _same_id(a, b) -> bool:
        return a["id"] == b["id"]

    return _same_id


@pytest.fixture
def rounds_equal():
    """Equality comparator on rounded numbers."""

    def _rounds_equal(a, b) -> bool:
        return round(a) == round(b)

    return _rounds_equal


@pytest.fixture
def vectorized():
    """Force the numpy path for every ndarray, however short."""
    with config.override(vectorize=True, vectorize_threshold=0):
        yield


@pytest.fixture
def scalar_only():
    """Disable the numpy path."""
    with config.override(vectorize=False):
        yield


@pytest.fixture
def array_factory():
    """Factory fixture for numeric numpy arrays."""

    def _create(values, dtype=np.int64) -> np.ndarray:
        return np.asarray(values, dtype=dtype)

    return _create
