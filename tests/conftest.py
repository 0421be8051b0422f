"""Pytest fixtures for merkleproof tests."""
import pytest

from merkleproof.config import features


@pytest.fixture(autouse=True)
def receipts_enabled(monkeypatch):
    """Restore receipt emission after tests (the CLI flips the flag)."""
    monkeypatch.setattr(features, "FEATURE_RECEIPTS_ENABLED", True)


@pytest.fixture
def quiet_receipts(monkeypatch):
    """Silence receipt output for tests that read stdout."""
    monkeypatch.setattr(features, "FEATURE_RECEIPTS_ENABLED", False)


def example_data(n: int) -> list[bytes]:
    """Single-byte leaves [0], [1], ..., [n-1]."""
    return [bytes([i]) for i in range(n)]


@pytest.fixture
def four_leaves():
    return example_data(4)


@pytest.fixture
def three_leaves():
    return [bytes([1]), bytes([2]), bytes([3])]


@pytest.fixture
def eight_leaves():
    return example_data(8)


@pytest.fixture
def records():
    """Realistic audit-log style records."""
    return [f"record-{i:03d}".encode() for i in range(13)]
