"""Shared test fixtures."""

import itertools

import pytest


class StubEntropy:
    """Deterministic entropy source that cycles through a byte pattern and counts calls."""

    def __init__(self, pattern=b"\x01"):
        self._bytes = itertools.cycle(pattern)
        self.calls = []

    def __call__(self, n):
        self.calls.append(n)
        return bytes(next(self._bytes) for _ in range(n))


class FailingEntropy:
    """Entropy source whose reads always fail."""

    def __call__(self, n):
        raise OSError("entropy source unavailable")


@pytest.fixture
def ones_entropy():
    """Every byte is 0x01 (low bit set)."""
    return StubEntropy(b"\x01")


@pytest.fixture
def alternating_entropy():
    """Low bit alternates 1, 0, 1, 0..."""
    return StubEntropy(b"\x01\x00")


@pytest.fixture
def failing_entropy():
    return FailingEntropy()


@pytest.fixture
def avatar_folder(tmp_path):
    """Avatar folder that does not exist yet."""
    return tmp_path / "static" / "avatars"


@pytest.fixture
def make_entropy():
    """Factory for StubEntropy with a custom byte pattern."""
    return StubEntropy
