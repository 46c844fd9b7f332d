"""Shared fixtures."""

import pytest

from rndstring.exceptions import EntropySourceUnavailable
from rndstring.pool import EntropyPool, set_pool
from rndstring.sources.base import EntropySource


class BrokenSource(EntropySource):
    """Primary stand-in that always fails, like a host without /dev/urandom."""

    name = "broken"
    description = "Always unavailable"
    cryptographic = True

    def __init__(self):
        self.calls = 0

    def is_available(self) -> bool:
        return False

    def fill(self, buffer) -> None:
        self.calls += 1
        raise EntropySourceUnavailable("broken: no entropy device")


@pytest.fixture
def broken_source():
    return BrokenSource()


@pytest.fixture
def fallback_pool(broken_source):
    """Install a default pool whose primary always fails."""
    pool = EntropyPool(primary=broken_source)
    previous = set_pool(pool)
    yield pool
    set_pool(previous)


@pytest.fixture
def strict_broken_pool(broken_source):
    """Install a strict default pool whose primary always fails."""
    pool = EntropyPool(primary=broken_source, strict=True)
    previous = set_pool(pool)
    yield pool
    set_pool(previous)
