"""Entropy source implementations."""

from rndstring.sources.base import EntropySource
from rndstring.sources.fallback import FallbackSource
from rndstring.sources.system import SystemSource

ALL_SOURCES: list[type[EntropySource]] = [
    SystemSource,
    FallbackSource,
]

__all__ = ["EntropySource", "FallbackSource", "SystemSource", "ALL_SOURCES"]
