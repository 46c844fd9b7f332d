"""Exception hierarchy for rndstring."""

from __future__ import annotations


class RndStringError(Exception):
    """Base class for every error raised by rndstring."""


class InvalidAlphabet(RndStringError, ValueError):
    """An alphabet is empty or contains something that is not one symbol."""


class AlphabetTooLarge(InvalidAlphabet):
    """An alphabet (or alphabet set) has more than 255 entries.

    Symbol indexes are derived from a single random byte, so larger
    alphabets cannot be addressed.
    """

    def __init__(self, size: int, limit: int = 255) -> None:
        self.size = size
        self.limit = limit
        super().__init__(f"alphabet is too large: {size} symbols (max {limit})")


class UnknownGeneratorName(RndStringError, KeyError):
    """No generator is registered under the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"no generator registered under {self.name!r}"


class EntropySourceUnavailable(RndStringError):
    """An entropy source could not fill the requested buffer."""


class GeneratorAlreadyRegistered(RndStringError, RuntimeError):
    """A generator name was registered twice. This is a programming error."""


class NoDefaultGenerator(RndStringError, RuntimeError):
    """``generate()`` was called before ``set_default_generator()``."""
