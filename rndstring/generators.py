"""Token generators.

A generator produces one random string per :meth:`Generator.generate`
call. Constructors take a length and return a ready generator; they do
all validation up front so that ``generate()`` itself never fails.

Usage::

    from rndstring.generators import new_alphabet_generator, join, new_hex_generator

    pin = new_alphabet_generator(6, "0123456789")
    pin.generate()                                   # '402913'
    join("-", new_hex_generator(4), pin)             # '9f03c1aa-775120'
"""

from __future__ import annotations

import base64
import threading
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence

from rndstring.alphabets import (
    DIGITS,
    LOWERCASE,
    SYMBOLS,
    UPPERCASE,
    AlphabetSet,
    as_alphabet,
    as_alphabet_set,
)
from rndstring.exceptions import NoDefaultGenerator
from rndstring.pool import random_bytes
from rndstring.selector import select_from


class Generator(ABC):
    """Anything that can produce a token on demand.

    Implementations must be safe for concurrent use.
    """

    @abstractmethod
    def generate(self) -> str:
        """Generate and return a new token."""
        ...


class FunctionGenerator(Generator):
    """Adapts a zero-argument callable to the :class:`Generator` interface."""

    def __init__(self, fn: Callable[[], str], description: str = "") -> None:
        self._fn = fn
        self.description = description

    def generate(self) -> str:
        return self._fn()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.description or self._fn!r}>"


GeneratorFactory = Callable[[int], Generator]


# ── byte encodings ──
# For these the length is the number of random bytes encoded, not the
# length of the resulting string.


def new_hex_generator(n: int) -> Generator:
    """*n* random bytes, hex encoded (``2 * n`` characters)."""
    return FunctionGenerator(lambda: random_bytes(n).hex(), f"hex({n})")


def new_base64_generator(n: int) -> Generator:
    """*n* random bytes, standard padded base64."""
    return FunctionGenerator(
        lambda: base64.b64encode(random_bytes(n)).decode("ascii"), f"b64({n})"
    )


def new_base64url_generator(n: int) -> Generator:
    """*n* random bytes, URL-safe base64 without padding."""
    return FunctionGenerator(
        lambda: base64.urlsafe_b64encode(random_bytes(n)).decode("ascii").rstrip("="),
        f"b64url({n})",
    )


def new_base32_generator(n: int) -> Generator:
    """*n* random bytes, standard padded base32."""
    return FunctionGenerator(
        lambda: base64.b32encode(random_bytes(n)).decode("ascii"), f"b32({n})"
    )


def new_dummy_generator(n: int) -> Generator:
    """Always ``"A" * n``. Not random at all; for tests and fixtures only."""
    return FunctionGenerator(lambda: "A" * max(n, 0), f"dummy({n})")


# ── alphabet based ──


def new_alphabet_set_generator(n: int, alphabets: Sequence) -> Generator:
    """*n* symbols, each from a randomly chosen alphabet of *alphabets*.

    Raises
    ------
    AlphabetTooLarge, InvalidAlphabet
        If *alphabets* is not a valid alphabet set.
    """
    alphabet_set = as_alphabet_set(alphabets)
    return FunctionGenerator(lambda: select_from(n, alphabet_set), f"alphabets({n})")


def new_alphabet_generator(n: int, alphabet) -> Generator:
    """*n* symbols drawn from a caller-supplied *alphabet*.

    The alphabet is copied, so later changes to the caller's object do
    not affect the generator.

    Raises
    ------
    AlphabetTooLarge
        If *alphabet* has more than 255 symbols.
    InvalidAlphabet
        If *alphabet* is empty or malformed.
    """
    alphabet_set: AlphabetSet = (as_alphabet(alphabet),)
    return FunctionGenerator(lambda: select_from(n, alphabet_set), f"alphabet({n})")


def alphabet_set_factory(*alphabets: str) -> GeneratorFactory:
    """Return a length-only constructor over a fixed alphabet set."""
    alphabet_set = as_alphabet_set(alphabets)

    def factory(n: int) -> Generator:
        return FunctionGenerator(lambda: select_from(n, alphabet_set), f"alphabets({n})")

    return factory


# ── composition ──


def join(delimiter: str, *generators: Generator) -> str:
    """Generate one token per generator and join them with *delimiter*."""
    return delimiter.join(g.generate() for g in generators)


_default_generator: Generator | None = None
_default_lock = threading.Lock()


def set_default_generator(generator: Generator | None) -> None:
    """Set (or clear, with None) the process-wide default generator."""
    global _default_generator
    with _default_lock:
        _default_generator = generator


def generate() -> str:
    """Generate a token with the default generator.

    Raises
    ------
    NoDefaultGenerator
        If :func:`set_default_generator` has not been called.
    """
    generator = _default_generator
    if generator is None:
        raise NoDefaultGenerator("no default generator set; call set_default_generator() first")
    return generator.generate()


# ── one-shot helpers ──

_LETTERS_DIGITS: AlphabetSet = as_alphabet_set((LOWERCASE, UPPERCASE, DIGITS))
_LETTERS_SYMBOLS_DIGITS: AlphabetSet = as_alphabet_set((LOWERCASE, UPPERCASE, DIGITS, SYMBOLS))


def random_string(n: int) -> str:
    """*n* characters of letters, digits and symbols."""
    return select_from(n, _LETTERS_SYMBOLS_DIGITS)


def random_password() -> str:
    """An 18 character password of letters, digits and symbols."""
    return random_string(18)


def random_api_token() -> str:
    """A 24 character token of letters and digits (about 143 bits)."""
    return select_from(24, _LETTERS_DIGITS)


def random_ipv4() -> str:
    """A random dotted-quad IPv4 address (any address, reserved ones included)."""
    return ".".join(str(b) for b in random_bytes(4))
