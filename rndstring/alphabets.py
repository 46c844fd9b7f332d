"""Built-in alphabets and alphabet validation.

An alphabet is a tuple of one-character strings. Indexes into it come
from a single random byte, so it may hold at most 255 symbols, and an
alphabet set may hold at most 255 alphabets.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from rndstring.exceptions import AlphabetTooLarge, InvalidAlphabet

MAX_ALPHABET_SIZE = 255

Alphabet = tuple[str, ...]
AlphabetSet = tuple[Alphabet, ...]

LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS = "0123456789"
HEXDIGITS = "0123456789abcdef"
# no quote characters ('"`): they are easily confused and need escaping
SYMBOLS = "+-*/@&^%|$#!?[]{}()\\:,.;="


def _symbol(item) -> str:
    if isinstance(item, int):
        try:
            return chr(item)
        except (ValueError, OverflowError) as e:
            raise InvalidAlphabet(f"invalid code point {item!r}") from e
    if isinstance(item, str) and len(item) == 1:
        return item
    raise InvalidAlphabet(f"alphabet symbols must be single characters, got {item!r}")


def as_alphabet(symbols: str | bytes | bytearray | Iterable) -> Alphabet:
    """Validate *symbols* and return them as a new alphabet tuple.

    Accepts a ``str``, a ``bytes``-like object (one symbol per byte,
    decoded as latin-1), or an iterable of one-character strings or
    integer code points. The result never aliases the input.

    Raises
    ------
    AlphabetTooLarge
        More than 255 symbols.
    InvalidAlphabet
        No symbols, or an entry that is not a single character.
    """
    if isinstance(symbols, (bytes, bytearray, memoryview)):
        alphabet = tuple(bytes(symbols).decode("latin-1"))
    elif isinstance(symbols, str):
        alphabet = tuple(symbols)
    else:
        alphabet = tuple(_symbol(s) for s in symbols)
    if not alphabet:
        raise InvalidAlphabet("alphabet is empty")
    if len(alphabet) > MAX_ALPHABET_SIZE:
        raise AlphabetTooLarge(len(alphabet))
    return alphabet


def as_alphabet_set(alphabets: Sequence) -> AlphabetSet:
    """Validate every alphabet of *alphabets* and return a new tuple of them."""
    result = tuple(as_alphabet(a) for a in alphabets)
    if not result:
        raise InvalidAlphabet("alphabet set is empty")
    if len(result) > MAX_ALPHABET_SIZE:
        raise AlphabetTooLarge(len(result))
    return result
