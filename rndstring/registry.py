"""Named generator registry.

Maps a name such as ``"hex"`` or ``"letters&digits"`` to a constructor
taking a length. For the byte encodings (``hex``, ``b32``, ``b64``,
``b64url``) the length is the number of random bytes encoded; for every
other built-in it is the length of the token.
"""

from __future__ import annotations

import logging
import threading

from rndstring.alphabets import DIGITS, HEXDIGITS, LOWERCASE, SYMBOLS, UPPERCASE
from rndstring.exceptions import GeneratorAlreadyRegistered, UnknownGeneratorName
from rndstring.generators import (
    Generator,
    GeneratorFactory,
    alphabet_set_factory,
    new_base32_generator,
    new_base64_generator,
    new_base64url_generator,
    new_dummy_generator,
    new_hex_generator,
)

logger = logging.getLogger(__name__)

# Every non-empty combination of the four symbol classes. Alphabet order
# within a set is always lcase, ucase, digits, symbols.
ALPHABET_GENERATORS: dict[str, tuple[str, ...]] = {
    "lcase": (LOWERCASE,),
    "ucase": (UPPERCASE,),
    "digits": (DIGITS,),
    "symbols": (SYMBOLS,),
    "letters": (LOWERCASE, UPPERCASE),
    "lcase&digits": (LOWERCASE, DIGITS),
    "ucase&digits": (UPPERCASE, DIGITS),
    "lcase&symbols": (LOWERCASE, SYMBOLS),
    "ucase&symbols": (UPPERCASE, SYMBOLS),
    "digits&symbols": (DIGITS, SYMBOLS),
    "letters&digits": (LOWERCASE, UPPERCASE, DIGITS),
    "letters&symbols": (LOWERCASE, UPPERCASE, SYMBOLS),
    "lcase&symbols&digits": (LOWERCASE, DIGITS, SYMBOLS),
    "ucase&symbols&digits": (UPPERCASE, DIGITS, SYMBOLS),
    "letters&symbols&digits": (LOWERCASE, UPPERCASE, DIGITS, SYMBOLS),
}

ALIASES: dict[str, str] = {
    "ascii": "letters&symbols&digits",
}

_generators: dict[str, GeneratorFactory] = {
    "hex": new_hex_generator,
    "b64": new_base64_generator,
    "b64url": new_base64url_generator,
    "b32": new_base32_generator,
    "dummy": new_dummy_generator,
}
_generators.update({name: alphabet_set_factory(*abcs) for name, abcs in ALPHABET_GENERATORS.items()})
# Exactly n hex characters, unlike "hex" which encodes n bytes.
_generators["hexstr"] = alphabet_set_factory(HEXDIGITS)
_generators.update({alias: _generators[target] for alias, target in ALIASES.items()})
_lock = threading.Lock()


def register_generator(name: str, factory: GeneratorFactory | None = None):
    """Register *factory* under *name*.

    Can also be used as a decorator::

        @register_generator("pin")
        def new_pin_generator(n):
            return new_alphabet_generator(n, "0123456789")

    Raises
    ------
    GeneratorAlreadyRegistered
        If *name* is taken. Registering twice is a programming error and
        is never silently accepted.
    """
    def decorator(fn: GeneratorFactory) -> GeneratorFactory:
        with _lock:
            if name in _generators:
                raise GeneratorAlreadyRegistered(f"generator {name!r} is already registered")
            _generators[name] = fn
        logger.debug("Registered generator %r -> %r", name, fn)
        return fn

    if factory is None:
        return decorator
    return decorator(factory)


def new_generator(name: str, length: int) -> Generator:
    """Build the generator registered under *name* for tokens of *length*.

    Raises
    ------
    UnknownGeneratorName
        If nothing is registered under *name*.
    """
    try:
        factory = _generators[name]
    except KeyError:
        raise UnknownGeneratorName(name) from None
    return factory(length)


def list_generator_names() -> set[str]:
    """Names of all registered generators."""
    with _lock:
        return set(_generators)
