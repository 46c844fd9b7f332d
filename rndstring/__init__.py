"""
rndstring: random strings and tokens from the system CSPRNG.

Tokens are drawn from letters, digits, symbols, hex/base32/base64
encodings or caller-supplied alphabets. Bytes come from ``os.urandom``;
if that fails, a clock-seeded, non-cryptographic fallback stream keeps
things running (use the strict functions where that is unacceptable).
"""

__version__ = "0.1.0"

from rndstring.alphabets import as_alphabet, as_alphabet_set
from rndstring.exceptions import (
    AlphabetTooLarge,
    EntropySourceUnavailable,
    GeneratorAlreadyRegistered,
    InvalidAlphabet,
    NoDefaultGenerator,
    RndStringError,
    UnknownGeneratorName,
)
from rndstring.generators import (
    FunctionGenerator,
    Generator,
    generate,
    join,
    new_alphabet_generator,
    new_alphabet_set_generator,
    random_api_token,
    random_ipv4,
    random_password,
    random_string,
    set_default_generator,
)
from rndstring.pool import (
    EntropyPool,
    fill_random_bytes,
    fill_random_bytes_strict,
    get_pool,
    random_bytes,
    set_pool,
)
from rndstring.registry import list_generator_names, new_generator, register_generator
from rndstring.selector import select_from
from rndstring.sources import EntropySource, FallbackSource, SystemSource

__all__ = [
    "AlphabetTooLarge",
    "EntropyPool",
    "EntropySource",
    "EntropySourceUnavailable",
    "FallbackSource",
    "FunctionGenerator",
    "Generator",
    "GeneratorAlreadyRegistered",
    "InvalidAlphabet",
    "NoDefaultGenerator",
    "RndStringError",
    "SystemSource",
    "UnknownGeneratorName",
    "as_alphabet",
    "as_alphabet_set",
    "fill_random_bytes",
    "fill_random_bytes_strict",
    "generate",
    "get_pool",
    "join",
    "list_generator_names",
    "new_alphabet_generator",
    "new_alphabet_set_generator",
    "new_generator",
    "random_api_token",
    "random_bytes",
    "random_ipv4",
    "random_password",
    "random_string",
    "register_generator",
    "select_from",
    "set_default_generator",
    "set_pool",
    "__version__",
]
