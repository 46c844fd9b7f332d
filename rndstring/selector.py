"""Random selection of symbols from an alphabet set.

For each output position two random bytes are used: the first picks the
alphabet (``byte % len(alphabets)``), the second picks the symbol within
it (``byte % len(alphabet)``). Alphabets are therefore chosen with roughly
equal probability regardless of their size.

The modulo reduction is only exactly uniform when the divisor divides 256;
otherwise low indexes are very slightly favoured. This is kept as is so
that output distributions stay the same across versions.
"""

from __future__ import annotations

import numpy as np

from rndstring.alphabets import AlphabetSet
from rndstring.pool import EntropyPool, get_pool


def _random_indexes(n: int, pool: EntropyPool) -> np.ndarray:
    buf = np.empty(n, dtype=np.uint8)
    pool.fill(buf)
    return buf.astype(np.intp)


def select_from(length: int, alphabets: AlphabetSet, pool: EntropyPool | None = None) -> str:
    """Return *length* symbols drawn from *alphabets*.

    *alphabets* must already be validated (see
    :func:`rndstring.alphabets.as_alphabet_set`): 1..255 alphabets of
    1..255 symbols each. ``length <= 0`` returns an empty string.
    """
    if length <= 0:
        return ""
    if pool is None:
        pool = get_pool()

    if len(alphabets) == 1:
        # every choice byte would map to index 0
        which = np.zeros(length, dtype=np.intp)
    else:
        which = _random_indexes(length, pool) % len(alphabets)

    sizes = np.fromiter((len(a) for a in alphabets), dtype=np.intp, count=len(alphabets))
    symbols = _random_indexes(length, pool) % sizes[which]

    return "".join(
        alphabets[a][s] for a, s in zip(which.tolist(), symbols.tolist())
    )
