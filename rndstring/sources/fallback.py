"""Degraded-mode entropy source used when the system CSPRNG fails.

This is *not* a cryptographic generator. It exists so that token
generation keeps working on hosts where ``os.urandom()`` is broken,
accepting weaker output instead of a hard failure.

Algorithm (one ``fill`` call, entirely under the instance lock):

1. Skip ``time_ns() % 32`` draws of 13 bytes so that output does not
   line up with an observer's knowledge of recent stream state.
2. Draw ``n`` output bytes, then ``n`` mask bytes.
3. ``out[i] ^= mask[i] ^ t`` where ``t = time_ns() % 256`` is shared by
   every position of the call.
"""

from __future__ import annotations

import threading
import time

import numpy as np

from rndstring.sources.base import EntropySource

SKIP_MODULUS = 32
SKIP_CHUNK = 13


class FallbackSource(EntropySource):
    """Clock-seeded PCG64 stream with skip and mask whitening.

    Parameters
    ----------
    seed:
        Seed for the underlying stream. Defaults to ``time.time_ns()``.
    clock:
        Nanosecond clock used for the skip count and the time byte.
    """

    name = "fallback"
    description = "Clock-seeded PCG64 with skip/XOR whitening (non-cryptographic)"
    cryptographic = False

    def __init__(self, seed: int | None = None, clock=time.time_ns) -> None:
        self._clock = clock
        self._seed = clock() if seed is None else seed
        self._rng = np.random.Generator(np.random.PCG64(self._seed))
        self._lock = threading.Lock()

    def is_available(self) -> bool:
        return True

    def _skip(self) -> int:
        n = self._clock() % SKIP_MODULUS
        for _ in range(n):
            self._rng.bytes(SKIP_CHUNK)
        return n

    def fill(self, buffer) -> None:
        view = self._byte_view(buffer)
        n = len(view)
        if not n:
            return
        with self._lock:
            self._skip()
            out = np.frombuffer(self._rng.bytes(n), dtype=np.uint8)
            mask = np.frombuffer(self._rng.bytes(n), dtype=np.uint8)
            now = np.uint8(self._clock() % 256)
            view[:] = (out ^ mask ^ now).tobytes()
