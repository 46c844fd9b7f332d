"""Byte-fill facade over a primary and a fallback entropy source.

Architecture:
1. Try the primary (cryptographic) source
2. On any error from the primary, log and fill from the fallback source
3. Strict mode skips step 2 and lets the error propagate
4. Per-source counters for health reporting
5. Thread-safe for concurrent access

One pool is created at import time and serves as the process default
(``get_pool`` / ``set_pool``); it owns the only fallback stream most
programs will ever use.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass

from rndstring.exceptions import EntropySourceUnavailable
from rndstring.sources.base import EntropySource
from rndstring.sources.fallback import FallbackSource
from rndstring.sources.system import SystemSource

logger = logging.getLogger(__name__)


@dataclass
class SourceState:
    """Runtime counters for one source of the pool."""

    source: EntropySource
    fills: int = 0
    total_bytes: int = 0
    failures: int = 0


class EntropyPool:
    """Random byte facade with transparent fallback.

    Usage::

        pool = EntropyPool()
        buf = bytearray(32)
        pool.fill(buf)              # never fails
        pool.fill_strict(buf)       # raises if the OS source is broken
        data = pool.get_random_bytes(16)

    Parameters
    ----------
    primary:
        Preferred source. Defaults to :class:`SystemSource`.
    fallback:
        Source used when the primary fails. Defaults to a fresh
        :class:`FallbackSource`.
    strict:
        If True, :meth:`fill` never falls back and behaves like
        :meth:`fill_strict`.
    """

    def __init__(
        self,
        primary: EntropySource | None = None,
        fallback: EntropySource | None = None,
        strict: bool = False,
    ) -> None:
        self._primary = SourceState(primary or SystemSource())
        self._fallback = SourceState(fallback or FallbackSource())
        self._lock = threading.Lock()
        self.strict = strict

    @property
    def primary(self) -> EntropySource:
        return self._primary.source

    @property
    def fallback(self) -> EntropySource:
        return self._fallback.source

    @property
    def sources(self) -> list[SourceState]:
        return [self._primary, self._fallback]

    def _record(self, ss: SourceState, n: int) -> None:
        with self._lock:
            ss.fills += 1
            ss.total_bytes += n

    def _record_failure(self, ss: SourceState) -> None:
        with self._lock:
            ss.failures += 1

    # ── output ──

    def fill_strict(self, buffer) -> None:
        """Fill *buffer* from the primary source only.

        Raises
        ------
        EntropySourceUnavailable
            If the primary source fails for any reason. Errors of other
            types are chained as ``__cause__``. No fallback is attempted.
        """
        try:
            self._primary.source.fill(buffer)
        except EntropySourceUnavailable:
            self._record_failure(self._primary)
            raise
        except Exception as e:
            self._record_failure(self._primary)
            raise EntropySourceUnavailable(f"{self._primary.source.name}: {e!r}") from e
        self._record(self._primary, memoryview(buffer).nbytes)

    def fill(self, buffer) -> None:
        """Fill *buffer* with random bytes, falling back if needed.

        :meth:`fill_strict` reports every primary failure as
        ``EntropySourceUnavailable``, so catching that type here covers
        any error the primary raises.
        """
        if self.strict:
            self.fill_strict(buffer)
            return
        try:
            self.fill_strict(buffer)
        except EntropySourceUnavailable as e:
            logger.warning(
                "Entropy source %r unavailable (%s), falling back to %r",
                self._primary.source.name,
                e,
                self._fallback.source.name,
            )
            self._fallback.source.fill(buffer)
            self._record(self._fallback, memoryview(buffer).nbytes)

    def get_random_bytes(self, n_bytes: int) -> bytes:
        """Return *n_bytes* random bytes (empty for ``n_bytes <= 0``)."""
        buf = bytearray(max(n_bytes, 0))
        if buf:
            self.fill(buf)
        return bytes(buf)

    # ── health ──

    def health_report(self) -> dict:
        with self._lock:
            states = [
                (role, ss.source, ss.fills, ss.total_bytes, ss.failures)
                for role, ss in (("primary", self._primary), ("fallback", self._fallback))
            ]
        return {
            "strict": self.strict,
            "fills": sum(s[2] for s in states),
            "output_bytes": sum(s[3] for s in states),
            "fallback_fills": states[1][2],
            "sources": [
                {
                    "role": role,
                    "name": src.name,
                    "cryptographic": src.cryptographic,
                    "available": src.is_available(),
                    "fills": fills,
                    "bytes": nbytes,
                    "failures": failures,
                }
                for role, src, fills, nbytes, failures in states
            ],
        }

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__} primary={self.primary.name!r} "
            f"fallback={self.fallback.name!r} strict={self.strict}>"
        )


_default_pool = EntropyPool()
_default_lock = threading.Lock()


def get_pool() -> EntropyPool:
    """Get the process-wide default pool."""
    return _default_pool


def set_pool(pool: EntropyPool) -> EntropyPool:
    """Install *pool* as the process default and return the previous one."""
    global _default_pool
    with _default_lock:
        previous, _default_pool = _default_pool, pool
    return previous


def fill_random_bytes(buffer) -> None:
    """Fill *buffer* from the default pool. Never fails for a writable buffer."""
    get_pool().fill(buffer)


def fill_random_bytes_strict(buffer) -> None:
    """Fill *buffer* from the system CSPRNG only; raises if it is unavailable."""
    get_pool().fill_strict(buffer)


def random_bytes(n_bytes: int) -> bytes:
    """Return *n_bytes* random bytes from the default pool."""
    return get_pool().get_random_bytes(n_bytes)
