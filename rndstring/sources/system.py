"""Operating system CSPRNG entropy source."""

from __future__ import annotations

import os

from rndstring.exceptions import EntropySourceUnavailable
from rndstring.sources.base import EntropySource


class SystemSource(EntropySource):
    """Entropy from the platform cryptographic random source.

    ``os.urandom()`` reads ``getrandom(2)`` / ``/dev/urandom`` on Unix and
    ``BCryptGenRandom`` on Windows. It is thread-safe and needs no locking
    on our side. Failures surface as ``OSError`` (no entropy device, seccomp
    filters) or ``NotImplementedError`` (no source on this platform).
    """

    name = "system"
    description = "Operating system CSPRNG (os.urandom)"
    cryptographic = True

    def __init__(self, urandom=None) -> None:
        self._urandom = urandom or os.urandom

    def is_available(self) -> bool:
        try:
            self._urandom(1)
        except (OSError, NotImplementedError):
            return False
        return True

    def fill(self, buffer) -> None:
        view = self._byte_view(buffer)
        if not len(view):
            return
        try:
            data = self._urandom(len(view))
        except (OSError, NotImplementedError) as e:
            raise EntropySourceUnavailable(f"{self.name}: {e}") from e
        if len(data) != len(view):
            raise EntropySourceUnavailable(
                f"{self.name}: short read ({len(data)} of {len(view)} bytes)"
            )
        view[:] = data
