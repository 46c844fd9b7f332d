"""Abstract base class for all entropy sources."""

from __future__ import annotations

from abc import ABC, abstractmethod


class EntropySource(ABC):
    """Base class for a random byte provider.

    Every source must declare metadata and implement two methods:
    ``is_available`` and ``fill``.
    """

    name: str = "unnamed"
    description: str = ""
    cryptographic: bool = False

    @abstractmethod
    def is_available(self) -> bool:
        """Return True if the source can operate on this machine."""
        ...

    @abstractmethod
    def fill(self, buffer) -> None:
        """Overwrite every byte of *buffer* with random data.

        Parameters
        ----------
        buffer:
            A writable, contiguous byte buffer (``bytearray``, writable
            ``memoryview`` or ``numpy.uint8`` array). The source keeps no
            reference to it after returning.

        Raises
        ------
        EntropySourceUnavailable
            If the source cannot produce bytes right now.
        """
        ...

    def get_random_bytes(self, n_bytes: int) -> bytes:
        """Return *n_bytes* fresh bytes from this source."""
        buf = bytearray(max(n_bytes, 0))
        if buf:
            self.fill(buf)
        return bytes(buf)

    # ── helpers available to subclasses ──

    @staticmethod
    def _byte_view(buffer) -> memoryview:
        """Flat unsigned-byte view over *buffer*."""
        view = memoryview(buffer)
        if view.readonly:
            raise TypeError(f"cannot fill read-only buffer of type {type(buffer).__name__}")
        return view.cast("B") if view.format != "B" or view.ndim != 1 else view

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
