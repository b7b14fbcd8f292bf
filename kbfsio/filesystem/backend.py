"""Interface shared by the mounted and bridged ways of reaching KBFS."""

from abc import ABC


class Backend(ABC):
    """Base class for a strategy that serves the read-only KBFS operations."""

    def exists(self, path: str) -> bool:
        """Check if a file exists, returning False if it is absent."""
        raise NotImplementedError()

    def read(self, path: str) -> bytes:
        """Read the full contents of a file."""
        raise NotImplementedError()
