"""Port definition for home directory management."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class DirectoryError(RuntimeError):
    """Raised when a required directory cannot be created."""


class DirCreateChecker(ABC):
    @abstractmethod
    def create(self, path: Path) -> None:
        """Create ``path`` (and parents) when absent."""

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Return True when ``path`` exists."""


__all__ = ["DirCreateChecker", "DirectoryError"]
