"""Port for resolving the published stable version."""

from __future__ import annotations

from abc import ABC, abstractmethod


class VersionResolutionError(RuntimeError):
    """Raised when the stable version cannot be fetched."""


class VersionResolver(ABC):
    @abstractmethod
    def stable_version(self) -> str:
        """Return the latest published stable version string."""


__all__ = ["VersionResolutionError", "VersionResolver"]
