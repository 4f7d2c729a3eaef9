"""Ports for reading and writing the tutorial flag."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ritchie.domain.tutorial import TutorialHolder


class TutorialFinderError(RuntimeError):
    """Raised when the tutorial state cannot be read."""


class TutorialFinder(ABC):
    @abstractmethod
    def find(self) -> TutorialHolder:
        """Return the persisted tutorial state."""


class TutorialSetter(ABC):
    @abstractmethod
    def set(self, state: str) -> TutorialHolder:
        """Persist ``state`` and return the resulting holder."""


__all__ = ["TutorialFinder", "TutorialFinderError", "TutorialSetter"]
