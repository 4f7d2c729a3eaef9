"""JSON file storage for the tutorial flag."""

from __future__ import annotations

import json
from pathlib import Path

from ritchie.domain.tutorial import TUTORIAL_ON, TUTORIAL_STATES, TutorialHolder
from ritchie.ports.tutorial import TutorialFinder, TutorialFinderError, TutorialSetter


class FileTutorialFinder(TutorialFinder):
    """Read ``tutorial.json``; a missing file means the tutorial is on."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def find(self) -> TutorialHolder:
        if not self._path.exists():
            return TutorialHolder(current=TUTORIAL_ON)
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise TutorialFinderError(f"unable to read tutorial state from {self._path}: {exc}") from exc
        if not isinstance(data, dict):
            raise TutorialFinderError(f"tutorial state in {self._path} must be an object")
        return TutorialHolder(current=str(data.get("tutorial", TUTORIAL_ON)))


class FileTutorialSetter(TutorialSetter):
    def __init__(self, path: Path) -> None:
        self._path = path

    def set(self, state: str) -> TutorialHolder:
        if state not in TUTORIAL_STATES:
            raise ValueError(f"tutorial state must be one of {', '.join(TUTORIAL_STATES)}")
        holder = TutorialHolder(current=state)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(holder.as_dict(), indent=2) + "\n", encoding="utf-8")
        return holder


__all__ = ["FileTutorialFinder", "FileTutorialSetter"]
