"""Tutorial state model."""

from __future__ import annotations

from dataclasses import dataclass

TUTORIAL_ON = "on"
TUTORIAL_OFF = "off"
TUTORIAL_STATES = (TUTORIAL_ON, TUTORIAL_OFF)

TAG_TUTORIAL = "\n[TUTORIAL]"
MESSAGE_TITLE = "To initialize the ritchie:"
MESSAGE_BODY = ' ∙ Run "rit init"\n'


@dataclass(frozen=True)
class TutorialHolder:
    current: str = TUTORIAL_ON

    @property
    def enabled(self) -> bool:
        return self.current == TUTORIAL_ON

    def as_dict(self) -> dict[str, str]:
        return {"tutorial": self.current}
