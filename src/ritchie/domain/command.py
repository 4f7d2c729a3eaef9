"""Command paths, whitelists and the pre-run decision model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

ROOT_COMMAND = "rit"
COMPLETE_MARKER = "__complete"

INIT_WHITELIST: tuple[str, ...] = (
    ROOT_COMMAND,
    f"{ROOT_COMMAND} help",
    f"{ROOT_COMMAND} completion zsh",
    f"{ROOT_COMMAND} completion bash",
    f"{ROOT_COMMAND} completion fish",
    f"{ROOT_COMMAND} completion powershell",
    f"{ROOT_COMMAND} init",
    f"{ROOT_COMMAND} upgrade",
)

UPGRADE_WHITELIST: tuple[str, ...] = (ROOT_COMMAND,)

MSG_INIT = f"To start using {ROOT_COMMAND}, you need to initialize {ROOT_COMMAND} first.\nCommand: {ROOT_COMMAND} init"


def command_path(*names: str) -> str:
    """Join subcommand names under the root command, e.g. ``rit completion bash``."""

    return " ".join((ROOT_COMMAND, *names))


def is_whitelisted(whitelist: Iterable[str], path: str) -> bool:
    return path in tuple(whitelist)


def is_completion_invocation(path: str) -> bool:
    return COMPLETE_MARKER in path


class PreRunAction(str, Enum):
    PROCEED = "proceed"
    EARLY_EXIT = "early_exit"


@dataclass(frozen=True)
class PreRunDecision:
    """Outcome of the pre-run gate.

    ``EARLY_EXIT`` is not an error: the caller prints ``message`` and
    terminates the invocation with ``exit_code`` without running the body.
    """

    action: PreRunAction
    message: str = ""
    exit_code: int = 0

    @classmethod
    def proceed(cls) -> "PreRunDecision":
        return cls(action=PreRunAction.PROCEED)

    @classmethod
    def early_exit(cls, message: str, exit_code: int = 0) -> "PreRunDecision":
        return cls(action=PreRunAction.EARLY_EXIT, message=message, exit_code=exit_code)

    @property
    def should_proceed(self) -> bool:
        return self.action is PreRunAction.PROCEED


__all__ = [
    "COMPLETE_MARKER",
    "INIT_WHITELIST",
    "MSG_INIT",
    "PreRunAction",
    "PreRunDecision",
    "ROOT_COMMAND",
    "UPGRADE_WHITELIST",
    "command_path",
    "is_completion_invocation",
    "is_whitelisted",
]
