"""Terminal colouring helpers."""

from __future__ import annotations

import sys
from typing import TextIO

_YELLOW = "\033[33m"
_CYAN = "\033[36m"
_RESET = "\033[0m"


def yellow(text: str) -> str:
    return f"{_YELLOW}{text}{_RESET}"


def cyan(text: str) -> str:
    return f"{_CYAN}{text}{_RESET}"


def warning(text: str, stream: TextIO | None = None) -> None:
    print(yellow(text), file=stream or sys.stdout)


def info(text: str, stream: TextIO | None = None) -> None:
    print(cyan(text), file=stream or sys.stdout)
