"""Runtime settings for the rit CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from ritchie import BUILD_DATE, __version__

DEFAULT_STABLE_VERSION_URL = "https://commons-repo.ritchiecli.io/stable.txt"
DEFAULT_VERSION_TIMEOUT = 1.0


@dataclass(frozen=True)
class RuntimeSettings:
    home_dir: Path
    log_dir: Path
    stable_version_url: str = DEFAULT_STABLE_VERSION_URL
    version: str = __version__
    build_date: str = BUILD_DATE
    version_timeout: float = DEFAULT_VERSION_TIMEOUT

    @property
    def commons_repo_dir(self) -> Path:
        return self.home_dir / "repos" / "commons"

    @property
    def tutorial_file(self) -> Path:
        return self.home_dir / "tutorial.json"


def _default_home_dir() -> Path:
    override = os.environ.get("RITCHIE_HOME")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".rit"


def _timeout_from_env() -> float:
    raw = os.environ.get("RITCHIE_VERSION_TIMEOUT")
    if raw is None or not raw.strip():
        return DEFAULT_VERSION_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        return DEFAULT_VERSION_TIMEOUT
    return value if value > 0 else DEFAULT_VERSION_TIMEOUT


def load_settings() -> RuntimeSettings:
    base = _default_home_dir()
    return RuntimeSettings(
        home_dir=base,
        log_dir=base / "logs",
        stable_version_url=os.environ.get("RITCHIE_STABLE_VERSION_URL") or DEFAULT_STABLE_VERSION_URL,
        version_timeout=_timeout_from_env(),
    )


SETTINGS = load_settings()
