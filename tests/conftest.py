from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
TESTS = ROOT / "tests"
SANDBOX_HOME = ROOT / ".test_place" / "rit-home"
os.environ.setdefault("RITCHIE_HOME", str(SANDBOX_HOME))
SANDBOX_HOME.mkdir(parents=True, exist_ok=True)
for entry in (SRC, TESTS):
    if str(entry) not in sys.path:
        sys.path.insert(0, str(entry))

from ritchie.settings import RuntimeSettings  # noqa: E402


@pytest.fixture
def settings(tmp_path: Path) -> RuntimeSettings:
    home = tmp_path / "home" / ".rit"
    return RuntimeSettings(
        home_dir=home,
        log_dir=tmp_path / "logs",
        stable_version_url="https://example.invalid/stable.txt",
        version="v1.0.0",
        build_date="2024-05-01",
    )
