from __future__ import annotations

import json
from pathlib import Path

import pytest

from ritchie.adapters.tutorial.file_finder import FileTutorialFinder, FileTutorialSetter
from ritchie.ports.tutorial import TutorialFinderError


def test_missing_file_means_tutorial_on(tmp_path: Path) -> None:
    holder = FileTutorialFinder(tmp_path / "tutorial.json").find()
    assert holder.current == "on"
    assert holder.enabled


def test_setter_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "home" / "tutorial.json"

    FileTutorialSetter(path).set("off")

    assert json.loads(path.read_text(encoding="utf-8")) == {"tutorial": "off"}
    holder = FileTutorialFinder(path).find()
    assert holder.current == "off"
    assert not holder.enabled


def test_unknown_state_is_passed_through(tmp_path: Path) -> None:
    path = tmp_path / "tutorial.json"
    path.write_text(json.dumps({"tutorial": "maybe"}), encoding="utf-8")

    assert FileTutorialFinder(path).find().current == "maybe"


def test_malformed_file_raises(tmp_path: Path) -> None:
    path = tmp_path / "tutorial.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(TutorialFinderError):
        FileTutorialFinder(path).find()


def test_non_object_payload_raises(tmp_path: Path) -> None:
    path = tmp_path / "tutorial.json"
    path.write_text(json.dumps(["on"]), encoding="utf-8")

    with pytest.raises(TutorialFinderError):
        FileTutorialFinder(path).find()


def test_setter_rejects_unknown_state(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        FileTutorialSetter(tmp_path / "tutorial.json").set("maybe")
