"""Filesystem-backed directory manager."""

from __future__ import annotations

from pathlib import Path

from ritchie.ports.directory import DirCreateChecker, DirectoryError


class FSDirManager(DirCreateChecker):
    def create(self, path: Path) -> None:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise DirectoryError(f"failed to create directory {path}: {exc.strerror or exc}") from exc

    def exists(self, path: Path) -> bool:
        return path.exists()


__all__ = ["FSDirManager"]
