"""Command lifecycle controller.

Every invocation passes through :meth:`CommandLifecycle.pre_run` before the
command body and :meth:`CommandLifecycle.post_run` after it. The pre-run hook
ensures the home directory exists and blocks commands that need an
initialised installation; the post-run hook surfaces the upgrade notice for
bare ``rit`` invocations and the first-run tutorial banner.
"""

from __future__ import annotations

from pathlib import Path

from ritchie.app.version.service import format_version_message, newer_stable_version
from ritchie.domain.command import (
    INIT_WHITELIST,
    MSG_INIT,
    UPGRADE_WHITELIST,
    PreRunDecision,
    is_completion_invocation,
    is_whitelisted,
)
from ritchie.domain.tutorial import MESSAGE_BODY, MESSAGE_TITLE, TAG_TUTORIAL, TUTORIAL_ON
from ritchie.ports.directory import DirCreateChecker, DirectoryError
from ritchie.ports.tutorial import TutorialFinder, TutorialFinderError
from ritchie.ports.version import VersionResolver
from ritchie.settings import RuntimeSettings
from ritchie.utils import prompt
from ritchie.utils.telemetry import record_event


def is_initialized(home_dir: Path, directory: DirCreateChecker) -> bool:
    return directory.exists(home_dir / "repos" / "commons")


class CommandLifecycle:
    def __init__(
        self,
        settings: RuntimeSettings,
        directory: DirCreateChecker,
        tutorial_finder: TutorialFinder,
        resolver: VersionResolver,
    ) -> None:
        self._settings = settings
        self._dir = directory
        self._tutorial = tutorial_finder
        self._resolver = resolver

    @property
    def initialized(self) -> bool:
        return is_initialized(self._settings.home_dir, self._dir)

    def pre_run(self, command_path: str) -> PreRunDecision:
        try:
            self._dir.create(self._settings.home_dir)
        except DirectoryError as exc:
            record_event(
                self._settings,
                "lifecycle.directory_failed",
                {"command": command_path, "home": str(self._settings.home_dir), "error": str(exc)},
            )
            raise

        if is_whitelisted(INIT_WHITELIST, command_path) or is_completion_invocation(command_path):
            return PreRunDecision.proceed()

        if not self.initialized:
            record_event(self._settings, "lifecycle.blocked", {"command": command_path})
            return PreRunDecision.early_exit(MSG_INIT)

        return PreRunDecision.proceed()

    def post_run(self, command_path: str) -> None:
        self.verify_new_version(command_path)

        if not self.initialized:
            try:
                holder = self._tutorial.find()
            except TutorialFinderError as exc:
                record_event(self._settings, "tutorial.failed", {"command": command_path, "error": str(exc)})
                raise
            show_tutorial(holder.current)

    def verify_new_version(self, command_path: str) -> None:
        if not is_whitelisted(UPGRADE_WHITELIST, command_path):
            return
        latest = newer_stable_version(self._resolver, self._settings.version)
        record_event(
            self._settings,
            "version.check",
            {"current": self._settings.version, "latest": latest},
            status="outdated" if latest else "current",
        )
        if latest is None:
            return
        prompt.warning(format_version_message(self._settings.version, self._settings.build_date, latest))


def show_tutorial(tutorial_status: str) -> None:
    if tutorial_status != TUTORIAL_ON:
        return
    prompt.info(TAG_TUTORIAL)
    prompt.info(MESSAGE_TITLE)
    print(MESSAGE_BODY)
