"""Compare the running build against the published stable version."""

from __future__ import annotations

import platform

from ritchie.adapters.version.http_resolver import HttpVersionResolver
from ritchie.ports.version import VersionResolutionError, VersionResolver
from ritchie.settings import RuntimeSettings
from ritchie.utils import prompt

LATEST_VERSION_MSG = "Latest available version: %s"
VERSION_MSG = "%s\n  Build date: %s\n  Built with: %s\n"
VERSION_MSG_WITH_LATEST_VERSION = "%s\n  %s\n  Build date: %s\n  Built with: %s\n"


def built_with() -> str:
    return f"python{platform.python_version()}"


def newer_stable_version(resolver: VersionResolver, current_version: str) -> str | None:
    """Return the stable version when it differs from ``current_version``.

    Versions are compared as plain strings. Any resolution failure is treated
    as "nothing new" and never raised.
    """

    try:
        stable = resolver.stable_version()
    except VersionResolutionError:
        return None
    if stable == current_version:
        return None
    return stable


def format_version_message(version: str, build_date: str, latest_version: str | None = None) -> str:
    if latest_version is None:
        return VERSION_MSG % (version, build_date, built_with())
    latest = prompt.yellow(LATEST_VERSION_MSG % latest_version)
    return VERSION_MSG_WITH_LATEST_VERSION % (version, latest, build_date, built_with())


def verify_new_version(resolver: VersionResolver, current_version: str, build_date: str) -> str:
    latest = newer_stable_version(resolver, current_version)
    return format_version_message(current_version, build_date, latest)


def version_flag(settings: RuntimeSettings, resolver: VersionResolver | None = None) -> str:
    """Text printed by ``rit --version``; best effort within the configured timeout."""

    if resolver is None:
        resolver = HttpVersionResolver(settings.stable_version_url, timeout=settings.version_timeout)
    return verify_new_version(resolver, settings.version, settings.build_date)
