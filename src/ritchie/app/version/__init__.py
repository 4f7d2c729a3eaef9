"""Version comparison and messaging."""

from .service import (
    LATEST_VERSION_MSG,
    VERSION_MSG,
    VERSION_MSG_WITH_LATEST_VERSION,
    built_with,
    format_version_message,
    newer_stable_version,
    verify_new_version,
    version_flag,
)

__all__ = [
    "LATEST_VERSION_MSG",
    "VERSION_MSG",
    "VERSION_MSG_WITH_LATEST_VERSION",
    "built_with",
    "format_version_message",
    "newer_stable_version",
    "verify_new_version",
    "version_flag",
]
