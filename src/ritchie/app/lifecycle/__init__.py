"""Pre- and post-run gating around every rit command."""

from .service import CommandLifecycle, is_initialized  # noqa: F401

__all__ = ["CommandLifecycle", "is_initialized"]
