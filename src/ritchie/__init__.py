"""rit command-line gatekeeper."""

__version__ = "dev"
BUILD_DATE = "unknown"

__all__ = ["__version__", "BUILD_DATE"]
