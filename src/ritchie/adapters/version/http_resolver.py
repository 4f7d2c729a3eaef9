"""HTTP resolver for the published stable version."""

from __future__ import annotations

import requests

from ritchie.ports.version import VersionResolutionError, VersionResolver


class HttpVersionResolver(VersionResolver):
    def __init__(self, url: str, timeout: float = 1.0, session: requests.Session | None = None) -> None:
        self._url = url
        self._timeout = timeout
        self._session = session

    def stable_version(self) -> str:
        # requests.get opens and closes its own session when none is injected
        get = self._session.get if self._session is not None else requests.get
        try:
            response = get(
                self._url,
                headers={"User-Agent": "rit-version-resolver"},
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            raise VersionResolutionError(f"stable version request failed: {exc}") from exc
        if not 200 <= response.status_code < 300:
            raise VersionResolutionError(f"stable version request failed: {response.status_code}")
        version = response.text.strip()
        if not version:
            raise VersionResolutionError("stable version response was empty")
        return version


__all__ = ["HttpVersionResolver"]
