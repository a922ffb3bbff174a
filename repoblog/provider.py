"""HTTP client for the repository content provider."""

from __future__ import annotations

import logging
from urllib.parse import quote

import requests
from pydantic import ValidationError

from . import __version__
from .config import ProviderConfig
from .content import RepoContents

logger = logging.getLogger(__name__)


class UpstreamFetchError(RuntimeError):
    """Raised when the provider cannot be reached or answers with a non-2xx status."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class ContentProviderClient:
    """Fetch a repository snapshot (tree plus markdown file contents).

    Without an injected ``session`` every fetch opens and closes its own
    ``requests.Session``: the threading server handles each request on a
    fresh thread, so sessions are never shared between threads.
    """

    def __init__(self, config: ProviderConfig | None = None, session: requests.Session | None = None) -> None:
        self._config = config or ProviderConfig()
        self._session = session

    @property
    def config(self) -> ProviderConfig:
        return self._config

    def build_url(self, owner: str, repo: str, branch: str) -> str:
        segments = "/".join(quote(part, safe="") for part in (owner, repo))
        return f"{self._config.base_url}/{segments}/tree/{quote(branch, safe='/')}"

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._config.user_agent:
            headers["User-Agent"] = self._config.user_agent
        else:
            headers["User-Agent"] = f"repoblog/{__version__}"
        return headers

    def fetch(self, owner: str, repo: str, branch: str) -> RepoContents:
        if self._session is not None:
            return self._fetch(self._session, owner, repo, branch)
        with requests.Session() as session:
            return self._fetch(session, owner, repo, branch)

    def _fetch(self, session: requests.Session, owner: str, repo: str, branch: str) -> RepoContents:
        url = self.build_url(owner, repo, branch)
        params = {"ext": self._config.extension}
        logger.debug("Fetching %s (ext=%s)", url, self._config.extension)
        try:
            response = session.get(
                url,
                params=params,
                headers=self._headers(),
                timeout=self._config.timeout,
            )
        except requests.RequestException as exc:
            logger.warning("Content provider unreachable for %s: %s", url, exc)
            raise UpstreamFetchError(502, str(exc)) from exc

        # Unfollowed redirects count as failures too.
        if not 200 <= response.status_code < 300:
            reason = response.reason or f"HTTP {response.status_code}"
            logger.warning("Content provider answered %s for %s: %s", response.status_code, url, reason)
            raise UpstreamFetchError(response.status_code, reason)

        payload = response.json()
        try:
            return RepoContents.model_validate(payload)
        except ValidationError as exc:
            raise ValueError(f"Unexpected response from content provider: {exc}") from exc

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
