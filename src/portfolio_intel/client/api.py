"""HTTP client for the portfolio backend (/api/profile, /api/repos, /api/tryhackme, admin)."""

import logging
from typing import Any, Optional, Union
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from portfolio_intel.config import ClientConfig
from portfolio_intel.models.raw import RawPayload
from portfolio_intel.models.site import Repo, RepoOverride, SiteProfile

logger = logging.getLogger(__name__)

PROFILE_PATH = "/api/profile"
REPOS_PATH = "/api/repos"
TRYHACKME_PATH = "/api/tryhackme"
ADMIN_REPO_PATH = "/api/admin/repo/{name}"
ADMIN_REFRESH_PATH = "/api/admin/refresh"

DEFAULT_HEADERS = {
    "User-Agent": "portfolio-intel/0.1",
    "Accept": "application/json",
}


class PortfolioApiError(RuntimeError):
    """Backend request failed on every candidate base URL."""

    def __init__(self, path: str, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path


def parse_repos(data: Any) -> list[Repo]:
    """Repositories from a /api/repos body; non-list bodies and invalid entries are dropped."""
    if not isinstance(data, list):
        return []
    repos: list[Repo] = []
    for item in data:
        if not isinstance(item, dict):
            continue
        try:
            repos.append(Repo.model_validate(item))
        except ValidationError as e:
            logger.warning("Skipping invalid repo entry %r: %s", item.get("name"), e)
    return repos


def parse_profile(data: Any) -> SiteProfile:
    return SiteProfile.model_validate(data if isinstance(data, dict) else {})


class PortfolioApiClient:
    """
    Synchronous client for the portfolio backend.
    GETs fall back through the candidate base URLs; admin mutations go to the first one.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        config: Optional[ClientConfig] = None,
        client: Optional[httpx.Client] = None,
    ):
        self._config = (config or ClientConfig()).with_env()
        self._bases = self._config.candidate_bases(base_url)
        self._client = client or httpx.Client(
            timeout=self._config.timeout,
            follow_redirects=True,
            headers=DEFAULT_HEADERS,
        )

    @property
    def base_urls(self) -> list[str]:
        return list(self._bases)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "PortfolioApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _get_json(self, path: str) -> Any:
        """GET path from each base in turn; raise PortfolioApiError with the last failure."""
        last_error: Optional[Exception] = None
        for base in self._bases:
            try:
                response = self._client.get(base + path)
                response.raise_for_status()
                return response.json()
            except (httpx.HTTPError, ValueError) as e:
                logger.warning("GET %s%s failed: %s", base, path, e)
                last_error = e
        raise PortfolioApiError(path, str(last_error)) from last_error

    def _send_json(self, method: str, path: str, body: Optional[dict] = None) -> Any:
        url = self._bases[0] + path
        try:
            response = self._client.request(method, url, json=body)
            response.raise_for_status()
            return response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise PortfolioApiError(path, str(e)) from e

    def get_profile(self) -> SiteProfile:
        """Fetch the site profile document."""
        return parse_profile(self._get_json(PROFILE_PATH))

    def get_repos(self) -> list[Repo]:
        """Fetch repositories in backend order (pinned first, then most recently pushed)."""
        return parse_repos(self._get_json(REPOS_PATH))

    def get_tryhackme(self) -> RawPayload:
        """Fetch the raw skills-tracker payload; feed it to normalizer.normalize."""
        return RawPayload(data=self._get_json(TRYHACKME_PATH), source=TRYHACKME_PATH)

    def update_repo(self, name: str, override: Union[RepoOverride, dict]) -> dict:
        """PUT custom description/readme/pin settings for one repository."""
        if not name or not name.strip():
            raise ValueError("repo name required")
        if isinstance(override, dict):
            override = RepoOverride.model_validate(override)
        path = ADMIN_REPO_PATH.format(name=quote(name.strip(), safe=""))
        return self._send_json("PUT", path, override.model_dump(by_alias=True))

    def refresh_repos(self) -> dict:
        """Ask the backend to re-sync repositories from GitHub."""
        return self._send_json("POST", ADMIN_REFRESH_PATH)
