"""Concurrent fetch of profile, repos and skills payload, joined into one view model."""

import asyncio
import logging
from typing import Any, Optional

import httpx
from pydantic import BaseModel, Field, ValidationError

from portfolio_intel.chart import build_radar_chart
from portfolio_intel.config import ClientConfig
from portfolio_intel.display import merge_projects
from portfolio_intel.models.chart import RadarChart
from portfolio_intel.models.site import Project, Repo, SiteProfile
from portfolio_intel.models.stats import NormalizedStats
from portfolio_intel.normalizer import normalize

from .api import (
    DEFAULT_HEADERS,
    PROFILE_PATH,
    REPOS_PATH,
    TRYHACKME_PATH,
    PortfolioApiError,
    parse_profile,
    parse_repos,
)

logger = logging.getLogger(__name__)

SECTIONS = {
    "profile": PROFILE_PATH,
    "repos": REPOS_PATH,
    "tryhackme": TRYHACKME_PATH,
}


class Dashboard(BaseModel):
    """Everything the single-page UI renders; failed sections are listed in `errors`."""

    profile: Optional[SiteProfile] = None
    repos: list[Repo] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    stats: NormalizedStats = Field(default_factory=NormalizedStats)
    chart: RadarChart
    errors: dict[str, str] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors


async def _get_json(client: httpx.AsyncClient, bases: list[str], path: str) -> Any:
    last_error: Optional[Exception] = None
    for base in bases:
        try:
            response = await client.get(base + path)
            response.raise_for_status()
            return response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("GET %s%s failed: %s", base, path, e)
            last_error = e
    raise PortfolioApiError(path, str(last_error)) from last_error


def build_dashboard(results: dict[str, Any], featured: Optional[list[Project]] = None) -> Dashboard:
    """
    Join per-section results (decoded JSON or the exception that replaced it).
    A failed section leaves its defaults in place and records a message.
    """
    errors: dict[str, str] = {}
    profile: Optional[SiteProfile] = None
    repos: list[Repo] = []
    stats = NormalizedStats()

    for section, result in results.items():
        if isinstance(result, Exception):
            logger.warning("Section %s unavailable: %s", section, result)
            errors[section] = str(result) or type(result).__name__
            continue
        if section == "profile":
            try:
                profile = parse_profile(result)
            except ValidationError as e:
                errors[section] = f"invalid profile document: {e.error_count()} error(s)"
        elif section == "repos":
            repos = parse_repos(result)
        elif section == "tryhackme":
            stats = normalize(result)

    return Dashboard(
        profile=profile,
        repos=repos,
        projects=merge_projects(featured or [], repos),
        stats=stats,
        chart=build_radar_chart(stats.top_skills(5)),
        errors=errors,
    )


async def fetch_dashboard(
    base_url: Optional[str] = None,
    config: Optional[ClientConfig] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> Dashboard:
    """
    Issue the three fetches concurrently and join them.
    Each section succeeds or fails on its own.
    """
    config = (config or ClientConfig()).with_env()
    bases = config.candidate_bases(base_url)
    owns_client = client is None
    client = client or httpx.AsyncClient(
        timeout=config.timeout,
        follow_redirects=True,
        headers=DEFAULT_HEADERS,
    )
    try:
        fetched = await asyncio.gather(
            *(_get_json(client, bases, path) for path in SECTIONS.values()),
            return_exceptions=True,
        )
    finally:
        if owns_client:
            await client.aclose()

    for result in fetched:
        if isinstance(result, BaseException) and not isinstance(result, Exception):
            raise result
    return build_dashboard(dict(zip(SECTIONS, fetched)), config.featured_projects)


def run_dashboard(
    base_url: Optional[str] = None,
    config: Optional[ClientConfig] = None,
) -> Dashboard:
    """Synchronous wrapper around fetch_dashboard."""
    return asyncio.run(fetch_dashboard(base_url=base_url, config=config))
