"""Display-ready values for the portfolio UI: numbers, dates, skill bars, rooms, projects."""

import math
from datetime import datetime
from typing import Any, Iterable, Optional

from portfolio_intel.models.site import Project, Repo
from portfolio_intel.models.stats import UNKNOWN, SkillEntry

ROOM_DISPLAY_LIMIT = 20
MIN_BAR_WIDTH = 6.0

PLACEHOLDER_PROJECT = Project(
    name="Mission Slot",
    description="Projects will appear here once repository data loads from GitHub.",
    url="#",
    language="N/A",
)


def format_number(value: Any) -> str:
    """Thousands separators for numbers and numeric strings; anything else as text."""
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, int):
        return f"{value:,}"
    try:
        num = float(value)
    except (TypeError, ValueError, OverflowError):
        return str(value) if value else UNKNOWN
    if not math.isfinite(num):
        return str(value) if value else UNKNOWN
    if num.is_integer():
        return f"{int(num):,}"
    return f"{num:,.3f}".rstrip("0").rstrip(".")


def format_date(iso: Optional[str]) -> str:
    """ISO timestamp -> 'Mar 9, 2026'; 'N/A' when missing or unparseable."""
    if not iso:
        return "N/A"
    try:
        dt = datetime.fromisoformat(iso.strip().replace("Z", "+00:00"))
    except ValueError:
        return "N/A"
    return f"{dt:%b} {dt.day}, {dt.year}"


def skill_bars(skills: list[SkillEntry]) -> list[dict]:
    """Bar rows scaled against the top skill; every bar keeps a minimum visible width."""
    max_value = max([s.value for s in skills] + [1])
    return [
        {
            "name": s.name,
            "value": round(s.value),
            "width": max(MIN_BAR_WIDTH, s.value / max_value * 100),
        }
        for s in skills
    ]


def room_lines(
    rooms: list[str],
    room_count: Optional[float] = None,
    limit: int = ROOM_DISPLAY_LIMIT,
) -> list[str]:
    """Room list for display, truncated with a '+N more rooms' line."""
    shown = rooms[:limit]
    if not shown:
        if room_count:
            return [
                f"{format_number(room_count)} rooms completed "
                "(room names not exposed by API response)."
            ]
        return ["No completed room names available from API response."]
    lines = list(shown)
    if len(rooms) > len(shown):
        lines.append(f"+{len(rooms) - len(shown)} more rooms")
    return lines


def project_from_repo(repo: Repo) -> Project:
    return Project(
        name=repo.name,
        description=repo.description or "No description available yet.",
        url=repo.url or None,
        language=repo.language or "Unknown",
        pushed_at=repo.pushed_at,
    )


def merge_projects(featured: Iterable[Project], repos: Iterable[Repo]) -> list[Project]:
    """
    Featured projects first, then repositories not already listed.
    Duplicates are detected by URL or by name, both case-insensitive.
    """
    merged = [p.model_copy() for p in featured]
    seen_urls = {(p.url or "").lower() for p in merged if p.url}
    seen_names = {p.name.lower() for p in merged}

    for repo in repos:
        project = project_from_repo(repo)
        url_key = (project.url or "").lower()
        name_key = project.name.lower()
        if (url_key and url_key in seen_urls) or name_key in seen_names:
            continue
        if url_key:
            seen_urls.add(url_key)
        seen_names.add(name_key)
        merged.append(project)

    return merged or [PLACEHOLDER_PROJECT.model_copy()]
