"""Data models for payloads, normalized stats, chart geometry and backend documents."""

from portfolio_intel.models.chart import RadarChart, SkillPoint
from portfolio_intel.models.raw import RawPayload
from portfolio_intel.models.site import (
    Certification,
    Experience,
    Project,
    Repo,
    RepoOverride,
    SiteProfile,
)
from portfolio_intel.models.stats import NormalizedStats, SkillEntry

__all__ = [
    "Certification",
    "Experience",
    "NormalizedStats",
    "Project",
    "RadarChart",
    "RawPayload",
    "Repo",
    "RepoOverride",
    "SiteProfile",
    "SkillEntry",
    "SkillPoint",
]
