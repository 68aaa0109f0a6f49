"""Backend profile and repository documents, plus carousel projects."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class _BackendDocument(BaseModel):
    """Accepts the backend's camelCase keys and ignores fields we do not use."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Certification(_BackendDocument):
    name: str = ""
    issuer: str = ""
    date: str = ""
    url: str = ""


class Experience(_BackendDocument):
    role: str = ""
    company: str = ""
    date_range: str = Field(default="", alias="dateRange")
    description: list[str] = Field(default_factory=list)


class SiteProfile(_BackendDocument):
    """Document served by /api/profile."""

    display_name: str = Field(default="", alias="displayName")
    headline: str = ""
    bio: str = ""
    cv_url: str = Field(default="", alias="cvUrl")
    languages: list[str] = Field(default_factory=list)
    certifications: list[Certification] = Field(default_factory=list)
    experience: list[Experience] = Field(default_factory=list)


class Repo(_BackendDocument):
    """Repository entry served by /api/repos (already sorted by the backend)."""

    id: int = 0
    name: str
    full_name: str = Field(default="", alias="fullName")
    url: str = ""
    description: str = ""
    language: str = ""
    topics: Optional[list[str]] = None
    readme: str = ""
    pushed_at: Optional[str] = Field(default=None, alias="pushedAt")
    stars: int = 0
    forks: int = 0
    pinned: bool = False
    pin_order: int = Field(default=0, alias="pinOrder")


class RepoOverride(_BackendDocument):
    """Admin edit for one repository, sent as the PUT body."""

    description: str = ""
    readme: str = ""
    pinned: bool = False
    pin_order: int = Field(default=0, alias="pinOrder")


class Project(BaseModel):
    """Carousel entry: a featured project or a mapped repository."""

    name: str
    description: str = ""
    url: Optional[str] = None
    language: str = "Unknown"
    pushed_at: Optional[str] = None
    image: str = "/assets/project-fallback.jpeg"
