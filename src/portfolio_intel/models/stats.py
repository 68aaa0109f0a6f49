"""Normalized skills-tracker stats consumed by the rendering layer."""

from typing import Optional, Union

from pydantic import BaseModel, Field

UNKNOWN = "Unknown"


class SkillEntry(BaseModel):
    """One row of the skills matrix, value on a 0-100 scale."""

    name: str
    value: float = Field(default=0.0, ge=0)


class NormalizedStats(BaseModel):
    """Canonical record produced from any skills-tracker payload."""

    disabled: bool = False
    message: Optional[str] = Field(default=None, description="Only meaningful when disabled")

    rank: Union[int, float, str] = UNKNOWN
    room_count: Optional[Union[int, float]] = None
    rooms: list[str] = Field(default_factory=list)
    skills: list[SkillEntry] = Field(default_factory=list)
    skills_error: Optional[str] = None

    @property
    def rooms_completed(self) -> Union[float, int, str]:
        """Explicit count if known, else number of named rooms, else 'Unknown'."""
        if self.room_count is not None:
            return self.room_count
        return len(self.rooms) or UNKNOWN

    def top_skills(self, n: int = 5) -> list[SkillEntry]:
        """Highest-valued skills, already in descending order."""
        return self.skills[:n]
