"""Radar chart geometry in a fixed 400x400 logical canvas."""

from pydantic import BaseModel, Field

Point = tuple[float, float]


class SkillPoint(BaseModel):
    """Data vertex and label anchor for one radar axis."""

    name: str
    value: float = 0.0
    ratio: float = Field(..., description="Radius fraction after clamping to [0.15, 1]")
    x: float
    y: float
    label_x: float
    label_y: float


class RadarChart(BaseModel):
    """Everything needed to paint the skills star: data points plus static backdrop."""

    center: float
    radius: float
    axis_count: int
    points: list[SkillPoint] = Field(default_factory=list)
    rings: list[list[Point]] = Field(default_factory=list)
    outline: list[Point] = Field(default_factory=list)
    inner_star: list[Point] = Field(default_factory=list)

    @property
    def data_polygon(self) -> list[Point]:
        return [(p.x, p.y) for p in self.points]
