"""Pure geometry for the five-axis skills star.

Coordinate system (SVG):
- Origin at top-left of a 400x400 canvas, Y increases downward
- Axis 0 points up (-90 degrees); axes proceed clockwise
"""

import math
from collections.abc import Iterable, Mapping
from typing import Any, Union

from portfolio_intel.models.chart import Point, RadarChart, SkillPoint
from portfolio_intel.models.stats import SkillEntry

CANVAS_SIZE = 400
CENTER = 200.0
RADIUS = 145.0
GRID_LEVELS = 4
LABEL_OFFSET = 30.0
MIN_RATIO = 0.15
INNER_STAR_SCALE = 0.18
DEFAULT_AXIS_COUNT = 5
DEFAULT_SKILL_LABELS = ("Offense", "Defense", "Web", "Crypto", "Forensics")

SkillLike = Union[SkillEntry, Mapping[str, Any], tuple]


def _check_axis_count(axis_count: int) -> None:
    if axis_count < 3:
        raise ValueError(f"Radar chart needs at least 3 axes, got {axis_count}")


def axis_angle(index: int, axis_count: int = DEFAULT_AXIS_COUNT) -> float:
    """Angle in radians of axis `index`: starts pointing up, steps clockwise."""
    return -math.pi / 2 + index * (2 * math.pi / axis_count)


def polygon_points(
    scale: float = 1.0,
    axis_count: int = DEFAULT_AXIS_COUNT,
    center: float = CENTER,
    radius: float = RADIUS,
) -> list[Point]:
    """Regular polygon with one vertex per axis at radius * scale."""
    _check_axis_count(axis_count)
    points: list[Point] = []
    for i in range(axis_count):
        angle = axis_angle(i, axis_count)
        points.append(
            (
                center + math.cos(angle) * radius * scale,
                center + math.sin(angle) * radius * scale,
            )
        )
    return points


def default_label(index: int) -> str:
    """Placeholder axis name for a padded slot."""
    if index < len(DEFAULT_SKILL_LABELS):
        return DEFAULT_SKILL_LABELS[index]
    return f"Skill {index + 1}"


def _as_entry(skill: SkillLike) -> SkillEntry:
    if isinstance(skill, SkillEntry):
        return skill
    if isinstance(skill, Mapping):
        data = dict(skill)
        if data.get("value") is None:
            data["value"] = 0
        return SkillEntry.model_validate(data)
    name, value = skill
    return SkillEntry(name=name, value=0 if value is None else value)


def pad_skills(skills: Iterable[SkillLike], axis_count: int = DEFAULT_AXIS_COUNT) -> list[SkillEntry]:
    """
    Exactly axis_count entries: the first axis_count skills, then zero-valued
    placeholders named after their slot in DEFAULT_SKILL_LABELS.
    """
    _check_axis_count(axis_count)
    entries = [_as_entry(s) for s in list(skills)[:axis_count]]
    while len(entries) < axis_count:
        entries.append(SkillEntry(name=default_label(len(entries)), value=0))
    return entries


def layout_skills(
    skills: Iterable[SkillLike],
    axis_count: int = DEFAULT_AXIS_COUNT,
    *,
    center: float = CENTER,
    radius: float = RADIUS,
    label_offset: float = LABEL_OFFSET,
) -> list[SkillPoint]:
    """
    Data vertex and label anchor per axis.
    Values are scaled against the largest plotted value (floor 1) and the
    radius fraction is clamped to [MIN_RATIO, 1] so zero skills stay visible.
    Labels sit at radius + label_offset regardless of value.
    """
    display = pad_skills(skills, axis_count)
    max_value = max([s.value for s in display] + [1])

    points: list[SkillPoint] = []
    for i, skill in enumerate(display):
        ratio = max(MIN_RATIO, min(1.0, skill.value / max_value))
        angle = axis_angle(i, axis_count)
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        points.append(
            SkillPoint(
                name=skill.name,
                value=skill.value,
                ratio=ratio,
                x=center + cos_a * radius * ratio,
                y=center + sin_a * radius * ratio,
                label_x=center + cos_a * (radius + label_offset),
                label_y=center + sin_a * (radius + label_offset),
            )
        )
    return points


def grid_rings(axis_count: int = DEFAULT_AXIS_COUNT, levels: int = GRID_LEVELS) -> list[list[Point]]:
    """Concentric backdrop polygons at 1/levels, 2/levels, ... 1 of the radius."""
    return [polygon_points(step / levels, axis_count) for step in range(1, levels + 1)]


def inner_star(axis_count: int = DEFAULT_AXIS_COUNT) -> list[Point]:
    """Fixed decorative polygon at the chart center."""
    return polygon_points(INNER_STAR_SCALE, axis_count)


def build_radar_chart(skills: Iterable[SkillLike], axis_count: int = DEFAULT_AXIS_COUNT) -> RadarChart:
    """Data points plus the static backdrop (outline, rings, inner star)."""
    return RadarChart(
        center=CENTER,
        radius=RADIUS,
        axis_count=axis_count,
        points=layout_skills(skills, axis_count),
        rings=grid_rings(axis_count),
        outline=polygon_points(1.0, axis_count),
        inner_star=inner_star(axis_count),
    )


def _fmt(value: float) -> str:
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def points_attr(points: Iterable[Point]) -> str:
    """Serialize points for an SVG `points` attribute: 'x,y x,y ...'."""
    return " ".join(f"{_fmt(x)},{_fmt(y)}" for x, y in points)
