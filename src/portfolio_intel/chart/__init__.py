"""Radar (star) chart layout for the skills matrix."""

from portfolio_intel.chart.radar import (
    DEFAULT_AXIS_COUNT,
    DEFAULT_SKILL_LABELS,
    axis_angle,
    build_radar_chart,
    grid_rings,
    inner_star,
    layout_skills,
    pad_skills,
    points_attr,
    polygon_points,
)

__all__ = [
    "DEFAULT_AXIS_COUNT",
    "DEFAULT_SKILL_LABELS",
    "axis_angle",
    "build_radar_chart",
    "grid_rings",
    "inner_star",
    "layout_skills",
    "pad_skills",
    "points_attr",
    "polygon_points",
]
