"""Tests for radar chart layout."""

import math

import pytest

from portfolio_intel.chart.radar import (
    CENTER,
    LABEL_OFFSET,
    MIN_RATIO,
    RADIUS,
    axis_angle,
    build_radar_chart,
    grid_rings,
    inner_star,
    layout_skills,
    pad_skills,
    points_attr,
    polygon_points,
)
from portfolio_intel.models.stats import SkillEntry


def _distance(x: float, y: float) -> float:
    return math.hypot(x - CENTER, y - CENTER)


class TestAxisAngle:
    """Axes start pointing up and step clockwise."""

    def test_first_axis_points_up(self) -> None:
        """Axis 0 points straight up."""
        assert axis_angle(0) == pytest.approx(-math.pi / 2)

    def test_step(self) -> None:
        """Axes are evenly spaced."""
        assert axis_angle(1) - axis_angle(0) == pytest.approx(2 * math.pi / 5)
        assert axis_angle(1, 6) - axis_angle(0, 6) == pytest.approx(math.pi / 3)

    def test_clockwise_in_screen_coordinates(self) -> None:
        """Second vertex is right of center and above it (SVG y grows downward)."""
        x, y = polygon_points()[1]
        assert x > CENTER
        assert y < CENTER


class TestPadSkills:
    """Tests for pad_skills."""

    def test_pads_with_slot_labels(self) -> None:
        """Missing slots take the default label for that slot."""
        padded = pad_skills([{"name": "Web", "value": 90}])
        assert [s.name for s in padded] == ["Web", "Defense", "Web", "Crypto", "Forensics"]
        assert [s.value for s in padded] == [90, 0, 0, 0, 0]

    def test_truncates_extra(self) -> None:
        """Skills beyond the axis count are dropped."""
        skills = [SkillEntry(name=f"s{i}", value=i) for i in range(7)]
        assert [s.name for s in pad_skills(skills)] == ["s0", "s1", "s2", "s3", "s4"]

    def test_labels_beyond_defaults(self) -> None:
        """Slots past the default labels are numbered."""
        padded = pad_skills([], axis_count=6)
        assert padded[-1].name == "Skill 6"

    def test_accepts_tuples(self) -> None:
        """(name, value) tuples are accepted."""
        assert pad_skills([("Web", 40)])[0] == SkillEntry(name="Web", value=40)

    def test_missing_value_is_zero(self) -> None:
        """A None value reads as 0 in mappings and tuples."""
        padded = pad_skills([{"name": "Web", "value": None}, {"name": "Crypto"}, ("Forensics", None)])
        assert [(s.name, s.value) for s in padded[:3]] == [("Web", 0), ("Crypto", 0), ("Forensics", 0)]

    def test_layout_with_missing_value(self) -> None:
        """Layout tolerates None values like zero."""
        points = layout_skills([{"name": "Web", "value": None}])
        assert points[0].ratio == MIN_RATIO

    def test_too_few_axes(self) -> None:
        """Fewer than three axes is rejected."""
        with pytest.raises(ValueError, match="at least 3 axes"):
            pad_skills([], axis_count=2)


class TestLayoutSkills:
    """Tests for layout_skills."""

    def test_single_skill_padded_to_five(self) -> None:
        """One skill yields five points, padding at the minimum ratio."""
        points = layout_skills([{"name": "Web", "value": 90}])
        assert len(points) == 5
        first = points[0]
        assert first.name == "Web"
        assert first.value == 90
        assert first.ratio == 1.0
        assert first.x == pytest.approx(CENTER)
        assert first.y == pytest.approx(CENTER - RADIUS)
        for point in points[1:]:
            assert point.value == 0
            assert point.ratio == MIN_RATIO

    def test_scaled_against_max(self) -> None:
        """Ratios are relative to the largest value, floored at 0.15."""
        points = layout_skills([("A", 100), ("B", 50), ("C", 10)])
        assert [p.ratio for p in points[:3]] == [1.0, 0.5, MIN_RATIO]

    def test_all_zero_values(self) -> None:
        """max floor of 1 avoids division by zero; every vertex sits at the minimum ratio."""
        points = layout_skills([("A", 0), ("B", 0)])
        assert all(p.ratio == MIN_RATIO for p in points)

    def test_small_values_scale_against_floor(self) -> None:
        """The max floor of 1 keeps small values small."""
        points = layout_skills([("A", 0.5)])
        assert points[0].ratio == 0.5

    def test_vertex_distance_matches_ratio(self) -> None:
        """Each vertex lies at radius times ratio."""
        for point in layout_skills([("A", 80), ("B", 40), ("C", 20), ("D", 60), ("E", 30)]):
            assert _distance(point.x, point.y) == pytest.approx(RADIUS * point.ratio)

    def test_labels_outside_outer_ring(self) -> None:
        """Labels sit at radius plus the label offset."""
        for point in layout_skills([("A", 80), ("B", 1)]):
            assert _distance(point.label_x, point.label_y) == pytest.approx(RADIUS + LABEL_OFFSET)

    def test_label_shares_vertex_angle(self) -> None:
        """A label lies on its vertex's axis."""
        point = layout_skills([("A", 50), ("B", 100)])[1]
        vertex_angle = math.atan2(point.y - CENTER, point.x - CENTER)
        label_angle = math.atan2(point.label_y - CENTER, point.label_x - CENTER)
        assert vertex_angle == pytest.approx(label_angle)

    def test_input_order_kept(self) -> None:
        """Layout does not reorder skills."""
        names = [p.name for p in layout_skills([("Low", 10), ("High", 90)])]
        assert names[:2] == ["Low", "High"]


class TestBackdrop:
    """Static rings, outline and inner star."""

    def test_grid_rings(self) -> None:
        """Rings sit at quarter steps of the radius."""
        rings = grid_rings()
        assert len(rings) == 4
        assert all(len(ring) == 5 for ring in rings)
        radii = [_distance(*ring[0]) for ring in rings]
        assert radii == pytest.approx([RADIUS / 4, RADIUS / 2, RADIUS * 3 / 4, RADIUS])

    def test_inner_star(self) -> None:
        """The inner star is fixed at 0.18 of the radius."""
        star = inner_star()
        assert len(star) == 5
        assert all(_distance(x, y) == pytest.approx(RADIUS * 0.18) for x, y in star)

    def test_build_radar_chart(self) -> None:
        """The chart carries points and the static backdrop."""
        chart = build_radar_chart([SkillEntry(name="Web", value=70)])
        assert chart.center == CENTER
        assert chart.radius == RADIUS
        assert chart.axis_count == 5
        assert len(chart.points) == 5
        assert chart.outline == chart.rings[-1]
        assert chart.data_polygon[0] == (chart.points[0].x, chart.points[0].y)

    def test_build_radar_chart_other_axis_count(self) -> None:
        """Every polygon follows the axis count."""
        chart = build_radar_chart([], axis_count=6)
        assert len(chart.points) == 6
        assert all(len(ring) == 6 for ring in chart.rings)

    def test_chart_serializes(self) -> None:
        """The chart dumps to plain JSON."""
        data = build_radar_chart([("Web", 70)]).model_dump(mode="json")
        assert set(data["points"][0]) == {"name", "value", "ratio", "x", "y", "label_x", "label_y"}
        assert len(data["rings"]) == 4


class TestPointsAttr:
    """Tests for points_attr."""

    def test_formats_points(self) -> None:
        """Points join as 'x,y x,y'."""
        assert points_attr([(200.0, 55.0), (1.5, 2.25)]) == "200,55 1.5,2.25"

    def test_rounds_to_two_places(self) -> None:
        """Coordinates keep at most two decimals."""
        assert points_attr([(337.9026, 155.1932)]) == "337.9,155.19"

    def test_negative_zero(self) -> None:
        """Negative zero prints as 0."""
        assert points_attr([(-0.001, 0.0)]) == "0,0"
