"""
Tests for nested polygon pattern generation.
"""

import pytest

from conftest import count_commands, path_points
from bauhaus_patterns.core.geometry import Point2D, distance
from bauhaus_patterns.core.polygons import (
    POLYGON_PRESETS,
    generate_polygon,
    generate_polygon_pattern,
    generate_polygon_with_bridges,
    get_polygon_vertices,
)


class TestVertices:
    """Tests for get_polygon_vertices."""

    def test_first_vertex_at_top(self, origin):
        """The first vertex points straight up (negative y)."""
        vertices = get_polygon_vertices(origin, 10, 6)
        assert len(vertices) == 6
        assert vertices[0].x == pytest.approx(0, abs=1e-9)
        assert vertices[0].y == pytest.approx(-10)

    def test_on_circumcircle(self, center):
        """All vertices lie on the circumradius."""
        for vertex in get_polygon_vertices(center, 50, 7, rotation_deg=13):
            assert distance(center, vertex) == pytest.approx(50)

    def test_rotation(self, origin):
        """Rotation turns the first vertex clockwise on screen."""
        vertex = get_polygon_vertices(origin, 10, 4, rotation_deg=90)[0]
        assert vertex.x == pytest.approx(10)
        assert vertex.y == pytest.approx(0, abs=1e-9)

    def test_no_sides(self, origin):
        """Non-positive side counts give no vertices."""
        assert get_polygon_vertices(origin, 10, 0) == []
        assert get_polygon_vertices(origin, 10, -3) == []


class TestGeneratePolygon:
    """Tests for generate_polygon."""

    def test_square(self, origin):
        """A four-sided polygon is a diamond starting at the top."""
        assert generate_polygon(origin, 10, 4) == "M0,-10 L10,0 L0,10 L-10,0 Z"

    def test_closed(self, center):
        """Polygons are closed paths with one line per remaining vertex."""
        path = generate_polygon(center, 50, 6)
        assert path.endswith("Z")
        assert count_commands(path, "L") == 5

    def test_no_sides_empty(self, origin):
        """No vertices, no path."""
        assert generate_polygon(origin, 10, 0) == ""


class TestPolygonWithBridges:
    """Tests for generate_polygon_with_bridges."""

    def test_segments_per_edge(self, origin):
        """Two bridges per edge split each edge into three segments."""
        path = generate_polygon_with_bridges(origin, 100, 6, bridge_count=12, bridge_width=8)
        assert count_commands(path, "M") == 18
        assert count_commands(path, "L") == 18
        assert "Z" not in path

    def test_bridges_below_sides(self, origin):
        """Fewer bridges than sides splits at the vertices only."""
        path = generate_polygon_with_bridges(origin, 100, 6, bridge_count=3, bridge_width=8)
        assert count_commands(path, "M") == 6

    def test_remainder_dropped(self, origin):
        """Bridges are distributed per edge; the remainder is dropped."""
        path = generate_polygon_with_bridges(origin, 100, 6, bridge_count=8, bridge_width=8)
        assert count_commands(path, "M") == 12

    def test_bridge_gap_width(self, origin):
        """Gap between consecutive segments on an edge equals the bridge width."""
        path = generate_polygon_with_bridges(origin, 100, 4, bridge_count=4, bridge_width=10)
        points = path_points(path)
        # First edge: two segments, end of the first to start of the second
        first_end = Point2D(*points[1])
        second_start = Point2D(*points[2])
        assert distance(first_end, second_start) == pytest.approx(10, abs=0.02)

    def test_segments_cover_edge_ends(self, origin):
        """The first and last segments reach the vertices."""
        path = generate_polygon_with_bridges(origin, 10, 4, bridge_count=4, bridge_width=1)
        assert path.startswith("M0,-10 ")
        assert "L10,0" in path

    def test_too_wide_draws_full_edges(self, origin):
        """Bridges that do not fit leave each edge whole."""
        path = generate_polygon_with_bridges(origin, 100, 6, bridge_count=12, bridge_width=60)
        assert count_commands(path, "M") == 6

    def test_no_sides(self, origin):
        """No vertices, no path."""
        assert generate_polygon_with_bridges(origin, 100, 0, bridge_count=6) == ""


class TestPolygonPattern:
    """Tests for generate_polygon_pattern."""

    def test_count(self):
        """One polygon per radius."""
        pattern = generate_polygon_pattern({"polygonCount": 4})
        assert len(pattern.polygons) == 4
        assert all(p.sides == 6 for p in pattern.polygons)

    def test_bridged(self, polygon_config_dict):
        """Bridged configs give segmented paths."""
        pattern = generate_polygon_pattern(polygon_config_dict)
        assert count_commands(pattern.polygons[0].path_data, "M") == 18

    def test_deterministic(self, polygon_config_dict):
        """Same config, same output."""
        assert generate_polygon_pattern(polygon_config_dict) == generate_polygon_pattern(polygon_config_dict)

    def test_outer_boundary(self):
        """Boundary is the closed polygon at the outer radius."""
        pattern = generate_polygon_pattern({"outerRadius": 10, "sides": 4, "polygonCount": 1})
        assert pattern.outer_boundary == "M10,0 L20,10 L10,20 L0,10 Z"

    def test_degenerate_sides(self):
        """A polygon with no sides draws nothing and has no boundary."""
        pattern = generate_polygon_pattern({"sides": 0, "polygonCount": 2})
        assert all(p.path_data == "" for p in pattern.polygons)
        assert pattern.outer_boundary is None
        assert pattern.path_strings() == []

    def test_golden_ratio_rejected(self):
        """Golden-ratio spacing is rejected for polygons."""
        with pytest.raises(ValueError):
            generate_polygon_pattern({"spacingMode": "goldenRatio"})

    def test_presets(self):
        """Named presets map to side counts."""
        assert POLYGON_PRESETS["triangle"] == 3
        assert POLYGON_PRESETS["hexagon"] == 6
        assert POLYGON_PRESETS["dodecagon"] == 12
