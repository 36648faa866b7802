"""
Tests for ring pattern generation.
"""

import math
import pytest

from conftest import count_commands, path_points
from bauhaus_patterns.core.geometry import Point2D, distance
from bauhaus_patterns.core.rings import (
    calculate_staggered_rotation,
    generate_bridge_connectors,
    generate_half_circle_rings,
    generate_ring_pattern,
    generate_ring_with_cuts,
)
from bauhaus_patterns.io.loaders import DEFAULT_RING_CONFIG, RingPatternConfig


class TestGenerateRingPattern:
    """Tests for generate_ring_pattern."""

    def test_ring_count(self):
        """One ring per requested count."""
        assert len(generate_ring_pattern({"ringCount": 5}).rings) == 5

    def test_single_ring(self):
        """A single ring is allowed."""
        pattern = generate_ring_pattern(ring_count=1)
        assert len(pattern.rings) == 1
        assert pattern.rings[0].radius == 360

    def test_no_rings(self):
        """A count of zero gives no rings but still a pattern."""
        pattern = generate_ring_pattern({"ringCount": 0})
        assert pattern.rings == []
        assert pattern.radii == []

    def test_outer_boundary_toggle(self):
        """Outer boundary follows showOuterBoundary."""
        assert "M" in generate_ring_pattern({"showOuterBoundary": True}).outer_boundary
        assert generate_ring_pattern({"showOuterBoundary": False}).outer_boundary is None

    def test_outer_boundary_is_outer_circle(self):
        """The boundary is a full circle at the outer radius."""
        pattern = generate_ring_pattern({"outerRadius": 100})
        assert pattern.outer_boundary == "M100,0 A100,100 0 1,1 100,200 A100,100 0 1,1 100,0 Z"

    def test_radii_decreasing(self):
        """Radii strictly decrease from outer to inner."""
        pattern = generate_ring_pattern({"ringCount": 10, "spacingMode": "shrinkage"})
        radii = [r.radius for r in pattern.rings]
        assert all(a > b for a, b in zip(radii, radii[1:]))
        assert radii == pattern.radii

    def test_first_ring_is_outer_radius(self):
        """The first ring sits on the outer radius."""
        pattern = generate_ring_pattern({"outerRadius": 300, "ringCount": 5})
        assert pattern.rings[0].radius == 300

    def test_outermost_ring_solid(self):
        """Only inner rings are cut; the outermost stays one closed circle."""
        pattern = generate_ring_pattern({"ringCount": 2, "cutCount": 4})
        assert count_commands(pattern.rings[0].path_data, "M") == 1
        assert pattern.rings[0].path_data.endswith("Z")
        assert count_commands(pattern.rings[1].path_data, "M") == 4

    def test_no_cuts_all_solid(self):
        """cutCount 0 draws every ring as a circle."""
        pattern = generate_ring_pattern({"ringCount": 4, "cutCount": 0})
        for ring in pattern.rings:
            assert count_commands(ring.path_data, "M") == 1
            assert ring.path_data.endswith("Z")

    def test_center_defaults_to_outer_radius(self):
        """Default center is (outerRadius, outerRadius)."""
        pattern = generate_ring_pattern({"outerRadius": 200})
        assert pattern.center.x == 200
        assert pattern.center.y == 200

    def test_explicit_center(self):
        """An explicit center is used as given."""
        pattern = generate_ring_pattern({"center": {"x": 50, "y": 60}, "ringCount": 1})
        assert pattern.center == Point2D(50, 60)
        assert pattern.rings[0].path_data.startswith("M50,-300")

    def test_shrinkage_gaps_decrease(self):
        """Shrinkage spacing makes each gap smaller than the last."""
        pattern = generate_ring_pattern({
            "ringCount": 5,
            "spacingMode": "shrinkage",
            "outerGap": 20,
            "shrinkage": 0.1,
        })
        radii = pattern.radii
        assert radii == pytest.approx([360, 340, 322, 305.8, 291.22])
        gaps = [a - b for a, b in zip(radii, radii[1:])]
        assert all(a > b for a, b in zip(gaps, gaps[1:]))

    def test_alternate_rings_rotated(self):
        """Odd rings carry the stagger rotation, even rings none."""
        pattern = generate_ring_pattern({"ringCount": 4, "gridDivisions": 16, "staggerOffset": 1})
        rotations = [r.rotation for r in pattern.rings]
        assert rotations[0] == 0
        assert rotations[2] == 0
        assert rotations[1] == pytest.approx(2 * math.pi / 16)
        assert rotations[3] == pytest.approx(2 * math.pi / 16)

    def test_config_model_and_overrides(self):
        """A config model plus keyword overrides is accepted."""
        cfg = RingPatternConfig(ring_count=8)
        pattern = generate_ring_pattern(cfg, ring_count=3)
        assert len(pattern.rings) == 3

    def test_invalid_config_type(self):
        """Configs that are neither models nor mappings are rejected."""
        with pytest.raises(TypeError):
            generate_ring_pattern([("ringCount", 3)])

    def test_deterministic(self, ring_config_dict):
        """Same config, same output."""
        assert generate_ring_pattern(ring_config_dict) == generate_ring_pattern(ring_config_dict)

    def test_zero_outer_gap_still_nests(self):
        """outerGap=0 uses the default gap, so radii keep decreasing."""
        radii = generate_ring_pattern(ring_count=4, outer_gap=0).radii
        assert len(radii) == 4
        assert all(a > b for a, b in zip(radii, radii[1:]))

    @pytest.mark.parametrize("mode", ["uniform", "graduated", "goldenRatio"])
    def test_zero_inner_radius_no_degenerate_ring(self, mode):
        """innerRadius=0 falls back to 10% of outer instead of a zero-radius ring."""
        pattern = generate_ring_pattern(ring_count=3, spacing_mode=mode, inner_radius=0)
        assert pattern.radii[-1] == pytest.approx(36)
        assert all(r.radius > 0 for r in pattern.rings)
        assert "A0,0" not in pattern.rings[-1].path_data


class TestStaggeredRotation:
    """Tests for calculate_staggered_rotation."""

    def test_even_rings_zero(self):
        """Even ring indices are not rotated."""
        for index in (0, 2, 4):
            assert calculate_staggered_rotation(index, 16, 1) == 0

    def test_odd_rings_offset(self):
        """Odd ring indices move by one grid step."""
        grid_angle = 2 * math.pi / 16
        assert calculate_staggered_rotation(1, 16, 1) == pytest.approx(grid_angle)
        assert calculate_staggered_rotation(3, 16, 1) == pytest.approx(grid_angle)

    def test_scales_with_grid(self):
        """Coarser grids give larger offsets."""
        assert calculate_staggered_rotation(1, 8, 1) == pytest.approx(2 * math.pi / 8)

    def test_multiplies_offset(self):
        """The stagger offset counts grid steps."""
        grid_angle = 2 * math.pi / 16
        assert calculate_staggered_rotation(1, 16, 2) == pytest.approx(grid_angle * 2)
        assert calculate_staggered_rotation(1, 16, 3) == pytest.approx(grid_angle * 3)

    def test_invalid_grid(self):
        """Non-positive grid divisions disable staggering."""
        assert calculate_staggered_rotation(1, 0, 1) == 0
        assert calculate_staggered_rotation(1, -4, 1) == 0


class TestRingWithCuts:
    """Tests for generate_ring_with_cuts."""

    def test_no_cuts_full_circle(self, center):
        """cutCount 0 draws a full circle."""
        path = generate_ring_with_cuts(center, 50, 0, 5)
        assert path == "M100,50 A50,50 0 1,1 100,150 A50,50 0 1,1 100,50 Z"

    def test_arc_segment_count(self, center):
        """One arc sub-path per cut."""
        path = generate_ring_with_cuts(center, 50, 8, 5)
        assert count_commands(path, "M") == 8
        assert count_commands(path, "A") == 8
        assert "Z" not in path

    def test_points_on_ring(self, center):
        """Every arc endpoint lies on the ring."""
        path = generate_ring_with_cuts(center, 50, 6, 5)
        points = path_points(path)
        assert len(points) == 12
        for x, y in points:
            assert distance(center, Point2D(x, y)) == pytest.approx(50, abs=0.02)

    def test_cut_gap_width(self, origin):
        """Consecutive arcs are separated by the cut angle."""
        path = generate_ring_with_cuts(origin, 100, 4, 10)
        first_arc = path.split(" M")[0]
        assert first_arc.startswith("M")
        # First arc starts half a cut past angle 0
        start = path_points(first_arc)[0]
        assert math.atan2(start[1], start[0]) == pytest.approx(0.05, abs=1e-3)

    def test_rotation_changes_path(self, center):
        """A rotation offset moves the arcs."""
        assert generate_ring_with_cuts(center, 50, 4, 5, 0) != generate_ring_with_cuts(center, 50, 4, 5, math.pi / 4)

    def test_cuts_too_wide_fall_back_to_circle(self, center):
        """Cuts wider than their segment leave a solid circle."""
        path = generate_ring_with_cuts(center, 10, 8, 20)
        assert count_commands(path, "M") == 1
        assert path.endswith("Z")

    def test_zero_radius(self, center):
        """A zero radius does not divide by zero."""
        path = generate_ring_with_cuts(center, 0, 4, 5)
        assert path.startswith("M100,100")


class TestHalfRingsAndBridges:
    """Tests for generate_half_circle_rings and generate_bridge_connectors."""

    def test_half_rings_one_per_radius(self, center):
        """One open arc per positive radius."""
        paths = generate_half_circle_rings(center, [80, 60, 40], 6)
        assert len(paths) == 3
        for path in paths:
            assert count_commands(path, "M") == 1
            assert "Z" not in path

    def test_half_rings_skip_non_positive(self, center):
        """Zero and negative radii are skipped."""
        assert len(generate_half_circle_rings(center, [50, 0, -10], 4)) == 1

    def test_half_rings_skip_when_bridge_too_wide(self, center):
        """A radius too small for its bridges is skipped."""
        assert generate_half_circle_rings(center, [1], 10) == []

    def test_top_and_bottom_halves(self, origin):
        """Top halves start near the top, bottom halves near the bottom."""
        top = path_points(generate_half_circle_rings(origin, [100], 0.001, top_half=True)[0])[0]
        bottom = path_points(generate_half_circle_rings(origin, [100], 0.001, top_half=False)[0])[0]
        assert top[1] == pytest.approx(-100, abs=0.01)
        assert bottom[1] == pytest.approx(100, abs=0.01)

    def test_bridge_connectors(self, origin):
        """Radial segments from inner to outer radius."""
        paths = generate_bridge_connectors(origin, 50, 80, 4)
        assert len(paths) == 4
        assert paths[0] == "M50,0 L80,0"
        assert paths[1] == "M0,50 L0,80"

    def test_bridge_connectors_empty(self, origin):
        """No connectors for a non-positive count."""
        assert generate_bridge_connectors(origin, 50, 80, 0) == []


class TestDefaults:
    """Tests for the default ring config."""

    def test_sensible_defaults(self):
        """Defaults produce a usable pattern."""
        assert DEFAULT_RING_CONFIG.outer_radius > 0
        assert DEFAULT_RING_CONFIG.ring_count > 0
        assert DEFAULT_RING_CONFIG.cut_count >= 0
        assert DEFAULT_RING_CONFIG.grid_divisions > 0
        assert 0 <= DEFAULT_RING_CONFIG.shrinkage < 1
