"""
Nested regular polygon patterns.

Polygons are sized by circumradius and start from the top vertex. With
bridges enabled each polygon becomes a set of disjoint edge segments.
"""

import logging
from math import pi
from typing import Any, Dict, List, Mapping, Optional, Union

from .geometry import Point2D, TWO_PI, deg_to_rad, distance, interpolate, point_on_circle
from .path_builder import PathBuilder, line_to_path
from .spacing import extents_for_config
from ..io.loaders import GeneratedPolygon, PolygonPattern, PolygonPatternConfig, resolve_config

logger = logging.getLogger(__name__)

POLYGON_PRESETS: Dict[str, int] = {
    "triangle": 3,
    "square": 4,
    "pentagon": 5,
    "hexagon": 6,
    "heptagon": 7,
    "octagon": 8,
    "decagon": 10,
    "dodecagon": 12,
}


def get_polygon_vertices(
    center: Point2D,
    radius: float,
    sides: int,
    rotation_deg: float = 0.0,
) -> List[Point2D]:
    """Vertices of a regular polygon, first vertex at the top before rotation"""
    if sides <= 0:
        return []

    angle_step = TWO_PI / sides
    start_angle = deg_to_rad(rotation_deg) - pi / 2
    return [point_on_circle(center, radius, start_angle + i * angle_step) for i in range(sides)]


def generate_polygon(
    center: Point2D,
    radius: float,
    sides: int,
    rotation_deg: float = 0.0,
) -> str:
    """Closed polygon path; empty when there are no vertices"""
    vertices = get_polygon_vertices(center, radius, sides, rotation_deg)
    if not vertices:
        return ""

    builder = PathBuilder().move_to(vertices[0])
    for vertex in vertices[1:]:
        builder.line_to(vertex)
    return builder.close_path().build()


def _edge_segments(
    start: Point2D,
    end: Point2D,
    bridges: int,
    bridge_half: float,
) -> List[str]:
    """Sub-paths for one edge with `bridges` gaps at its internal division points"""
    edge_length = distance(start, end)
    if bridges <= 0 or edge_length == 0:
        return [line_to_path(start, end)]

    segment_length = edge_length / (bridges + 1)
    if segment_length <= 2 * bridge_half:
        logger.debug(
            f"Bridges of {2 * bridge_half} do not fit on edge {edge_length:.2f}, drawing full edge"
        )
        return [line_to_path(start, end)]

    paths = []
    for j in range(bridges + 1):
        t_start = 0.0 if j == 0 else (j * segment_length + bridge_half) / edge_length
        t_end = 1.0 if j == bridges else ((j + 1) * segment_length - bridge_half) / edge_length
        if t_start < t_end:
            paths.append(line_to_path(interpolate(start, end, t_start), interpolate(start, end, t_end)))
    return paths


def generate_polygon_with_bridges(
    center: Point2D,
    radius: float,
    sides: int,
    rotation_deg: float = 0.0,
    bridge_count: int = 6,
    bridge_width: float = 8.0,
) -> str:
    """
    Polygon as disjoint edge segments separated by bridges.

    `bridge_count // sides` bridges go on every edge at the internal
    points dividing it into equal parts; each bridge is a gap of
    `bridge_width` centered on its division point. Edges get no bridges
    when bridge_count < sides, and are drawn whole.

    Args:
        center: Polygon center
        radius: Circumradius
        sides: Number of sides
        rotation_deg: Rotation in degrees
        bridge_count: Total bridges requested
        bridge_width: Gap width along the edge

    Returns:
        Path data with one `M ... L ...` sub-path per drawn segment
    """
    vertices = get_polygon_vertices(center, radius, sides, rotation_deg)
    if not vertices:
        return ""

    bridges_per_edge = bridge_count // sides
    bridge_half = bridge_width / 2

    paths = []
    for i in range(sides):
        paths.extend(_edge_segments(vertices[i], vertices[(i + 1) % sides], bridges_per_edge, bridge_half))
    return " ".join(paths)


def generate_polygon_pattern(
    config: Optional[Union[PolygonPatternConfig, Mapping[str, Any]]] = None,
    **overrides: Any,
) -> PolygonPattern:
    """Generate a complete nested polygon pattern."""
    cfg = resolve_config(PolygonPatternConfig, config, overrides)
    center = cfg.resolved_center()
    radii = extents_for_config(cfg)

    polygons = []
    for index, radius in enumerate(radii):
        if cfg.bridge_count > 0:
            path_data = generate_polygon_with_bridges(
                center, radius, cfg.sides, cfg.rotation, cfg.bridge_count, cfg.bridge_width
            )
        else:
            path_data = generate_polygon(center, radius, cfg.sides, cfg.rotation)

        polygons.append(GeneratedPolygon(index=index, radius=radius, sides=cfg.sides, path_data=path_data))

    outer_boundary = None
    if cfg.show_outer_boundary:
        outer_boundary = generate_polygon(center, cfg.outer_radius, cfg.sides, cfg.rotation) or None

    logger.debug(f"Generated {len(polygons)} {cfg.sides}-gons ({cfg.spacing_mode.value} spacing)")

    return PolygonPattern(polygons=polygons, outer_boundary=outer_boundary, center=center, radii=radii)
