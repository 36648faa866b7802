"""
Concentric ring patterns with staggered cuts.

Every ring but the outermost is split into arcs separated by cuts of a
fixed physical width. Alternating rings are rotated by a grid offset so
their cuts do not line up radially, which lets the cut sheet stretch
into an expandable mesh.
"""

import logging
from math import pi
from typing import Any, List, Mapping, Optional, Sequence, Union

from .geometry import Point2D, TWO_PI, point_on_circle
from .path_builder import PathBuilder, circle_to_path, line_to_path
from .spacing import extents_for_config
from ..io.loaders import GeneratedRing, RingPattern, RingPatternConfig, resolve_config

logger = logging.getLogger(__name__)


def calculate_staggered_rotation(
    ring_index: int,
    grid_divisions: int,
    stagger_offset: float,
) -> float:
    """
    Rotation (radians) for a ring so alternating rings interlock.

    Even rings sit at grid position 0, odd rings are offset by
    `stagger_offset` grid positions of 2π/grid_divisions each.

    Args:
        ring_index: Ring index (0 = outermost)
        grid_divisions: Number of grid positions around the circle
        stagger_offset: Grid positions to offset odd rings

    Returns:
        Rotation in radians; 0 when grid_divisions is not positive
    """
    if ring_index % 2 == 0:
        return 0.0
    if grid_divisions <= 0:
        logger.debug(f"grid_divisions={grid_divisions} is not positive, ring {ring_index} not staggered")
        return 0.0
    return stagger_offset * (TWO_PI / grid_divisions)


def _arc_path(center: Point2D, radius: float, start_angle: float, end_angle: float) -> str:
    """Open arc sub-path travelling in the direction of increasing angle"""
    start = point_on_circle(center, radius, start_angle)
    end = point_on_circle(center, radius, end_angle)
    large_arc = (end_angle - start_angle) > pi

    return PathBuilder().move_to(start).arc_to(radius, end, large_arc=large_arc, sweep=True).build()


def generate_ring_with_cuts(
    center: Point2D,
    radius: float,
    cut_count: int,
    cut_width: float,
    rotation: float = 0.0,
) -> str:
    """
    Ring split into `cut_count` arcs by cuts of arc length `cut_width`.

    Each arc is its own sub-path, centered in its 2π/cut_count segment and
    offset by `rotation`. Falls back to a solid circle when there are no
    cuts or the cuts leave no arc to draw.

    Args:
        center: Ring center
        radius: Ring radius
        cut_count: Number of cuts (and arcs)
        cut_width: Cut width measured along the ring
        rotation: Rotation of the cut grid in radians

    Returns:
        Path data
    """
    if cut_count <= 0 or radius <= 0:
        return circle_to_path(center, radius)

    cut_angle = cut_width / radius
    segment_angle = TWO_PI / cut_count
    arc_angle = segment_angle - cut_angle

    if arc_angle <= 0:
        logger.debug(
            f"Cuts too wide for ring r={radius:.2f} ({cut_count} x {cut_width}), drawing solid circle"
        )
        return circle_to_path(center, radius)

    arcs = []
    for i in range(cut_count):
        start_angle = rotation + i * segment_angle + cut_angle / 2
        arcs.append(_arc_path(center, radius, start_angle, start_angle + arc_angle))

    return " ".join(arcs)


def generate_half_circle_rings(
    center: Point2D,
    radii: Sequence[float],
    bridge_width: float,
    top_half: bool = True,
) -> List[str]:
    """
    Half rings with a bridge left at each end.

    The top half runs from -π/2 to π/2 and the bottom half from π/2 to
    3π/2, each shortened by half a bridge at both ends. Radii that are not
    positive, or too small to leave an arc, are skipped.
    """
    base = -pi / 2 if top_half else pi / 2

    paths = []
    for radius in radii:
        if radius <= 0:
            continue
        bridge_gap = bridge_width / radius
        start_angle = base + bridge_gap / 2
        end_angle = base + pi - bridge_gap / 2
        if end_angle <= start_angle:
            logger.debug(f"Bridge {bridge_width} too wide for half ring r={radius:.2f}, skipped")
            continue
        paths.append(_arc_path(center, radius, start_angle, end_angle))

    return paths


def generate_bridge_connectors(
    center: Point2D,
    inner_radius: float,
    outer_radius: float,
    count: int,
    start_angle: float = 0.0,
) -> List[str]:
    """Radial line segments between two radii, evenly spaced around the center"""
    if count <= 0:
        return []

    angle_step = TWO_PI / count
    paths = []
    for i in range(count):
        angle = start_angle + i * angle_step
        paths.append(line_to_path(
            point_on_circle(center, inner_radius, angle),
            point_on_circle(center, outer_radius, angle),
        ))
    return paths


def generate_ring_pattern(
    config: Optional[Union[RingPatternConfig, Mapping[str, Any]]] = None,
    **overrides: Any,
) -> RingPattern:
    """
    Generate a complete ring pattern.

    Args:
        config: RingPatternConfig, or a partial mapping of overrides onto
            the defaults (snake_case or camelCase keys)
        **overrides: Field overrides applied last

    Returns:
        RingPattern with one element per radius, outermost first

    Example:
        >>> pattern = generate_ring_pattern(ring_count=5, cut_count=6)
        >>> pattern.rings[1].path_data.count("M")
        6
    """
    cfg = resolve_config(RingPatternConfig, config, overrides)
    center = cfg.resolved_center()
    radii = extents_for_config(cfg)

    rings = []
    for index, radius in enumerate(radii):
        rotation = calculate_staggered_rotation(index, cfg.grid_divisions, cfg.stagger_offset)

        # Outermost ring stays solid to hold the frame together
        if index == 0 or cfg.cut_count <= 0:
            path_data = circle_to_path(center, radius)
        else:
            path_data = generate_ring_with_cuts(center, radius, cfg.cut_count, cfg.cut_width, rotation)

        rings.append(GeneratedRing(index=index, radius=radius, rotation=rotation, path_data=path_data))

    outer_boundary = circle_to_path(center, cfg.outer_radius) if cfg.show_outer_boundary else None

    logger.debug(f"Generated {len(rings)} rings ({cfg.spacing_mode.value} spacing, {cfg.cut_count} cuts)")

    return RingPattern(rings=rings, outer_boundary=outer_boundary, center=center, radii=radii)
