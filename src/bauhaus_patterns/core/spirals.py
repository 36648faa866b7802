"""
Multi-arm spiral patterns.

Each arm is sampled along a radial profile and smoothed into cubic
Bezier segments with a Catmull-Rom fit, one segment per sample interval.
"""

import logging
from math import ceil, exp, sqrt
from typing import Any, List, Mapping, Optional, Sequence, Union

from ..enums import SpiralType
from .geometry import Point2D, TWO_PI, deg_to_rad, point_on_circle
from .path_builder import PathBuilder, circle_to_path
from ..io.loaders import GeneratedSpiralArm, SpiralPattern, SpiralPatternConfig, resolve_config

logger = logging.getLogger(__name__)

SEGMENTS_PER_TURN = 32
CATMULL_ROM_TENSION = 0.5

# Exponent scale for the logarithmic profile
_LOG_GROWTH_SCALE = 10


def spiral_radius(
    inner_radius: float,
    outer_radius: float,
    t: float,
    spiral_type: Union[SpiralType, str],
    growth_factor: float = 0.2,
) -> float:
    """
    Radius at progress t (0..1) along an arm.

    - archimedean: linear in t
    - fermat: sqrt(t), fast near the core then slowing
    - logarithmic: (e^(10gt) - 1) / (e^(10g) - 1), slow then accelerating;
      a zero growth factor is its linear limit
    """
    spiral_type = SpiralType(spiral_type)
    radius_range = outer_radius - inner_radius

    if spiral_type == SpiralType.LOGARITHMIC:
        if growth_factor == 0:
            return inner_radius + radius_range * t
        k = growth_factor * _LOG_GROWTH_SCALE
        return inner_radius + radius_range * (exp(k * t) - 1) / (exp(k) - 1)

    if spiral_type == SpiralType.FERMAT:
        return inner_radius + radius_range * sqrt(t)

    return inner_radius + radius_range * t


def sample_spiral_points(
    center: Point2D,
    inner_radius: float,
    outer_radius: float,
    start_angle: float,
    turns: float,
    spiral_type: Union[SpiralType, str],
    growth_factor: float = 0.2,
) -> List[Point2D]:
    """
    Sample an arm at SEGMENTS_PER_TURN points per turn.

    Returns ceil(turns * 32) + 1 points from the inner to the outer
    radius; empty when turns gives no segments.
    """
    segments = ceil(turns * SEGMENTS_PER_TURN)
    if segments <= 0:
        logger.debug(f"turns={turns} gives no spiral segments")
        return []

    points = []
    for i in range(segments + 1):
        t = i / segments
        angle = start_angle + t * turns * TWO_PI
        radius = spiral_radius(inner_radius, outer_radius, t, spiral_type, growth_factor)
        points.append(point_on_circle(center, radius, angle))
    return points


def points_to_bezier_path(points: Sequence[Point2D], tension: float = CATMULL_ROM_TENSION) -> str:
    """
    Smooth path through points using Catmull-Rom segments as cubic Beziers.

    For each pair (p1, p2) with neighbours p0 and p3 (clamped at the ends):
        cp1 = p1 + (p2 - p0) * tension / 3
        cp2 = p2 - (p3 - p1) * tension / 3

    Fewer than two points give an empty path, exactly two a straight line.
    """
    if len(points) < 2:
        return ""

    builder = PathBuilder().move_to(points[0])
    if len(points) == 2:
        return builder.line_to(points[1]).build()

    k = tension / 3
    last = len(points) - 1
    for i in range(last):
        p0 = points[max(0, i - 1)]
        p1 = points[i]
        p2 = points[i + 1]
        p3 = points[min(last, i + 2)]

        cp1 = p1 + (p2 - p0).scale(k)
        cp2 = p2 - (p3 - p1).scale(k)
        builder.curve_to(cp1, cp2, p2)

    return builder.build()


def generate_spiral_arm(
    center: Point2D,
    inner_radius: float,
    outer_radius: float,
    start_angle: float,
    turns: float,
    spiral_type: Union[SpiralType, str],
    growth_factor: float = 0.2,
) -> str:
    """Path data for one spiral arm starting at `start_angle` radians"""
    points = sample_spiral_points(
        center, inner_radius, outer_radius, start_angle, turns, spiral_type, growth_factor
    )
    return points_to_bezier_path(points)


def generate_archimedean_spiral(
    center: Point2D,
    inner_radius: float,
    outer_radius: float,
    start_angle: float,
    turns: float,
) -> str:
    """Evenly spaced spiral"""
    return generate_spiral_arm(
        center, inner_radius, outer_radius, start_angle, turns, SpiralType.ARCHIMEDEAN, 0
    )


def generate_logarithmic_spiral(
    center: Point2D,
    inner_radius: float,
    outer_radius: float,
    start_angle: float,
    turns: float,
    growth_factor: float = 0.2,
) -> str:
    """Golden-spiral style arm with exponential growth"""
    return generate_spiral_arm(
        center, inner_radius, outer_radius, start_angle, turns, SpiralType.LOGARITHMIC, growth_factor
    )


def generate_spiral_pattern(
    config: Optional[Union[SpiralPatternConfig, Mapping[str, Any]]] = None,
    **overrides: Any,
) -> SpiralPattern:
    """
    Generate a complete multi-arm spiral pattern.

    Arms are spread evenly around the center starting at `rotation`
    degrees.
    """
    cfg = resolve_config(SpiralPatternConfig, config, overrides)
    center = cfg.resolved_center()

    arms = []
    if cfg.arm_count > 0:
        arm_step = TWO_PI / cfg.arm_count
        base_angle = deg_to_rad(cfg.rotation)
        for i in range(cfg.arm_count):
            start_angle = base_angle + i * arm_step
            path_data = generate_spiral_arm(
                center,
                cfg.inner_radius,
                cfg.outer_radius,
                start_angle,
                cfg.turns,
                cfg.spiral_type,
                cfg.growth_factor,
            )
            arms.append(GeneratedSpiralArm(index=i, start_angle=start_angle, path_data=path_data))

    outer_boundary = circle_to_path(center, cfg.outer_radius) if cfg.show_outer_boundary else None

    logger.debug(f"Generated {len(arms)} {cfg.spiral_type.value} spiral arms, {cfg.turns} turns")

    return SpiralPattern(arms=arms, outer_boundary=outer_boundary, center=center)
