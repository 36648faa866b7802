"""
Nested square patterns.

Squares are sized by half side length so that the same spacing engine
serves squares, rings and polygons. Alternating squares can be drawn in
opposite directions, and notched squares are drawn as open polylines
with the pen lifted across each notch.
"""

import logging
from math import cos, sin
from typing import Any, List, Mapping, Optional, Union

from .geometry import Point2D, deg_to_rad, distance, interpolate
from .path_builder import PathBuilder
from .spacing import extents_for_config
from ..io.loaders import GeneratedSquare, SquarePattern, SquarePatternConfig, resolve_config

logger = logging.getLogger(__name__)

# Corner offsets before rotation: top-left, top-right, bottom-right, bottom-left
_CORNER_OFFSETS = ((-1, -1), (1, -1), (1, 1), (-1, 1))


def get_square_corners(center: Point2D, size: float, rotation_deg: float = 0.0) -> List[Point2D]:
    """Corners TL, TR, BR, BL of a square with half side `size`, rotated about center"""
    angle = deg_to_rad(rotation_deg)
    c, s = cos(angle), sin(angle)

    corners = []
    for ox, oy in _CORNER_OFFSETS:
        dx, dy = ox * size, oy * size
        corners.append(Point2D(center.x + dx * c - dy * s, center.y + dx * s + dy * c))
    return corners


def generate_square(
    center: Point2D,
    size: float,
    rotation_deg: float = 0.0,
    clockwise: bool = True,
) -> str:
    """Closed square path; clockwise visits TL, TR, BR, BL"""
    corners = get_square_corners(center, size, rotation_deg)
    order = (0, 1, 2, 3) if clockwise else (0, 3, 2, 1)

    builder = PathBuilder().move_to(corners[order[0]])
    for i in order[1:]:
        builder.line_to(corners[i])
    return builder.close_path().build()


def _draw_side_with_notches(
    builder: PathBuilder,
    start: Point2D,
    end: Point2D,
    notch_count: int,
    notch_half: float,
) -> None:
    """Walk start -> end, lifting the pen across `notch_count` evenly spaced notches"""
    if notch_count <= 0:
        return

    length = distance(start, end)
    if length == 0:
        return
    ux = (end.x - start.x) / length
    uy = (end.y - start.y) / length

    for i in range(1, notch_count + 1):
        notch_center = interpolate(start, end, i / (notch_count + 1))
        builder.line_to(Point2D(notch_center.x - ux * notch_half, notch_center.y - uy * notch_half))
        builder.move_to(Point2D(notch_center.x + ux * notch_half, notch_center.y + uy * notch_half))


def _notches_fit(side_length: float, notches: int, notch_width: float) -> bool:
    # Every piece between notches must keep a positive length
    return notches <= 0 or side_length / (notches + 1) > notch_width


def generate_square_with_notches(
    center: Point2D,
    size: float,
    rotation_deg: float = 0.0,
    clockwise: bool = True,
    notches_per_side: int = 2,
    notch_width: float = 8.0,
) -> str:
    """
    Square drawn as an open polyline with notches along each side.

    The path starts at the midpoint of the first side (TL->TR clockwise,
    TL->BL counter-clockwise), walks all four corners, and ends back at
    that midpoint. Full sides carry `notches_per_side` notches; the
    closing half side carries floor(notches_per_side / 2).

    Falls back to the plain closed square when there are no notches or
    the notches would leave no material between them.

    Args:
        center: Square center
        size: Half side length
        rotation_deg: Rotation in degrees
        clockwise: Drawing direction
        notches_per_side: Notches on each full side
        notch_width: Gap width along the side

    Returns:
        Path data
    """
    side_length = size * 2
    half_notches = notches_per_side // 2

    if (
        notches_per_side <= 0
        or size <= 0
        or not _notches_fit(side_length, notches_per_side, notch_width)
        or not _notches_fit(size, half_notches, notch_width)
    ):
        if notches_per_side > 0:
            logger.debug(
                f"{notches_per_side} notches of {notch_width} do not fit on side {side_length:.2f}, "
                f"drawing plain square"
            )
        return generate_square(center, size, rotation_deg, clockwise)

    corners = get_square_corners(center, size, rotation_deg)
    # Walk order after the starting midpoint
    walk = (1, 2, 3, 0) if clockwise else (3, 2, 1, 0)
    start_point = interpolate(corners[0], corners[walk[0]], 0.5)
    notch_half = notch_width / 2

    builder = PathBuilder().move_to(start_point)
    builder.line_to(corners[walk[0]])
    for a, b in zip(walk, walk[1:]):
        _draw_side_with_notches(builder, corners[a], corners[b], notches_per_side, notch_half)
        builder.line_to(corners[b])

    # Partial side back to the start midpoint
    _draw_side_with_notches(builder, corners[0], start_point, half_notches, notch_half)
    builder.line_to(start_point)

    return builder.build()


def generate_square_pattern(
    config: Optional[Union[SquarePatternConfig, Mapping[str, Any]]] = None,
    **overrides: Any,
) -> SquarePattern:
    """
    Generate a complete nested square pattern.

    Squares alternate direction (even index clockwise) when `alternating`
    is set. The outer boundary is always a clockwise square.
    """
    cfg = resolve_config(SquarePatternConfig, config, overrides)
    center = cfg.resolved_center()
    sizes = extents_for_config(cfg)

    squares = []
    for index, size in enumerate(sizes):
        clockwise = index % 2 == 0 if cfg.alternating else True

        if cfg.notches_per_side > 0:
            path_data = generate_square_with_notches(
                center, size, cfg.rotation, clockwise, cfg.notches_per_side, cfg.notch_width
            )
        else:
            path_data = generate_square(center, size, cfg.rotation, clockwise)

        squares.append(GeneratedSquare(index=index, size=size, clockwise=clockwise, path_data=path_data))

    outer_boundary = None
    if cfg.show_outer_boundary:
        outer_boundary = generate_square(center, cfg.outer_size, cfg.rotation, True)

    logger.debug(f"Generated {len(squares)} squares ({cfg.spacing_mode.value} spacing)")

    return SquarePattern(squares=squares, outer_boundary=outer_boundary, center=center, sizes=sizes)
