"""
Spacing engine - distributes nested extents between outer and inner.

An "extent" is a radius for rings and polygons and a half side length
for squares. Every mode returns a strictly decreasing list starting at
the outer extent. Shrinkage spacing may return fewer values than
requested when the running gaps would reach the center.

The engine is shared by all pattern families; the family wrappers only
differ in their default outer gap and in whether golden-ratio spacing
is available.
"""

import logging
from typing import List, Optional, Union

from ..enums import SpacingMode
from .geometry import PHI, lerp

logger = logging.getLogger(__name__)

# Default inner extent as a fraction of the outer extent
DEFAULT_INNER_FRACTION = 0.1

# Default first gap for shrinkage spacing
RING_OUTER_GAP = 18.0
SQUARE_OUTER_GAP = 24.0
POLYGON_OUTER_GAP = 24.0

DEFAULT_SHRINKAGE = 0.05

ModeInput = Union[SpacingMode, str]


def _coerce_mode(mode: ModeInput) -> SpacingMode:
    if isinstance(mode, SpacingMode):
        return mode
    try:
        return SpacingMode(mode)
    except ValueError:
        raise ValueError(f"Unknown spacing mode: {mode!r}") from None


def calculate_shrinkage_extents(
    outer: float,
    count: int,
    outer_gap: float,
    shrinkage: float,
) -> List[float]:
    """
    Subtract a gap that shrinks by a constant factor at each step.

    The first gap is `outer_gap`; each following gap is the previous one
    times (1 - shrinkage). Stops early as soon as the next extent would
    be zero or negative, or would not be smaller than the previous one.

    Args:
        outer: Outermost extent
        count: Requested number of extents
        outer_gap: Gap between the first two extents
        shrinkage: Fractional reduction of each successive gap

    Returns:
        Extents outer -> inner, possibly shorter than `count`
    """
    if count <= 0:
        return []

    extents = [outer]
    current = outer
    gap = outer_gap

    for i in range(1, count):
        current -= gap
        if current <= 0 or gap <= 0:
            logger.debug(
                f"Shrinkage spacing truncated at {i} of {count} extents "
                f"(outer={outer}, outer_gap={outer_gap}, shrinkage={shrinkage})"
            )
            break
        extents.append(current)
        gap *= (1 - shrinkage)

    return extents


def golden_ratio_sum(terms: int) -> float:
    """Sum of PHI**k for k in [0, terms) - the number of unit gaps in a golden sequence"""
    if terms <= 0:
        return 0.0
    return (PHI ** terms - 1) / (PHI - 1)


def _golden_ratio_extents(outer: float, inner: float, count: int) -> List[float]:
    # Gaps shrink inward by a factor of PHI; the last extent lands on inner
    unit = (outer - inner) / golden_ratio_sum(count - 1)

    extents = [outer]
    current = outer
    for i in range(1, count):
        current -= unit * PHI ** (count - 1 - i)
        extents.append(current)
    return extents


def compute_extents(
    outer: float,
    count: int,
    mode: ModeInput,
    inner: Optional[float] = None,
    outer_gap: Optional[float] = None,
    shrinkage: Optional[float] = None,
    default_outer_gap: float = RING_OUTER_GAP,
) -> List[float]:
    """
    Compute nested extents for any pattern family.

    Optional parameters left as None take their defaults (inner = 10% of
    outer, outer_gap = `default_outer_gap`, shrinkage = 0.05). A
    non-positive inner or outer_gap also takes its default, since it would
    stall the sequence or collapse the innermost shape. An explicit
    shrinkage of 0 is honored and gives constant gaps.

    Args:
        outer: Outermost extent
        count: Number of extents requested
        mode: SpacingMode or its string value
        inner: Innermost extent (uniform, graduated, golden ratio)
        outer_gap: First gap (shrinkage)
        shrinkage: Gap reduction factor (shrinkage)
        default_outer_gap: Family default for outer_gap

    Returns:
        Strictly decreasing extents, outer first

    Raises:
        ValueError: If mode is not a known spacing mode
    """
    mode = _coerce_mode(mode)

    if count <= 0:
        return []
    if count == 1:
        return [outer]

    if inner is None or inner <= 0:
        inner = outer * DEFAULT_INNER_FRACTION
    if outer_gap is None or outer_gap <= 0:
        outer_gap = default_outer_gap
    if shrinkage is None:
        shrinkage = DEFAULT_SHRINKAGE

    extent_range = outer - inner

    if mode == SpacingMode.UNIFORM:
        return [outer - extent_range * (i / (count - 1)) for i in range(count)]

    if mode == SpacingMode.GRADUATED:
        return [outer - extent_range * (i / (count - 1)) ** 2 for i in range(count)]

    if mode == SpacingMode.SHRINKAGE:
        return calculate_shrinkage_extents(outer, count, outer_gap, shrinkage)

    if mode == SpacingMode.GOLDEN_RATIO:
        return _golden_ratio_extents(outer, inner, count)

    raise ValueError(f"Unhandled spacing mode: {mode}")


def calculate_radii(
    outer_radius: float,
    ring_count: int,
    mode: ModeInput = SpacingMode.SHRINKAGE,
    inner_radius: Optional[float] = None,
    outer_gap: Optional[float] = None,
    shrinkage: Optional[float] = None,
) -> List[float]:
    """Ring radii, outer first. Supports all four spacing modes."""
    return compute_extents(
        outer_radius, ring_count, mode,
        inner=inner_radius,
        outer_gap=outer_gap,
        shrinkage=shrinkage,
        default_outer_gap=RING_OUTER_GAP,
    )


def _reject_golden_ratio(mode: ModeInput, family: str) -> SpacingMode:
    mode = _coerce_mode(mode)
    if mode == SpacingMode.GOLDEN_RATIO:
        raise ValueError(f"Golden ratio spacing is only available for rings, not {family}")
    return mode


def calculate_square_sizes(
    outer_size: float,
    square_count: int,
    mode: ModeInput = SpacingMode.SHRINKAGE,
    inner_size: Optional[float] = None,
    outer_gap: Optional[float] = None,
    shrinkage: Optional[float] = None,
) -> List[float]:
    """Square half side lengths, outer first. Golden ratio is not supported."""
    mode = _reject_golden_ratio(mode, "squares")
    return compute_extents(
        outer_size, square_count, mode,
        inner=inner_size,
        outer_gap=outer_gap,
        shrinkage=shrinkage,
        default_outer_gap=SQUARE_OUTER_GAP,
    )


def calculate_polygon_radii(
    outer_radius: float,
    polygon_count: int,
    mode: ModeInput = SpacingMode.SHRINKAGE,
    inner_radius: Optional[float] = None,
    outer_gap: Optional[float] = None,
    shrinkage: Optional[float] = None,
) -> List[float]:
    """Polygon circumradii, outer first. Golden ratio is not supported."""
    mode = _reject_golden_ratio(mode, "polygons")
    return compute_extents(
        outer_radius, polygon_count, mode,
        inner=inner_radius,
        outer_gap=outer_gap,
        shrinkage=shrinkage,
        default_outer_gap=POLYGON_OUTER_GAP,
    )


def extents_for_config(config) -> List[float]:
    """
    Extents for any concentric pattern config.

    Works with ring, square and polygon configs through their common
    accessors (outer_extent, inner_extent, element_count,
    default_outer_gap).
    """
    return compute_extents(
        config.outer_extent,
        config.element_count,
        config.spacing_mode,
        inner=config.inner_extent,
        outer_gap=config.outer_gap,
        shrinkage=config.shrinkage,
        default_outer_gap=config.default_outer_gap,
    )


def calculate_percentage_extents(
    inner: float,
    outer: float,
    count: int,
    start_percent: float = 100.0,
    end_percent: float = 10.0,
) -> List[float]:
    """
    Legacy spacing: gap weights interpolated from start to end percent.

    Kept for presets created before shrinkage spacing existed. Weights
    are normalized so the sequence ends exactly at `inner`.
    """
    if count <= 0:
        return []
    if count == 1:
        return [outer]

    def weight(i: int) -> float:
        t = i / (count - 2) if count > 2 else 0.0
        return lerp(start_percent, end_percent, t)

    total = sum(weight(i) for i in range(count - 1))
    if total == 0:
        logger.debug("Percentage weights sum to zero, using uniform spacing")
        return compute_extents(outer, count, SpacingMode.UNIFORM, inner=inner)

    unit = (outer - inner) / total
    extents = [outer]
    current = outer
    for i in range(count - 1):
        current -= unit * weight(i)
        extents.append(current)
    return extents
