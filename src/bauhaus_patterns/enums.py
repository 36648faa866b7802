"""Type-safe enums for pattern configuration.

String values match the keys used in saved presets and the JSON bridge,
so configs round-trip without translation tables.
"""

from enum import Enum


class SpacingMode(Enum):
    """How successive extents are distributed between outer and inner"""
    UNIFORM = "uniform"  # Equal steps
    SHRINKAGE = "shrinkage"  # Each gap a fixed fraction smaller than the last
    GRADUATED = "graduated"  # Quadratic easing, tighter toward the outside
    GOLDEN_RATIO = "goldenRatio"  # Gaps in golden-ratio progression (rings only)


class SpiralType(Enum):
    """Radial profile of a spiral arm"""
    ARCHIMEDEAN = "archimedean"  # Radius linear in angle
    LOGARITHMIC = "logarithmic"  # Exponential radius, tight core
    FERMAT = "fermat"  # Radius proportional to sqrt of angle


class PatternType(Enum):
    """Pattern family"""
    RINGS = "rings"
    SQUARES = "squares"
    POLYGONS = "polygons"
    SPIRALS = "spirals"


class Unit(Enum):
    """Physical units for document export"""
    INCHES = "inches"
    MM = "mm"
    PX = "px"
