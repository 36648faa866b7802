"""
Pattern configuration validation.

Generators never fail on numeric input; they degrade (empty output,
truncated spacing, uncut shapes). This module reports those degradations
up front so callers can show them, and flags configurations that would
produce geometry unfit for cutting.

Accepts config models or partial mappings (camelCase or snake_case).
"""

from dataclasses import dataclass, field
from enum import Enum
from math import ceil, pi
from typing import Any, List, Mapping, Optional, Union

from ..core.geometry import Point2D, distance
from ..core.polygons import POLYGON_PRESETS, get_polygon_vertices
from ..core.spacing import DEFAULT_INNER_FRACTION, extents_for_config
from ..core.spirals import SEGMENTS_PER_TURN
from ..enums import PatternType, SpacingMode, SpiralType
from ..io.loaders import (
    CONFIG_MODELS,
    PatternConfig,
    PolygonPatternConfig,
    RingPatternConfig,
    SpiralPatternConfig,
    SquarePatternConfig,
    coerce_pattern_type,
    resolve_config,
)

ConfigInput = Union[PatternConfig, Mapping[str, Any], None]


class Severity(Enum):
    """Validation message severity"""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationMessage:
    """A single validation finding"""
    severity: Severity
    code: str
    message: str
    suggestion: Optional[str] = None


@dataclass
class ValidationResult:
    """Complete validation result"""
    valid: bool  # True if no errors
    messages: List[ValidationMessage] = field(default_factory=list)

    @property
    def errors(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.WARNING]

    @property
    def infos(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.INFO]


def validate_config(
    pattern_type: Union[PatternType, str],
    config: ConfigInput = None,
) -> ValidationResult:
    """
    Validate a pattern configuration.

    Args:
        pattern_type: Pattern family
        config: Config model or partial mapping (defaults fill the rest)

    Returns:
        ValidationResult with all findings

    Raises:
        ValidationError: If the config cannot be parsed at all (wrong
            types, unknown enum values)
    """
    pattern_type = coerce_pattern_type(pattern_type)
    cfg = resolve_config(CONFIG_MODELS[pattern_type], config)

    messages: List[ValidationMessage] = []

    if pattern_type == PatternType.SPIRALS:
        messages.extend(_validate_spiral(cfg))
    else:
        messages.extend(_validate_extents(cfg))
        messages.extend(_validate_spacing(cfg))
        if pattern_type == PatternType.RINGS:
            messages.extend(_validate_ring_cuts(cfg))
        elif pattern_type == PatternType.SQUARES:
            messages.extend(_validate_square_notches(cfg))
        elif pattern_type == PatternType.POLYGONS:
            messages.extend(_validate_polygon_sides(cfg))
            messages.extend(_validate_polygon_bridges(cfg))

    has_errors = any(m.severity == Severity.ERROR for m in messages)

    return ValidationResult(
        valid=not has_errors,
        messages=messages
    )


def validate_pattern_config(config: PatternConfig) -> ValidationResult:
    """Validate a config model, inferring its pattern type"""
    for pattern_type, model in CONFIG_MODELS.items():
        if isinstance(config, model):
            return validate_config(pattern_type, config)
    raise TypeError(f"Not a pattern config: {type(config).__name__}")


def _validate_extents(cfg) -> List[ValidationMessage]:
    """Count and outer/inner extents of concentric patterns"""
    messages = []

    if cfg.element_count <= 0:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="COUNT_NOT_POSITIVE",
            message=f"Element count is {cfg.element_count}; the pattern will be empty",
            suggestion="Use a count of at least 1"
        ))

    if cfg.outer_extent <= 0:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="EXTENT_NOT_POSITIVE",
            message=f"Outer extent ({cfg.outer_extent}) must be positive",
        ))
        return messages

    if cfg.spacing_mode != SpacingMode.SHRINKAGE:
        if cfg.inner_extent >= cfg.outer_extent:
            messages.append(ValidationMessage(
                severity=Severity.ERROR,
                code="INNER_EXCEEDS_OUTER",
                message=(
                    f"Inner extent ({cfg.inner_extent}) is not smaller than outer extent "
                    f"({cfg.outer_extent}); shapes would not nest"
                ),
                suggestion="Reduce the inner extent or increase the outer extent"
            ))
        elif cfg.inner_extent <= 0:
            messages.append(ValidationMessage(
                severity=Severity.WARNING,
                code="EXTENT_NOT_POSITIVE",
                message=(
                    f"Inner extent ({cfg.inner_extent}) is not positive; "
                    f"using {cfg.outer_extent * DEFAULT_INNER_FRACTION:g} (10% of outer) instead"
                ),
                suggestion="Use a positive inner extent"
            ))

    return messages


def _validate_spacing(cfg) -> List[ValidationMessage]:
    """Shrinkage parameters and truncation"""
    messages = []

    if cfg.spacing_mode != SpacingMode.SHRINKAGE or cfg.element_count <= 1 or cfg.outer_extent <= 0:
        return messages

    if cfg.outer_gap <= 0:
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="OUTER_GAP_NOT_POSITIVE",
            message=(
                f"Outer gap ({cfg.outer_gap}) is not positive; "
                f"using the default gap of {cfg.default_outer_gap:g} instead"
            ),
            suggestion="Use a positive outer gap"
        ))

    if cfg.shrinkage >= 1:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="SHRINKAGE_OUT_OF_RANGE",
            message=f"Shrinkage {cfg.shrinkage} leaves no gap after the first step",
            suggestion="Use a shrinkage between 0 and 1 (e.g. 0.05)"
        ))
        return messages

    if cfg.shrinkage < 0:
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="SHRINKAGE_OUT_OF_RANGE",
            message=f"Negative shrinkage ({cfg.shrinkage}) makes gaps grow toward the center",
            suggestion="Use a shrinkage between 0 and 1"
        ))

    extents = extents_for_config(cfg)
    if len(extents) < cfg.element_count:
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="SPACING_TRUNCATED",
            message=(
                f"Only {len(extents)} of {cfg.element_count} elements fit before reaching the center"
            ),
            suggestion="Reduce the outer gap, increase shrinkage, or lower the count"
        ))

    return messages


def _validate_ring_cuts(cfg: RingPatternConfig) -> List[ValidationMessage]:
    """Cut grid and cut width against ring circumference"""
    messages = []

    if cfg.cut_count <= 0 or cfg.element_count <= 1:
        return messages

    if cfg.grid_divisions <= 0:
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="GRID_DIVISIONS_INVALID",
            message=f"Grid divisions ({cfg.grid_divisions}) must be positive; rings will not be staggered",
            suggestion="Use e.g. 16 grid divisions"
        ))

    segment_angle = 2 * pi / cfg.cut_count
    solid = [
        i for i, r in enumerate(extents_for_config(cfg))
        if i > 0 and (r <= 0 or segment_angle - cfg.cut_width / r <= 0)
    ]
    if solid:
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="CUTS_TOO_WIDE",
            message=(
                f"{len(solid)} ring(s) are too small for {cfg.cut_count} cuts of width "
                f"{cfg.cut_width} and will be drawn solid (rings {solid})"
            ),
            suggestion="Reduce cut count or cut width, or raise the inner radius"
        ))

    return messages


def _validate_square_notches(cfg: SquarePatternConfig) -> List[ValidationMessage]:
    """Notches against side length"""
    messages = []

    n = cfg.notches_per_side
    if n <= 0:
        return messages

    plain = [
        i for i, s in enumerate(extents_for_config(cfg))
        if s <= 0 or (2 * s) / (n + 1) <= cfg.notch_width or (n // 2 > 0 and s / (n // 2 + 1) <= cfg.notch_width)
    ]
    if plain:
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="NOTCHES_TOO_WIDE",
            message=(
                f"{len(plain)} square(s) are too small for {n} notches of width "
                f"{cfg.notch_width} per side and will be drawn without notches"
            ),
            suggestion="Reduce notches per side or notch width"
        ))

    return messages


def _validate_polygon_sides(cfg: PolygonPatternConfig) -> List[ValidationMessage]:
    messages = []

    if cfg.sides < 3:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="NON_STANDARD_POLYGON",
            message=f"A polygon needs at least 3 sides (got {cfg.sides})",
            suggestion="Use one of: " + ", ".join(f"{k} ({v})" for k, v in POLYGON_PRESETS.items())
        ))
    elif cfg.sides not in POLYGON_PRESETS.values():
        messages.append(ValidationMessage(
            severity=Severity.INFO,
            code="NON_STANDARD_POLYGON",
            message=f"{cfg.sides} sides is not one of the standard polygon presets",
        ))

    return messages


def _validate_polygon_bridges(cfg: PolygonPatternConfig) -> List[ValidationMessage]:
    """Bridge distribution and width against edge length"""
    messages = []

    if cfg.bridge_count <= 0 or cfg.sides < 3:
        return messages

    per_edge = cfg.bridge_count // cfg.sides

    if per_edge == 0:
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="BRIDGES_BELOW_SIDES",
            message=(
                f"{cfg.bridge_count} bridges spread over {cfg.sides} edges leaves none per edge; "
                f"polygons will be split at the vertices only"
            ),
            suggestion=f"Use a multiple of {cfg.sides} bridges"
        ))
        return messages

    if cfg.bridge_count % cfg.sides:
        messages.append(ValidationMessage(
            severity=Severity.INFO,
            code="BRIDGES_UNEVEN",
            message=(
                f"{cfg.bridge_count} bridges is not a multiple of {cfg.sides}; "
                f"using {per_edge} per edge ({per_edge * cfg.sides} total)"
            ),
        ))

    origin = Point2D(0, 0)
    full_edges = []
    for i, r in enumerate(extents_for_config(cfg)):
        vertices = get_polygon_vertices(origin, r, cfg.sides)
        edge = distance(vertices[0], vertices[1])
        if edge == 0 or edge / (per_edge + 1) <= cfg.bridge_width:
            full_edges.append(i)
    if full_edges:
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="BRIDGES_TOO_WIDE",
            message=(
                f"{len(full_edges)} polygon(s) have edges too short for {per_edge} bridges of width "
                f"{cfg.bridge_width} and will be drawn without bridges"
            ),
            suggestion="Reduce bridge count or bridge width"
        ))

    return messages


def _validate_spiral(cfg: SpiralPatternConfig) -> List[ValidationMessage]:
    messages = []

    if cfg.arm_count <= 0:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="ARM_COUNT_NOT_POSITIVE",
            message=f"Arm count is {cfg.arm_count}; the pattern will have no arms",
            suggestion="Use at least 1 arm"
        ))

    segments = ceil(cfg.turns * SEGMENTS_PER_TURN)
    if segments <= 0:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="SPIRAL_TOO_FEW_SAMPLES",
            message=f"{cfg.turns} turns gives no samples; arms will be empty",
            suggestion="Use a positive number of turns"
        ))
    elif segments == 1:
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="SPIRAL_TOO_FEW_SAMPLES",
            message=f"{cfg.turns} turns gives a single segment; arms will be straight lines",
            suggestion=f"Use at least {2 / SEGMENTS_PER_TURN:.4f} turns"
        ))

    if cfg.inner_radius >= cfg.outer_radius:
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="INNER_EXCEEDS_OUTER",
            message=(
                f"Inner radius ({cfg.inner_radius}) is not smaller than outer radius "
                f"({cfg.outer_radius}); arms will spiral inward or stay on one circle"
            ),
        ))

    if cfg.spiral_type == SpiralType.LOGARITHMIC and cfg.growth_factor <= 0:
        messages.append(ValidationMessage(
            severity=Severity.INFO,
            code="GROWTH_FACTOR_NOT_POSITIVE",
            message=(
                f"Growth factor {cfg.growth_factor} is not positive; "
                + ("the arm is archimedean" if cfg.growth_factor == 0 else "growth is front-loaded")
            ),
            suggestion="Use a positive growth factor (e.g. 0.2)"
        ))

    return messages
