"""
Configuration and result models, override merging, and preset JSON I/O.

Configs are frozen Pydantic models with snake_case fields and camelCase
aliases, so preset files written by the web editor load unchanged:

    >>> RingPatternConfig.model_validate({"ringCount": 12, "spacingMode": "uniform"})

Uses Pydantic for validation and enum coercion.
"""

import json
import logging
import re
from abc import abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ..core.geometry import Point2D
from ..enums import PatternType, SpacingMode, SpiralType
from .schema import SCHEMA_VERSION, validate_preset_fields

logger = logging.getLogger(__name__)


def _coerce_enum(enum_cls, value):
    """Case-insensitive enum lookup by value or member name"""
    if isinstance(value, str):
        key = value.strip().lower().replace("_", "").replace("-", "")
        for member in enum_cls:
            if key in (member.value.lower(), member.name.lower().replace("_", "")):
                return member
    return value


class _CamelModel(BaseModel):
    """Base for models that read and write camelCase JSON"""
    model_config = ConfigDict(
        extra='ignore',
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


# ============================================================================
# Pattern configs
# ============================================================================

class _ConcentricConfig(_CamelModel):
    """Fields shared by ring, square and polygon configs"""
    spacing_mode: SpacingMode = SpacingMode.SHRINKAGE
    outer_gap: float = 24.0
    shrinkage: float = 0.05
    show_outer_boundary: bool = True
    center: Optional[Point2D] = None

    @field_validator('spacing_mode', mode='before')
    @classmethod
    def coerce_spacing_mode(cls, v):
        return _coerce_enum(SpacingMode, v)

    # Generic extent accessors used by the spacing engine
    @property
    @abstractmethod
    def outer_extent(self) -> float:
        raise NotImplementedError

    @property
    @abstractmethod
    def inner_extent(self) -> float:
        raise NotImplementedError

    @property
    @abstractmethod
    def element_count(self) -> int:
        raise NotImplementedError

    @property
    def default_outer_gap(self) -> float:
        return 24.0

    def resolved_center(self) -> Point2D:
        """Explicit center, or (outer, outer) so the pattern sits in the first quadrant"""
        if self.center is not None:
            return self.center
        return Point2D(self.outer_extent, self.outer_extent)


def _reject_golden_ratio(v: SpacingMode, family: str) -> SpacingMode:
    if v == SpacingMode.GOLDEN_RATIO:
        raise ValueError(f"goldenRatio spacing is only available for rings, not {family}")
    return v


class RingPatternConfig(_ConcentricConfig):
    """Concentric rings with staggered cuts"""
    outer_radius: float = 360.0  # 5in at 72 DPI
    inner_radius: float = 36.0
    ring_count: int = 10
    outer_gap: float = 18.0
    cut_count: int = 8
    grid_divisions: int = 16
    stagger_offset: int = 1
    cut_width: float = 8.0

    @property
    def outer_extent(self) -> float:
        return self.outer_radius

    @property
    def inner_extent(self) -> float:
        return self.inner_radius

    @property
    def element_count(self) -> int:
        return self.ring_count

    @property
    def default_outer_gap(self) -> float:
        return 18.0


class SquarePatternConfig(_ConcentricConfig):
    """Nested squares; sizes are half side lengths"""
    outer_size: float = 360.0
    inner_size: float = 36.0
    square_count: int = 10
    rotation: float = 0.0  # degrees
    alternating: bool = True
    notches_per_side: int = 0
    notch_width: float = 8.0

    @field_validator('spacing_mode')
    @classmethod
    def check_spacing_mode(cls, v):
        return _reject_golden_ratio(v, "squares")

    @property
    def outer_extent(self) -> float:
        return self.outer_size

    @property
    def inner_extent(self) -> float:
        return self.inner_size

    @property
    def element_count(self) -> int:
        return self.square_count


class PolygonPatternConfig(_ConcentricConfig):
    """Nested regular polygons; extents are circumradii"""
    sides: int = 6
    outer_radius: float = 360.0
    inner_radius: float = 36.0
    polygon_count: int = 10
    rotation: float = 0.0  # degrees
    bridge_count: int = 0
    bridge_width: float = 8.0

    @field_validator('spacing_mode')
    @classmethod
    def check_spacing_mode(cls, v):
        return _reject_golden_ratio(v, "polygons")

    @property
    def outer_extent(self) -> float:
        return self.outer_radius

    @property
    def inner_extent(self) -> float:
        return self.inner_radius

    @property
    def element_count(self) -> int:
        return self.polygon_count


class SpiralPatternConfig(_CamelModel):
    """Multi-arm spiral"""
    arm_count: int = 4
    outer_radius: float = 360.0
    inner_radius: float = 10.0
    turns: float = 3.0
    spiral_type: SpiralType = SpiralType.LOGARITHMIC
    growth_factor: float = 0.2
    rotation: float = 0.0  # degrees
    stroke_width: float = 1.0
    show_outer_boundary: bool = True
    center: Optional[Point2D] = None

    @field_validator('spiral_type', mode='before')
    @classmethod
    def coerce_spiral_type(cls, v):
        return _coerce_enum(SpiralType, v)

    @property
    def outer_extent(self) -> float:
        return self.outer_radius

    def resolved_center(self) -> Point2D:
        if self.center is not None:
            return self.center
        return Point2D(self.outer_radius, self.outer_radius)


PatternConfig = Union[RingPatternConfig, SquarePatternConfig, PolygonPatternConfig, SpiralPatternConfig]

CONFIG_MODELS: Dict[PatternType, Type[BaseModel]] = {
    PatternType.RINGS: RingPatternConfig,
    PatternType.SQUARES: SquarePatternConfig,
    PatternType.POLYGONS: PolygonPatternConfig,
    PatternType.SPIRALS: SpiralPatternConfig,
}

DEFAULT_RING_CONFIG = RingPatternConfig()
DEFAULT_SQUARE_CONFIG = SquarePatternConfig()
DEFAULT_POLYGON_CONFIG = PolygonPatternConfig()
DEFAULT_SPIRAL_CONFIG = SpiralPatternConfig()


def coerce_pattern_type(value: Union[PatternType, str]) -> PatternType:
    """PatternType from an enum or a case-insensitive string"""
    coerced = _coerce_enum(PatternType, value)
    if not isinstance(coerced, PatternType):
        choices = ", ".join(p.value for p in PatternType)
        raise ValueError(f"Unknown pattern type: {value!r} (expected one of {choices})")
    return coerced


# ============================================================================
# Override merging
# ============================================================================

ConfigT = TypeVar("ConfigT", bound=BaseModel)


def apply_overrides(base: ConfigT, overrides: Optional[Mapping[str, Any]]) -> ConfigT:
    """
    Shallow field-by-field merge of overrides onto a config.

    Keys may be snake_case field names or camelCase aliases. Unknown keys
    are ignored. A None value leaves the field at its current value unless
    the field itself defaults to None (e.g. center). The merged record is
    re-validated, so invalid overrides raise ValidationError.

    Args:
        base: Config to start from (not modified)
        overrides: Partial record of new values

    Returns:
        New validated config of the same type
    """
    if not overrides:
        return base

    model_cls = type(base)
    fields = model_cls.model_fields
    lookup = {}
    for name in fields:
        lookup[name] = name
        lookup[to_camel(name)] = name

    data = base.model_dump()
    for key, value in overrides.items():
        name = lookup.get(key)
        if name is None:
            logger.debug(f"Ignoring unknown {model_cls.__name__} field '{key}'")
            continue
        if value is None and fields[name].default is not None:
            continue
        data[name] = value

    return model_cls.model_validate(data)


def resolve_config(
    model_cls: Type[ConfigT],
    config: Optional[Union[ConfigT, Mapping[str, Any]]] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> ConfigT:
    """Build a config from a model instance or mapping plus keyword overrides"""
    if isinstance(config, model_cls):
        resolved = config
    elif config is None:
        resolved = model_cls()
    elif isinstance(config, Mapping):
        resolved = apply_overrides(model_cls(), config)
    else:
        raise TypeError(
            f"Expected {model_cls.__name__} or mapping, got {type(config).__name__}"
        )
    return apply_overrides(resolved, overrides)


# ============================================================================
# Generated results
# ============================================================================

class GeneratedRing(_CamelModel):
    index: int
    radius: float
    rotation: float  # radians
    path_data: str


class GeneratedSquare(_CamelModel):
    index: int
    size: float
    clockwise: bool
    path_data: str


class GeneratedPolygon(_CamelModel):
    index: int
    radius: float
    sides: int
    path_data: str


class GeneratedSpiralArm(_CamelModel):
    index: int
    start_angle: float  # radians
    path_data: str


class _GeneratedPattern(_CamelModel):
    outer_boundary: Optional[str] = None
    center: Point2D

    @property
    @abstractmethod
    def pattern_type(self) -> PatternType:
        raise NotImplementedError

    @property
    @abstractmethod
    def elements(self) -> list:
        raise NotImplementedError

    @property
    @abstractmethod
    def extents(self) -> List[float]:
        raise NotImplementedError

    def path_strings(self) -> List[str]:
        """All path data, outer boundary first"""
        paths = []
        if self.outer_boundary:
            paths.append(self.outer_boundary)
        paths.extend(e.path_data for e in self.elements if e.path_data)
        return paths


class RingPattern(_GeneratedPattern):
    rings: List[GeneratedRing]
    radii: List[float]

    @property
    def pattern_type(self) -> PatternType:
        return PatternType.RINGS

    @property
    def elements(self) -> List[GeneratedRing]:
        return self.rings

    @property
    def extents(self) -> List[float]:
        return self.radii


class SquarePattern(_GeneratedPattern):
    squares: List[GeneratedSquare]
    sizes: List[float]

    @property
    def pattern_type(self) -> PatternType:
        return PatternType.SQUARES

    @property
    def elements(self) -> List[GeneratedSquare]:
        return self.squares

    @property
    def extents(self) -> List[float]:
        return self.sizes


class PolygonPattern(_GeneratedPattern):
    polygons: List[GeneratedPolygon]
    radii: List[float]

    @property
    def pattern_type(self) -> PatternType:
        return PatternType.POLYGONS

    @property
    def elements(self) -> List[GeneratedPolygon]:
        return self.polygons

    @property
    def extents(self) -> List[float]:
        return self.radii


class SpiralPattern(_GeneratedPattern):
    arms: List[GeneratedSpiralArm]

    @property
    def pattern_type(self) -> PatternType:
        return PatternType.SPIRALS

    @property
    def elements(self) -> List[GeneratedSpiralArm]:
        return self.arms

    @property
    def extents(self) -> List[float]:
        return []


GeneratedPattern = Union[RingPattern, SquarePattern, PolygonPattern, SpiralPattern]


# ============================================================================
# Presets
# ============================================================================

class Preset(_CamelModel):
    """
    A named, saved pattern configuration.

    `config` keeps the raw record as stored; use `to_config()` for the
    validated model of the preset's pattern type. Presets written before
    pattern types existed are ring presets.
    """
    id: Optional[str] = None  # filename stem, not stored in the file
    name: str
    description: Optional[str] = None
    pattern_type: PatternType = PatternType.RINGS
    config: Dict[str, Any] = Field(default_factory=dict)
    created_at: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    tags: Optional[List[str]] = None

    @field_validator('pattern_type', mode='before')
    @classmethod
    def coerce_type(cls, v):
        return _coerce_enum(PatternType, v)

    def to_config(self) -> PatternConfig:
        return resolve_config(CONFIG_MODELS[self.pattern_type], self.config)


def preset_id_from_name(name: str) -> str:
    """Filesystem-safe preset id: 'My Rings #2' -> 'my-rings-2'"""
    return re.sub(r'[^a-z0-9]+', '-', name.lower()).strip('-')


def preset_from_config(
    name: str,
    config: PatternConfig,
    description: Optional[str] = None,
    tags: Optional[List[str]] = None,
) -> Preset:
    """Wrap a config in a new preset"""
    pattern_type = next(t for t, cls in CONFIG_MODELS.items() if isinstance(config, cls))
    return Preset(
        id=preset_id_from_name(name),
        name=name,
        description=description,
        pattern_type=pattern_type,
        config=config.model_dump(mode='json', by_alias=True, exclude_none=True),
        tags=tags,
    )


def preset_from_dict(data: Mapping[str, Any], preset_id: Optional[str] = None) -> Preset:
    """Validate a preset record; the id falls back to one derived from the name"""
    errors = validate_preset_fields(dict(data))
    if errors:
        raise ValueError("Invalid preset: " + "; ".join(errors))

    preset = Preset.model_validate(dict(data))
    if preset_id is None and preset.id is None:
        preset_id = preset_id_from_name(preset.name)
    if preset_id is not None:
        preset = preset.model_copy(update={'id': preset_id})
    # Fail early on configs that would not generate
    preset.to_config()
    return preset


def load_preset_json(filepath: Union[str, Path]) -> Preset:
    """
    Load a preset file.

    Args:
        filepath: Path to a preset JSON file

    Returns:
        Preset whose id is the filename stem

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If the preset or its config is invalid
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"Preset file not found: {filepath}")

    with open(filepath, 'r') as f:
        data = json.load(f)

    preset = preset_from_dict(data, preset_id=filepath.stem)
    logger.info(f"Loaded {preset.pattern_type.value} preset '{preset.name}' from {filepath}")
    return preset


def save_preset_json(preset: Preset, filepath: Union[str, Path]) -> Path:
    """
    Save a preset to JSON.

    The id is not written; it is derived from the filename on load.
    """
    filepath = Path(filepath)

    data = preset.model_dump(mode='json', by_alias=True, exclude={'id'}, exclude_none=True)
    data['schemaVersion'] = SCHEMA_VERSION

    with open(filepath, 'w') as f:
        json.dump(data, f, indent=2)

    logger.info(f"Saved preset '{preset.name}' to {filepath}")
    return filepath
