"""
Bauhaus Patterns IO - config models, presets, schemas and SVG export.

Example:
    >>> from bauhaus_patterns.io import load_preset_json, export_svg
    >>> from bauhaus_patterns.core import generate_pattern
    >>>
    >>> preset = load_preset_json("presets/dense-rings.json")
    >>> pattern = generate_pattern(preset.pattern_type, preset.to_config())
    >>> svg = export_svg(pattern.path_strings())
"""

from .loaders import (
    # Configs
    RingPatternConfig,
    SquarePatternConfig,
    PolygonPatternConfig,
    SpiralPatternConfig,
    PatternConfig,
    CONFIG_MODELS,
    DEFAULT_RING_CONFIG,
    DEFAULT_SQUARE_CONFIG,
    DEFAULT_POLYGON_CONFIG,
    DEFAULT_SPIRAL_CONFIG,
    coerce_pattern_type,
    apply_overrides,
    resolve_config,
    # Generated results
    GeneratedRing,
    GeneratedSquare,
    GeneratedPolygon,
    GeneratedSpiralArm,
    RingPattern,
    SquarePattern,
    PolygonPattern,
    SpiralPattern,
    GeneratedPattern,
    # Presets
    Preset,
    preset_id_from_name,
    preset_from_config,
    preset_from_dict,
    load_preset_json,
    save_preset_json,
)

from .schema import (
    SCHEMA_VERSION,
    get_config_schema,
    get_preset_schema,
    get_all_schemas,
    validate_preset_fields,
)

from .svg import (
    SVGPath,
    ExportOptions,
    export_svg,
    apply_kerf,
)

__all__ = [
    # Configs
    "RingPatternConfig",
    "SquarePatternConfig",
    "PolygonPatternConfig",
    "SpiralPatternConfig",
    "PatternConfig",
    "CONFIG_MODELS",
    "DEFAULT_RING_CONFIG",
    "DEFAULT_SQUARE_CONFIG",
    "DEFAULT_POLYGON_CONFIG",
    "DEFAULT_SPIRAL_CONFIG",
    "coerce_pattern_type",
    "apply_overrides",
    "resolve_config",

    # Generated results
    "GeneratedRing",
    "GeneratedSquare",
    "GeneratedPolygon",
    "GeneratedSpiralArm",
    "RingPattern",
    "SquarePattern",
    "PolygonPattern",
    "SpiralPattern",
    "GeneratedPattern",

    # Presets
    "Preset",
    "preset_id_from_name",
    "preset_from_config",
    "preset_from_dict",
    "load_preset_json",
    "save_preset_json",

    # Schema
    "SCHEMA_VERSION",
    "get_config_schema",
    "get_preset_schema",
    "get_all_schemas",
    "validate_preset_fields",

    # SVG
    "SVGPath",
    "ExportOptions",
    "export_svg",
    "apply_kerf",
]
