"""
Bauhaus Patterns - parametric cut-pattern generator for laser cutting.

Concentric rings, squares and polygons with bridge/notch/cut
perforations, and multi-arm spirals, emitted as SVG path data.

Example:
    >>> from bauhaus_patterns import generate_ring_pattern, to_svg, save_preset_json
    >>> from bauhaus_patterns import RingPatternConfig, preset_from_config
    >>>
    >>> # Generate a pattern
    >>> config = RingPatternConfig(ring_count=12, cut_count=6)
    >>> pattern = generate_ring_pattern(config)
    >>>
    >>> # Export for the laser cutter
    >>> svg = to_svg(pattern)
    >>>
    >>> # Save the settings
    >>> save_preset_json(preset_from_config("Twelve rings", config), "twelve-rings.json")

Note: All imports are lazy-loaded. The geometry primitives, path builder
and spacing engine can be imported without triggering the Pydantic models.
"""

__version__ = "1.0.0-alpha"

# Define which names come from which submodule
# All imports are lazy to minimize startup time

_ENUMS = {"SpacingMode", "SpiralType", "PatternType", "Unit"}

_CORE = {
    "Point2D",
    "PathBuilder",
    "circle_to_path",
    "arc_to_path",
    "line_to_path",
    "compute_extents",
    "calculate_radii",
    "calculate_square_sizes",
    "calculate_polygon_radii",
    "generate_pattern",
    "generate_ring_pattern",
    "generate_square_pattern",
    "generate_polygon_pattern",
    "generate_spiral_pattern",
    "POLYGON_PRESETS",
    "convert_units",
}

_IO = {
    "RingPatternConfig",
    "SquarePatternConfig",
    "PolygonPatternConfig",
    "SpiralPatternConfig",
    "apply_overrides",
    "Preset",
    "preset_from_config",
    "load_preset_json",
    "save_preset_json",
    "ExportOptions",
    "export_svg",
}

_API = {
    "validate_config",
    "Severity",
    "ValidationResult",
    "to_json",
    "to_summary",
    "to_svg",
}

# Cache for lazy-loaded modules
_modules = {}


def __getattr__(name):
    """Lazy load submodules when their attributes are accessed."""
    global _modules

    if name in _ENUMS:
        if "enums" not in _modules:
            from . import enums
            _modules["enums"] = enums
        return getattr(_modules["enums"], name)

    if name in _CORE:
        if "core" not in _modules:
            from . import core
            _modules["core"] = core
        return getattr(_modules["core"], name)

    if name in _IO:
        if "io" not in _modules:
            from . import io
            _modules["io"] = io
        return getattr(_modules["io"], name)

    if name in _API:
        if "api" not in _modules:
            from . import api
            _modules["api"] = api
        return getattr(_modules["api"], name)

    raise AttributeError(f"module 'bauhaus_patterns' has no attribute {name!r}")


__all__ = ["__version__"] + sorted(_ENUMS | _CORE | _IO | _API)
