"""
Bauhaus Patterns Core - Pure pattern generation engine.

Geometry primitives, the path builder, the spacing engine and one
generator per pattern family. No file I/O.

Example:
    >>> from bauhaus_patterns.core import generate_ring_pattern
    >>>
    >>> pattern = generate_ring_pattern(ring_count=8, cut_count=6)
    >>> for ring in pattern.rings:
    ...     print(ring.radius, ring.path_data[:30])

Note: Names are lazy-loaded. The generators import the config models
from bauhaus_patterns.io, which in turn uses the geometry primitives
defined here.
"""

_GEOMETRY = {
    "PHI",
    "Point2D",
    "Arc",
    "BoundingBox",
    "deg_to_rad",
    "rad_to_deg",
    "distance",
    "point_on_circle",
    "normalize_angle",
    "arc_sweep",
    "lerp",
    "interpolate",
    "bounding_box",
    "round_to",
}

_PATH_BUILDER = {
    "PathBuilder",
    "MoveTo",
    "LineTo",
    "ArcTo",
    "CurveTo",
    "ClosePath",
    "serialize_path",
    "format_number",
    "arc_to_path",
    "circle_to_path",
    "line_to_path",
}

_SPACING = {
    "compute_extents",
    "calculate_radii",
    "calculate_square_sizes",
    "calculate_polygon_radii",
    "calculate_shrinkage_extents",
    "calculate_percentage_extents",
    "extents_for_config",
    "golden_ratio_sum",
}

_UNITS = {
    "DPI",
    "inches_to_pixels",
    "pixels_to_inches",
    "mm_to_pixels",
    "pixels_to_mm",
    "convert_units",
    "format_with_unit",
}

_RINGS = {
    "calculate_staggered_rotation",
    "generate_ring_with_cuts",
    "generate_half_circle_rings",
    "generate_bridge_connectors",
    "generate_ring_pattern",
}

_SQUARES = {
    "get_square_corners",
    "generate_square",
    "generate_square_with_notches",
    "generate_square_pattern",
}

_POLYGONS = {
    "POLYGON_PRESETS",
    "get_polygon_vertices",
    "generate_polygon",
    "generate_polygon_with_bridges",
    "generate_polygon_pattern",
}

_SPIRALS = {
    "spiral_radius",
    "sample_spiral_points",
    "points_to_bezier_path",
    "generate_spiral_arm",
    "generate_archimedean_spiral",
    "generate_logarithmic_spiral",
    "generate_spiral_pattern",
}

_GENERATE = {"generate_pattern", "GENERATORS"}

_SUBMODULES = (
    ("geometry", _GEOMETRY),
    ("path_builder", _PATH_BUILDER),
    ("spacing", _SPACING),
    ("units", _UNITS),
    ("rings", _RINGS),
    ("squares", _SQUARES),
    ("polygons", _POLYGONS),
    ("spirals", _SPIRALS),
    ("generate", _GENERATE),
)


def __getattr__(name):
    """Lazy load submodules when their attributes are accessed."""
    import importlib

    for module_name, names in _SUBMODULES:
        if name in names:
            module = importlib.import_module(f".{module_name}", __name__)
            return getattr(module, name)

    raise AttributeError(f"module 'bauhaus_patterns.core' has no attribute {name!r}")


__all__ = sorted(
    _GEOMETRY | _PATH_BUILDER | _SPACING | _UNITS
    | _RINGS | _SQUARES | _POLYGONS | _SPIRALS | _GENERATE
)
