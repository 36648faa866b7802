"""
Single entry point for generating any pattern family.
"""

from typing import Any, Callable, Dict, Mapping, Optional, Union

from ..enums import PatternType
from ..io.loaders import GeneratedPattern, PatternConfig, coerce_pattern_type
from .polygons import generate_polygon_pattern
from .rings import generate_ring_pattern
from .spirals import generate_spiral_pattern
from .squares import generate_square_pattern

GENERATORS: Dict[PatternType, Callable[..., GeneratedPattern]] = {
    PatternType.RINGS: generate_ring_pattern,
    PatternType.SQUARES: generate_square_pattern,
    PatternType.POLYGONS: generate_polygon_pattern,
    PatternType.SPIRALS: generate_spiral_pattern,
}


def generate_pattern(
    pattern_type: Union[PatternType, str],
    config: Optional[Union[PatternConfig, Mapping[str, Any]]] = None,
    **overrides: Any,
) -> GeneratedPattern:
    """
    Generate a pattern of the given family.

    Args:
        pattern_type: PatternType or its name ("rings", "squares", ...)
        config: Config model for that family, or a partial mapping
        **overrides: Field overrides applied last

    Raises:
        ValueError: Unknown pattern type
        ValidationError: Invalid configuration values
    """
    return GENERATORS[coerce_pattern_type(pattern_type)](config, **overrides)
