"""
Bauhaus Patterns API - validation, output formatting and the JSON bridge.

Example:
    >>> from bauhaus_patterns.api import validate_config, to_svg
    >>> from bauhaus_patterns.core import generate_ring_pattern
    >>>
    >>> result = validate_config("rings", {"ringCount": 40, "outerGap": 30})
    >>> for msg in result.warnings:
    ...     print(msg.code, msg.message)
    >>>
    >>> svg = to_svg(generate_ring_pattern(ring_count=12))
"""

from .validation import (
    Severity,
    ValidationMessage,
    ValidationResult,
    validate_config,
    validate_pattern_config,
)

from .output import (
    canvas_size_px,
    to_json,
    to_summary,
    to_svg,
)

from .js_bridge import (
    generate,
    get_defaults,
    GeneratorInputs,
    GeneratorOutput,
    ExportSettings,
)

__all__ = [
    # Validation
    "Severity",
    "ValidationMessage",
    "ValidationResult",
    "validate_config",
    "validate_pattern_config",

    # Output
    "canvas_size_px",
    "to_json",
    "to_summary",
    "to_svg",

    # JS bridge
    "generate",
    "get_defaults",
    "GeneratorInputs",
    "GeneratorOutput",
    "ExportSettings",
]
