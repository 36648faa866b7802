"""Output formatters for generated patterns.

Converts typed pattern models to JSON, plain-text summaries and complete
SVG documents. All functions expect a generated pattern model.

Uses Pydantic's model_dump(mode='json', by_alias=True) so JSON output
uses the same camelCase keys as saved presets.
"""

import json
from dataclasses import replace
from typing import Optional, TYPE_CHECKING

from ..core.geometry import rad_to_deg
from ..core.units import from_pixels, format_with_unit, pixels_to_inches
from ..enums import PatternType, Unit
from ..io.loaders import GeneratedPattern
from ..io.schema import SCHEMA_VERSION
from ..io.svg import ExportOptions, SVGPath, export_svg

if TYPE_CHECKING:
    from .validation import ValidationResult


def canvas_size_px(pattern: GeneratedPattern) -> float:
    """Square canvas that puts the pattern center in the middle"""
    return 2 * max(pattern.center.x, pattern.center.y)


def to_json(
    pattern: GeneratedPattern,
    validation: Optional["ValidationResult"] = None,
    indent: int = 2,
) -> str:
    """Convert a generated pattern to JSON.

    Args:
        pattern: Pattern from one of the generate_*_pattern() functions
        validation: Optional validation results to include in output
        indent: JSON indentation level (default: 2)

    Returns:
        JSON string with schema version, pattern type and pattern data
    """
    data = pattern.model_dump(mode='json', by_alias=True)
    data['patternType'] = pattern.pattern_type.value
    data['schemaVersion'] = SCHEMA_VERSION

    if validation is not None:
        data['validation'] = {
            'valid': validation.valid,
            'messages': [
                {
                    'severity': m.severity.value,
                    'code': m.code,
                    'message': m.message,
                    'suggestion': m.suggestion,
                }
                for m in validation.messages
            ],
        }

    return json.dumps(data, indent=indent)


def to_summary(pattern: GeneratedPattern) -> str:
    """Human-readable summary of a generated pattern."""
    canvas = canvas_size_px(pattern)
    elements = pattern.elements

    lines = [
        f"Pattern: {pattern.pattern_type.value}",
        f"  Center: ({pattern.center.x:.2f}, {pattern.center.y:.2f}) px",
        f"  Canvas: {format_with_unit(pixels_to_inches(canvas), Unit.INCHES)} square "
        f"({canvas:.0f} px at 72 DPI)",
        f"  Elements: {len(elements)}",
        f"  Outer boundary: {'yes' if pattern.outer_boundary else 'no'}",
    ]

    extents = pattern.extents
    if extents:
        lines.append(f"  Extents: {extents[0]:.2f} -> {extents[-1]:.2f} px")
        if len(extents) > 1:
            gaps = [a - b for a, b in zip(extents, extents[1:])]
            lines.append(f"  Gaps: {gaps[0]:.2f} -> {gaps[-1]:.2f} px")

    if pattern.pattern_type == PatternType.SPIRALS and elements:
        step = rad_to_deg(elements[1].start_angle - elements[0].start_angle) if len(elements) > 1 else 360.0
        lines.append(f"  Arm spacing: {step:.1f} deg")

    sub_paths = sum(e.path_data.count("M") for e in elements)
    lines.append(f"  Sub-paths: {sub_paths}")

    return "\n".join(lines)


def to_svg(pattern: GeneratedPattern, options: Optional[ExportOptions] = None) -> str:
    """Complete SVG document for a pattern.

    The document is a square canvas twice the pattern center coordinate,
    so a pattern generated with the default center fills it exactly. The
    outer boundary path comes first.

    Args:
        pattern: Generated pattern
        options: Styling and unit; width/height are replaced by the canvas size

    Returns:
        SVG document text
    """
    opts = options or ExportOptions()
    canvas = from_pixels(canvas_size_px(pattern), opts.unit)
    opts = replace(opts, width=canvas, height=canvas)

    paths = []
    if pattern.outer_boundary:
        paths.append(SVGPath(d=pattern.outer_boundary, id="outer-boundary"))
    for element in pattern.elements:
        if element.path_data:
            paths.append(SVGPath(d=element.path_data, id=f"{pattern.pattern_type.value}-{element.index}"))

    return export_svg(paths, opts)
