"""
SVG document assembly for laser cutting.

Wraps raw path data in a complete SVG document with physical dimensions,
a pixel viewBox at 72 DPI and hairline cut strokes. Returns text; the
caller decides where it goes.
"""

from dataclasses import dataclass
from math import floor
from typing import Iterable, Optional, Union

from ..core.path_builder import format_number
from ..core.units import inches_to_pixels, to_pixels
from ..enums import Unit

# Physical-unit suffixes for the width/height attributes
_DIMENSION_SUFFIX = {
    Unit.INCHES: "in",
    Unit.MM: "mm",
    Unit.PX: "",
}


@dataclass(frozen=True)
class SVGPath:
    """One path element; stroke overrides the document stroke color"""
    d: str
    stroke: Optional[str] = None
    id: Optional[str] = None


@dataclass(frozen=True)
class ExportOptions:
    """
    Document settings.

    Attributes:
        width: Document width in `unit`
        height: Document height in `unit`
        unit: Physical unit of width and height
        stroke_color: Cut line color; red is the usual "cut" color
        stroke_width: Stroke width in inches (hairline by default)
        background_color: Background fill, "none" for transparent
    """
    width: float = 10.0
    height: float = 10.0
    unit: Union[Unit, str] = Unit.INCHES
    stroke_color: str = "#FF0000"
    stroke_width: float = 0.001
    background_color: str = "none"


def _fmt(value: float) -> str:
    return format_number(value, 6)


def _round_half_up(value: float) -> int:
    return int(floor(value + 0.5))


def export_svg(paths: Iterable[Union[SVGPath, str]], options: Optional[ExportOptions] = None) -> str:
    """
    Build a complete SVG document.

    Args:
        paths: SVGPath records, or raw path data strings
        options: Document settings (defaults: 10in x 10in, red hairline)

    Returns:
        SVG document text
    """
    opts = options or ExportOptions()
    unit = Unit(opts.unit)

    width_px = to_pixels(opts.width, unit)
    height_px = to_pixels(opts.height, unit)
    suffix = _DIMENSION_SUFFIX[unit]

    lines = [
        '<?xml version="1.0" encoding="utf-8"?>',
        '<svg xmlns="http://www.w3.org/2000/svg"',
        f'     width="{_fmt(opts.width)}{suffix}" height="{_fmt(opts.height)}{suffix}"',
        f'     viewBox="0 0 {_round_half_up(width_px)} {_round_half_up(height_px)}">',
    ]

    if opts.background_color and opts.background_color != "none":
        lines.append(f'  <rect width="100%" height="100%" fill="{opts.background_color}"/>')

    stroke_width_px = _fmt(inches_to_pixels(opts.stroke_width))

    for path in paths:
        if isinstance(path, str):
            path = SVGPath(d=path)
        stroke = path.stroke or opts.stroke_color
        id_attr = f' id="{path.id}"' if path.id else ""
        lines.append(
            f'  <path{id_attr} d="{path.d}" fill="none" stroke="{stroke}" stroke-width="{stroke_width_px}"/>'
        )

    lines.append("</svg>")
    return "\n".join(lines)


def apply_kerf(radius: float, kerf_inches: float, is_outer_cut: bool) -> float:
    """
    Compensate a cut radius (px) for the laser kerf.

    The beam removes kerf/2 on each side of the line, so outer cuts grow
    and inner cuts shrink by half the kerf.
    """
    adjustment = inches_to_pixels(kerf_inches) / 2
    return radius + adjustment if is_outer_cut else radius - adjustment
