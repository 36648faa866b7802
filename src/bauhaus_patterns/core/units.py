"""
Unit conversion for laser-cutting documents.

SVG user units are pixels at 72 DPI (the Illustrator convention most
laser software expects), so 1 inch = 72 px and 25.4 mm = 72 px.
"""

from typing import Union

from ..enums import Unit
from .path_builder import format_number

DPI = 72
MM_PER_INCH = 25.4

UnitInput = Union[Unit, str]

_SUFFIXES = {
    Unit.INCHES: "in",
    Unit.MM: "mm",
    Unit.PX: "px",
}


def inches_to_pixels(inches: float) -> float:
    return inches * DPI


def pixels_to_inches(pixels: float) -> float:
    return pixels / DPI


def mm_to_pixels(mm: float) -> float:
    return (mm / MM_PER_INCH) * DPI


def pixels_to_mm(pixels: float) -> float:
    return (pixels / DPI) * MM_PER_INCH


def _coerce_unit(unit: UnitInput) -> Unit:
    if isinstance(unit, Unit):
        return unit
    try:
        return Unit(unit)
    except ValueError:
        raise ValueError(f"Unknown unit: {unit!r} (expected inches, mm or px)") from None


def to_pixels(value: float, unit: UnitInput) -> float:
    """Convert a value in `unit` to pixels"""
    unit = _coerce_unit(unit)
    if unit == Unit.INCHES:
        return inches_to_pixels(value)
    if unit == Unit.MM:
        return mm_to_pixels(value)
    return value


def from_pixels(pixels: float, unit: UnitInput) -> float:
    """Convert pixels to `unit`"""
    unit = _coerce_unit(unit)
    if unit == Unit.INCHES:
        return pixels_to_inches(pixels)
    if unit == Unit.MM:
        return pixels_to_mm(pixels)
    return pixels


def convert_units(value: float, from_unit: UnitInput, to_unit: UnitInput) -> float:
    """Convert between any two units, going through pixels"""
    from_unit = _coerce_unit(from_unit)
    to_unit = _coerce_unit(to_unit)
    if from_unit == to_unit:
        return value
    return from_pixels(to_pixels(value, from_unit), to_unit)


def format_with_unit(value: float, unit: UnitInput, decimals: int = 2) -> str:
    """Format a value with its unit suffix, e.g. '2.5in', '10mm', '72px'"""
    unit = _coerce_unit(unit)
    return f"{format_number(value, decimals)}{_SUFFIXES[unit]}"
