"""
SVG path construction.

Paths are built as a list of tagged commands and serialized on demand.
Serialization is deterministic: every coordinate is rounded to two
decimals (halves up) and printed in its shortest form, commands are
joined by single spaces.

    >>> from bauhaus_patterns.core.geometry import Point2D
    >>> PathBuilder().move_to(Point2D(0, 0)).line_to(Point2D(10, 5.125)).build()
    'M0,0 L10,5.13'
"""

from dataclasses import dataclass
from math import pi
from typing import List, Sequence, Union

from .geometry import Arc, Point2D, arc_sweep, point_on_circle, round_to


@dataclass(frozen=True)
class MoveTo:
    point: Point2D


@dataclass(frozen=True)
class LineTo:
    point: Point2D


@dataclass(frozen=True)
class ArcTo:
    """Circular arc to `end`; SVG large-arc and sweep flags"""
    radius: float
    end: Point2D
    large_arc: bool = False
    sweep: bool = True


@dataclass(frozen=True)
class CurveTo:
    """Cubic Bezier segment to `end`"""
    control1: Point2D
    control2: Point2D
    end: Point2D


@dataclass(frozen=True)
class ClosePath:
    pass


PathCommand = Union[MoveTo, LineTo, ArcTo, CurveTo, ClosePath]


def format_number(value: float, decimals: int = 2) -> str:
    """Round and print a number in its shortest form ('200', '12.5', '0')"""
    rounded = round_to(value, decimals)
    if rounded == 0:
        return "0"  # also folds -0.0
    if rounded == int(rounded):
        return str(int(rounded))
    return repr(rounded)


def _fmt_point(point: Point2D) -> str:
    return f"{format_number(point.x)},{format_number(point.y)}"


def serialize_command(command: PathCommand) -> str:
    """Serialize a single path command"""
    if isinstance(command, MoveTo):
        return f"M{_fmt_point(command.point)}"
    if isinstance(command, LineTo):
        return f"L{_fmt_point(command.point)}"
    if isinstance(command, ArcTo):
        r = format_number(command.radius)
        return (
            f"A{r},{r} 0 {int(command.large_arc)},{int(command.sweep)} "
            f"{_fmt_point(command.end)}"
        )
    if isinstance(command, CurveTo):
        return (
            f"C{_fmt_point(command.control1)} {_fmt_point(command.control2)} "
            f"{_fmt_point(command.end)}"
        )
    if isinstance(command, ClosePath):
        return "Z"
    raise TypeError(f"Unknown path command: {command!r}")


def serialize_path(commands: Sequence[PathCommand]) -> str:
    """Serialize a command sequence into SVG path data"""
    return " ".join(serialize_command(c) for c in commands)


class PathBuilder:
    """
    Accumulates path commands for a single SVG path.

    All mutators return the builder so calls can be chained. A builder
    is meant to be local to one generator call.
    """

    def __init__(self):
        self._commands: List[PathCommand] = []

    def move_to(self, point: Point2D) -> "PathBuilder":
        self._commands.append(MoveTo(point))
        return self

    def line_to(self, point: Point2D) -> "PathBuilder":
        self._commands.append(LineTo(point))
        return self

    def arc_to(
        self,
        radius: float,
        end: Point2D,
        large_arc: bool = False,
        sweep: bool = True,
    ) -> "PathBuilder":
        self._commands.append(ArcTo(radius, end, large_arc, sweep))
        return self

    def curve_to(self, control1: Point2D, control2: Point2D, end: Point2D) -> "PathBuilder":
        self._commands.append(CurveTo(control1, control2, end))
        return self

    def close_path(self) -> "PathBuilder":
        self._commands.append(ClosePath())
        return self

    @property
    def commands(self) -> List[PathCommand]:
        """Copy of the accumulated commands"""
        return list(self._commands)

    def is_empty(self) -> bool:
        return not self._commands

    def build(self) -> str:
        """Serialize accumulated commands to path data"""
        return serialize_path(self._commands)

    def reset(self) -> "PathBuilder":
        """Discard all accumulated commands"""
        self._commands.clear()
        return self

    def __len__(self) -> int:
        return len(self._commands)


def arc_to_path(arc: Arc) -> str:
    """Standalone path for a single arc: move to start, arc to end"""
    start = point_on_circle(arc.center, arc.radius, arc.start_angle)
    end = point_on_circle(arc.center, arc.radius, arc.end_angle)
    sweep = arc_sweep(arc.start_angle, arc.end_angle, arc.clockwise)
    large_arc = abs(sweep) > pi

    return (
        PathBuilder()
        .move_to(start)
        .arc_to(arc.radius, end, large_arc=large_arc, sweep=not arc.clockwise)
        .build()
    )


def circle_to_path(center: Point2D, radius: float) -> str:
    """
    Full circle as two semicircular arcs.

    SVG cannot draw a full circle with one arc command (start equals end),
    so the path runs top -> bottom -> top and closes.
    """
    top = Point2D(center.x, center.y - radius)
    bottom = Point2D(center.x, center.y + radius)

    return (
        PathBuilder()
        .move_to(top)
        .arc_to(radius, bottom, large_arc=True, sweep=True)
        .arc_to(radius, top, large_arc=True, sweep=True)
        .close_path()
        .build()
    )


def line_to_path(start: Point2D, end: Point2D) -> str:
    """Standalone path for a single straight segment"""
    return PathBuilder().move_to(start).line_to(end).build()
