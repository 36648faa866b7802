"""
Geometry primitives for pattern generation.

Plain value types (points, arcs, bounding boxes) and the angle, distance
and interpolation helpers every generator builds on. All angles are in
radians unless a function name says otherwise.
"""

from dataclasses import dataclass
from math import pi, sqrt, cos, sin, floor
from typing import Iterable, List

# Golden ratio
PHI = (1 + sqrt(5)) / 2

TWO_PI = 2 * pi


@dataclass(frozen=True)
class Point2D:
    """A point in the SVG coordinate plane (y grows downward)"""
    x: float
    y: float

    def __add__(self, other: "Point2D") -> "Point2D":
        return Point2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point2D") -> "Point2D":
        return Point2D(self.x - other.x, self.y - other.y)

    def scale(self, factor: float) -> "Point2D":
        return Point2D(self.x * factor, self.y * factor)


@dataclass(frozen=True)
class Arc:
    """Circular arc described by center, radius and start/end angles.

    Attributes:
        center: Arc center.
        radius: Arc radius (same units as center).
        start_angle: Start angle in radians.
        end_angle: End angle in radians.
        clockwise: Direction of travel from start to end.
    """
    center: Point2D
    radius: float
    start_angle: float
    end_angle: float
    clockwise: bool = False


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned bounding box"""
    min_x: float
    min_y: float
    max_x: float
    max_y: float
    width: float
    height: float


def deg_to_rad(degrees: float) -> float:
    """Convert degrees to radians"""
    return degrees * pi / 180


def rad_to_deg(radians: float) -> float:
    """Convert radians to degrees"""
    return radians * 180 / pi


def distance(p1: Point2D, p2: Point2D) -> float:
    """Euclidean distance between two points"""
    return sqrt((p2.x - p1.x) ** 2 + (p2.y - p1.y) ** 2)


def point_on_circle(center: Point2D, radius: float, angle: float) -> Point2D:
    """Point at `angle` radians on the circle of `radius` around `center`.

    Angle 0 points along +x; because SVG y grows downward, increasing
    angles travel clockwise on screen.
    """
    return Point2D(center.x + radius * cos(angle), center.y + radius * sin(angle))


def normalize_angle(angle: float) -> float:
    """Fold an angle into [0, 2π)"""
    normalized = angle % TWO_PI
    # Float modulo can return exactly 2π for tiny negative inputs
    if normalized >= TWO_PI:
        normalized -= TWO_PI
    return normalized


def arc_sweep(start_angle: float, end_angle: float, clockwise: bool) -> float:
    """
    Angular extent travelled from start to end in the given direction.

    Counter-clockwise sweeps are positive and clockwise sweeps negative,
    both with magnitude below 2π.
    """
    sweep = end_angle - start_angle
    if clockwise:
        while sweep > 0:
            sweep -= TWO_PI
    else:
        while sweep < 0:
            sweep += TWO_PI
    return sweep


def lerp(start: float, end: float, t: float) -> float:
    """Linear interpolation; t outside [0, 1] extrapolates"""
    return start + (end - start) * t


def interpolate(p1: Point2D, p2: Point2D, t: float) -> Point2D:
    """Point at fraction t along the segment p1 -> p2"""
    return Point2D(lerp(p1.x, p2.x, t), lerp(p1.y, p2.y, t))


def bounding_box(points: Iterable[Point2D]) -> BoundingBox:
    """Bounding box of a point set; an empty set yields an all-zero box"""
    pts: List[Point2D] = list(points)
    if not pts:
        return BoundingBox(0, 0, 0, 0, 0, 0)

    xs = [p.x for p in pts]
    ys = [p.y for p in pts]
    min_x, max_x = min(xs), max(xs)
    min_y, max_y = min(ys), max(ys)
    return BoundingBox(min_x, min_y, max_x, max_y, max_x - min_x, max_y - min_y)


def round_to(value: float, decimals: int = 2) -> float:
    """
    Round to a fixed number of decimals, halves toward +infinity.

    Python's round() uses banker's rounding; path output must be stable
    for values like 0.125 so halves always go up (0.125 -> 0.13,
    -0.125 -> -0.12).
    """
    factor = 10 ** decimals
    return floor(value * factor + 0.5) / factor
