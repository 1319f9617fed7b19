"""
Planar geometry primitives.

Points, circles and bounding boxes are plain immutable tuples. Polygons are
lists of points interpreted as a closed loop: the last vertex connects back to
the first.
"""

import math
from typing import Iterable, List, NamedTuple, Sequence

from ..exceptions import InvalidInputError


class Point(NamedTuple):
    """A planar coordinate."""
    x: float
    y: float


class Circle(NamedTuple):
    """A circle; the result of an inscribed-circle search."""
    center: Point
    radius: float


class Bounds(NamedTuple):
    """Axis-aligned bounding rectangle."""
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y


Polygon = List[Point]


def as_points(coords: Iterable) -> List[Point]:
    """Coerce ``(x, y)`` pairs, numpy rows or Points into a list of Points."""
    return [Point(float(c[0]), float(c[1])) for c in coords]


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(a.x - b.x, a.y - b.y)


def centroid(points: Sequence[Point]) -> Point:
    """
    Arithmetic mean of a point set.

    Args:
        points: Non-empty sequence of points

    Returns:
        Mean position

    Raises:
        InvalidInputError: If ``points`` is empty
    """
    if len(points) == 0:
        raise InvalidInputError("Cannot compute the centroid of an empty point set")

    sum_x = 0.0
    sum_y = 0.0
    for p in points:
        sum_x += p.x
        sum_y += p.y
    return Point(sum_x / len(points), sum_y / len(points))


def bounding_box(points: Sequence[Point], padding: float = 0.0) -> Bounds:
    """
    Smallest axis-aligned rectangle containing all points, grown by ``padding``.

    Raises:
        InvalidInputError: If ``points`` is empty
    """
    if len(points) == 0:
        raise InvalidInputError("Cannot compute the bounds of an empty point set")

    min_x = min(p.x for p in points)
    max_x = max(p.x for p in points)
    min_y = min(p.y for p in points)
    max_y = max(p.y for p in points)
    return Bounds(min_x - padding, min_y - padding, max_x + padding, max_y + padding)


def point_in_polygon(p: Point, polygon: Sequence[Point]) -> bool:
    """
    Even-odd ray casting test.

    A horizontal ray is cast from ``p`` towards +x and every polygon edge it
    crosses toggles the result. Points exactly on an edge get a deterministic
    but unspecified answer; self-intersecting polygons follow the even-odd rule.
    """
    inside = False
    n = len(polygon)
    j = n - 1
    for i in range(n):
        xi, yi = polygon[i]
        xj, yj = polygon[j]
        if (yi > p.y) != (yj > p.y) and p.x < (xj - xi) * (p.y - yi) / (yj - yi) + xi:
            inside = not inside
        j = i
    return inside


def distance_to_segment(p: Point, a: Point, b: Point) -> float:
    """
    Distance from ``p`` to the closest point of segment ``a``-``b``.

    The projection parameter of ``p`` onto the segment is clamped to [0, 1].
    A zero-length segment degrades to the distance to ``a``.
    """
    dx = b.x - a.x
    dy = b.y - a.y
    length_sq = dx * dx + dy * dy
    if length_sq == 0:
        return distance(p, a)

    param = ((p.x - a.x) * dx + (p.y - a.y) * dy) / length_sq
    if param < 0:
        return distance(p, a)
    if param > 1:
        return distance(p, b)
    return math.hypot(p.x - (a.x + param * dx), p.y - (a.y + param * dy))


def distance_to_polygon_boundary(p: Point, polygon: Sequence[Point]) -> float:
    """Minimum distance from ``p`` to any polygon edge, closing edge included.

    Returns ``inf`` for an empty polygon.
    """
    min_distance = math.inf
    n = len(polygon)
    for i in range(n):
        d = distance_to_segment(p, polygon[i], polygon[(i + 1) % n])
        if d < min_distance:
            min_distance = d
    return min_distance
