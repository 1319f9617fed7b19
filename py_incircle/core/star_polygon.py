"""
Star polygon construction from a point cloud.

The ``n`` points closest to the cloud's centroid are ordered by polar angle
and then connected every ``m``-th point, giving a polygon shaped like the
classical star polygon {n/m}.
"""

import math
from typing import List, Sequence

import structlog

from ..exceptions import InvalidInputError
from .geometry import Point, centroid, distance

logger = structlog.get_logger()


def star_polygon_vertex_count(n: int, m: int) -> int:
    """Number of vertices the step-``m`` walk visits among ``n`` slots."""
    return n // math.gcd(n, m)


def build_star_polygon(points: Sequence[Point], n: int, m: int) -> List[Point]:
    """
    Build an ordered star polygon from a point cloud.

    Args:
        points: Input point cloud (not modified)
        n: Number of vertices to select, at least 3
        m: Step between connected vertices, at least 1

    Returns:
        Ordered polygon vertices. Empty when fewer than ``n`` points are
        given. Shorter than ``n`` when ``gcd(n, m) != 1``, since a single walk
        from index 0 cannot reach every slot.

    Raises:
        InvalidInputError: If ``n < 3`` or ``m < 1``
    """
    if n < 3:
        raise InvalidInputError(f"Star polygon needs at least 3 vertices, got n={n}")
    if m < 1:
        raise InvalidInputError(f"Star polygon step must be at least 1, got m={m}")

    if len(points) < n:
        logger.warning("Not enough points for star polygon", points=len(points), n=n)
        return []

    center = centroid(points)

    # sorted() is stable, ties keep input order
    by_distance = sorted(points, key=lambda p: distance(p, center))
    selected = sorted(
        by_distance[:n],
        key=lambda p: math.atan2(p.y - center.y, p.x - center.x),
    )

    star_shape = [selected[(i * m) % n] for i in range(n)]

    ordered = []
    visited = [False] * n
    current = 0
    for _ in range(n):
        if not visited[current]:
            ordered.append(star_shape[current])
            visited[current] = True
            current = (current + m) % n

    logger.debug("Star polygon built", n=n, m=m, vertices=len(ordered),
                 center_x=center.x, center_y=center.y)
    return ordered
