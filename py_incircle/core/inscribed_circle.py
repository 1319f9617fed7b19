"""
Largest inscribed circle search.

The default search is an approximation: the Voronoi vertices of the polygon's
own vertices are candidate centers, and the candidate inside the polygon that
lies farthest from the boundary wins. The true optimum may sit elsewhere on
the medial axis, between candidates.

find_pole_of_inaccessibility() is a separate, opt-in solver built on
shapely's polylabel. It only accepts simple (valid) polygons.
"""

import math
from typing import Optional, Sequence

import structlog
from shapely.geometry import Polygon as ShapelyPolygon
from shapely.ops import polylabel

from ..config import settings
from .geometry import Circle, Point, distance_to_polygon_boundary, point_in_polygon
from .voronoi_adapter import VoronoiBackend, compute_voronoi

logger = structlog.get_logger()


def find_inscribed_circle(polygon: Sequence[Point],
                          voronoi: VoronoiBackend = compute_voronoi) -> Optional[Circle]:
    """
    Approximate the largest circle contained in ``polygon``.

    Args:
        polygon: Ordered polygon vertices
        voronoi: Voronoi backend; receives the polygon vertices as sites

    Returns:
        Best circle centered on a Voronoi vertex inside the polygon, or None
        when the polygon has fewer than 3 vertices or no Voronoi vertex falls
        inside it
    """
    if len(polygon) < 3:
        logger.debug("Polygon too small for an inscribed circle", vertices=len(polygon))
        return None

    diagram = voronoi(polygon)

    best = None
    max_radius = -math.inf
    candidates = 0
    for vertex in diagram.circumcenter_points():
        if not point_in_polygon(vertex, polygon):
            continue
        candidates += 1
        radius = distance_to_polygon_boundary(vertex, polygon)
        if radius > max_radius:
            max_radius = radius
            best = Circle(vertex, radius)

    if best is None:
        logger.info("No Voronoi vertex inside polygon", vertices=len(polygon),
                    circumcenters=len(diagram.circumcenters))
    else:
        logger.debug("Inscribed circle found", radius=best.radius,
                     center_x=best.center.x, center_y=best.center.y,
                     candidates=candidates)
    return best


def find_pole_of_inaccessibility(polygon: Sequence[Point],
                                 tolerance: float = None) -> Optional[Circle]:
    """
    Find the polygon's pole of inaccessibility with shapely's polylabel.

    Args:
        polygon: Ordered polygon vertices
        tolerance: Search precision, defaults to ``settings.pole_tolerance``

    Returns:
        Circle around the pole touching the nearest edge, or None for fewer
        than 3 vertices or a polygon shapely considers invalid (for example a
        self-intersecting star polygon)
    """
    if len(polygon) < 3:
        return None

    if tolerance is None:
        tolerance = settings.pole_tolerance

    shape = ShapelyPolygon([(p[0], p[1]) for p in polygon])
    if not shape.is_valid:
        logger.info("Polygon is not simple, no pole of inaccessibility", vertices=len(polygon))
        return None

    pole = polylabel(shape, tolerance=tolerance)
    center = Point(pole.x, pole.y)
    return Circle(center, distance_to_polygon_boundary(center, polygon))
