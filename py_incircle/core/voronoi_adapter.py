"""
Voronoi diagram adapter over scipy.spatial.Voronoi.

Converts scipy's output into the small structure the inscribed-circle search
consumes: the Voronoi vertices (circumcenters of the Delaunay triangles) and,
for callers that draw the diagram, one cell polygon per site clipped to a
bounding rectangle.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

import numpy as np
import structlog
from scipy.spatial import QhullError, Voronoi
from shapely.geometry import MultiPoint, box

from ..config import settings
from .geometry import Bounds, Point, as_points, bounding_box

logger = structlog.get_logger()

# Sentinel sites sit this many bounding-box spans away from the sites
SENTINEL_DISTANCE = 10.0


@dataclass
class VoronoiDiagram:
    """Voronoi diagram of a set of sites."""
    sites: np.ndarray           # sites[i] = [x, y]
    circumcenters: np.ndarray   # circumcenters[k] = [x, y] Voronoi vertex
    bounds: Optional[Bounds] = None
    cells: List[Optional[List[Point]]] = field(default_factory=list)  # cells[i] = clipped cell of sites[i]

    def circumcenter_points(self) -> List[Point]:
        """Voronoi vertices as Points, in diagram order."""
        return as_points(self.circumcenters)


# Any callable with compute_voronoi's signature can replace the scipy backend
VoronoiBackend = Callable[..., VoronoiDiagram]


def _empty_diagram(sites: np.ndarray, bounds: Optional[Bounds]) -> VoronoiDiagram:
    return VoronoiDiagram(
        sites=sites,
        circumcenters=np.empty((0, 2)),
        bounds=bounds,
        cells=[None] * len(sites),
    )


def get_sentinel_points(bounds: Bounds) -> np.ndarray:
    """
    Four far-away points surrounding ``bounds``.

    Adding them to the sites pushes every real site inside the convex hull of
    the point set, so each real site gets a finite Voronoi region.
    """
    span = max(bounds.width, bounds.height, 1.0) * SENTINEL_DISTANCE
    cx = (bounds.min_x + bounds.max_x) / 2
    cy = (bounds.min_y + bounds.max_y) / 2
    return np.array([
        [cx - span, cy - span],
        [cx + span, cy - span],
        [cx + span, cy + span],
        [cx - span, cy + span],
    ])


def build_clipped_cells(sites: np.ndarray, bounds: Bounds) -> List[Optional[List[Point]]]:
    """
    Build each site's Voronoi cell clipped to ``bounds``.

    Args:
        sites: Array of [x, y] site coordinates
        bounds: Clipping rectangle

    Returns:
        One polygon per site, None where the cell is empty after clipping
    """
    n_sites = len(sites)
    extent = Bounds(
        min(bounds.min_x, sites[:, 0].min()),
        min(bounds.min_y, sites[:, 1].min()),
        max(bounds.max_x, sites[:, 0].max()),
        max(bounds.max_y, sites[:, 1].max()),
    )
    all_points = np.vstack([sites, get_sentinel_points(extent)])
    vor = Voronoi(all_points)
    clip_box = box(*bounds)

    cells = []
    for i in range(n_sites):
        region_idx = vor.point_region[i]
        region = vor.regions[region_idx] if region_idx >= 0 else []
        if not region or -1 in region or len(region) < 3:
            cells.append(None)
            continue

        # Voronoi cells are convex, the hull fixes the vertex order
        cell = MultiPoint([tuple(v) for v in vor.vertices[region]]).convex_hull
        clipped = cell.intersection(clip_box)
        if clipped.is_empty or clipped.geom_type != "Polygon":
            cells.append(None)
            continue

        cells.append(as_points(clipped.exterior.coords[:-1]))

    return cells


def compute_voronoi(sites: Sequence[Point], bounds: Optional[Bounds] = None) -> VoronoiDiagram:
    """
    Compute the Voronoi diagram of ``sites``.

    Args:
        sites: Site coordinates
        bounds: Clipping rectangle for cells; defaults to the sites' bounding
            box padded by ``settings.voronoi_padding``

    Returns:
        Diagram with all Voronoi vertices (unclipped) and clipped cells. Fewer
        than 3 sites or a site set Qhull rejects (all collinear, for
        example) gives a diagram without circumcenters or cells.
    """
    site_array = np.array([[p[0], p[1]] for p in sites], dtype=float).reshape(-1, 2)

    if len(site_array) > 0 and bounds is None:
        bounds = bounding_box(as_points(site_array), padding=settings.voronoi_padding)

    if len(site_array) < 3:
        logger.debug("Too few sites for a Voronoi diagram", sites=len(site_array))
        return _empty_diagram(site_array, bounds)

    try:
        vor = Voronoi(site_array)
        cells = build_clipped_cells(site_array, bounds)
    except QhullError as e:
        logger.warning("Voronoi diagram failed on degenerate sites",
                       sites=len(site_array), error=str(e).strip().split("\n")[0])
        return _empty_diagram(site_array, bounds)

    logger.debug("Voronoi diagram calculated",
                 sites=len(site_array), vertices=len(vor.vertices),
                 ridges=len(vor.ridge_points))

    return VoronoiDiagram(
        sites=site_array,
        circumcenters=vor.vertices,
        bounds=bounds,
        cells=cells,
    )
