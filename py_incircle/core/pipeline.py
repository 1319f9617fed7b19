"""
End-to-end run: point cloud -> star polygon -> Voronoi diagram -> circle.

Run statistics are held by the caller and passed in explicitly; nothing here
keeps state between calls.
"""

import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

import structlog

from .geometry import Circle, Point
from .inscribed_circle import find_inscribed_circle
from .star_polygon import build_star_polygon
from .voronoi_adapter import VoronoiBackend, VoronoiDiagram, compute_voronoi

logger = structlog.get_logger()

STATUS_OK = "ok"
STATUS_INSUFFICIENT_POINTS = "insufficient_points"
STATUS_NO_CIRCLE = "no_circle"


@dataclass
class RunRecord:
    """Timing and outcome of one run."""
    vertices: int      # requested vertex count n
    time_ms: float
    radius: float      # 0.0 when no circle was found


@dataclass
class RunStatistics:
    """Caller-held accumulation of run records."""
    records: List[RunRecord] = field(default_factory=list)

    def append(self, record: RunRecord) -> None:
        self.records.append(record)

    def summary(self) -> Dict[str, float]:
        """Aggregate figures over all recorded runs."""
        count = len(self.records)
        if count == 0:
            return {"runs": 0, "mean_time_ms": 0.0, "mean_radius": 0.0, "max_radius": 0.0}
        return {
            "runs": count,
            "mean_time_ms": sum(r.time_ms for r in self.records) / count,
            "mean_radius": sum(r.radius for r in self.records) / count,
            "max_radius": max(r.radius for r in self.records),
        }


@dataclass
class RunResult:
    """Everything one run produces."""
    status: str
    n: int
    m: int
    polygon: List[Point]
    circle: Optional[Circle] = None
    diagram: Optional[VoronoiDiagram] = None
    time_ms: float = 0.0

    @property
    def radius(self) -> float:
        return self.circle.radius if self.circle is not None else 0.0


def run_pipeline(points: Sequence[Point], n: int, m: int,
                 statistics: Optional[RunStatistics] = None,
                 voronoi: VoronoiBackend = compute_voronoi) -> RunResult:
    """
    Build the star polygon for ``points`` and search its inscribed circle.

    Args:
        points: Input point cloud
        n: Star polygon vertex count
        m: Star polygon step
        statistics: Optional accumulator; gets a record for every run that
            produced a polygon
        voronoi: Voronoi backend

    Returns:
        RunResult whose status is "ok", "insufficient_points" (polygon with
        fewer than 3 vertices, nothing else computed) or "no_circle"
    """
    start = time.perf_counter()

    polygon = build_star_polygon(points, n, m)
    if len(polygon) < 3:
        logger.warning("Not enough points to build a polygon", points=len(points), n=n, m=m)
        return RunResult(status=STATUS_INSUFFICIENT_POINTS, n=n, m=m, polygon=polygon)

    diagram = voronoi(polygon)
    circle = find_inscribed_circle(polygon, voronoi=lambda sites: diagram)

    elapsed_ms = (time.perf_counter() - start) * 1000.0
    status = STATUS_OK if circle is not None else STATUS_NO_CIRCLE
    result = RunResult(status=status, n=n, m=m, polygon=polygon, circle=circle,
                       diagram=diagram, time_ms=elapsed_ms)

    if statistics is not None:
        statistics.append(RunRecord(vertices=n, time_ms=elapsed_ms, radius=result.radius))

    logger.info("Run complete", status=status, n=n, m=m, vertices=len(polygon),
                radius=round(result.radius, 2), time_ms=round(elapsed_ms, 2))
    return result
