#!/usr/bin/env python3
"""
Demonstration of star polygon construction and inscribed circle search.

Runs the pipeline over several (n, m) pairs on one seeded point cloud and
prints the polygon size, circle radius and timing of each run.
"""

from py_incircle.config import settings
from py_incircle.core import (
    RunStatistics, find_pole_of_inaccessibility, generate_points, run_pipeline,
    star_polygon_vertex_count,
)
from py_incircle.logging_setup import configure_logging


def main():
    configure_logging(level="WARNING", log_format="console")

    points = generate_points(200, settings.canvas_width, settings.canvas_height, seed=42)
    statistics = RunStatistics()

    print("=== Star Polygon Inscribed Circle Demo ===\n")
    print(f"Point cloud: {len(points)} points in "
          f"{settings.canvas_width:.0f}x{settings.canvas_height:.0f}\n")

    for n, m in [(5, 2), (7, 3), (8, 3), (8, 2), (12, 5)]:
        result = run_pipeline(points, n, m, statistics=statistics)
        expected = star_polygon_vertex_count(n, m)
        print(f"{{{n}/{m}}}: {len(result.polygon)} vertices (walk reaches {expected})")
        if result.circle is None:
            print(f"   - no inscribed circle ({result.status})")
        else:
            c = result.circle
            print(f"   - center ({c.center.x:.2f}, {c.center.y:.2f}), radius {c.radius:.2f}")
        print(f"   - time {result.time_ms:.2f} ms")

    # Convex case, where the polylabel solver applies
    convex = run_pipeline(points, 6, 1)
    pole = find_pole_of_inaccessibility(convex.polygon)
    print("\nConvex hexagon {6/1}:")
    print(f"   - Voronoi estimate radius: {convex.radius:.2f}")
    if pole is not None:
        print(f"   - polylabel radius:       {pole.radius:.2f}")

    summary = statistics.summary()
    print(f"\nRuns: {summary['runs']}, mean time {summary['mean_time_ms']:.2f} ms, "
          f"max radius {summary['max_radius']:.2f}")


if __name__ == "__main__":
    main()
