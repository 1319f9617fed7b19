"""
Core geometry: star polygon construction and inscribed circle search.
"""

from .geometry import (
    Point, Circle, Bounds, as_points, distance, centroid, bounding_box,
    point_in_polygon, distance_to_segment, distance_to_polygon_boundary,
)
from .star_polygon import build_star_polygon, star_polygon_vertex_count
from .voronoi_adapter import VoronoiDiagram, compute_voronoi
from .inscribed_circle import find_inscribed_circle, find_pole_of_inaccessibility
from .point_generation import generate_points
from .pipeline import RunRecord, RunResult, RunStatistics, run_pipeline

__all__ = ['Point', 'Circle', 'Bounds', 'as_points', 'distance', 'centroid', 'bounding_box',
           'point_in_polygon', 'distance_to_segment', 'distance_to_polygon_boundary',
           'build_star_polygon', 'star_polygon_vertex_count',
           'VoronoiDiagram', 'compute_voronoi',
           'find_inscribed_circle', 'find_pole_of_inaccessibility',
           'generate_points',
           'RunRecord', 'RunResult', 'RunStatistics', 'run_pipeline']
