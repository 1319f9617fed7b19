"""Tests for the Voronoi adapter."""

import numpy as np
import pytest
from shapely.geometry import Polygon as ShapelyPolygon, box

from py_incircle.core.geometry import Bounds, Point, point_in_polygon
from py_incircle.core.point_generation import generate_points
from py_incircle.core.voronoi_adapter import VoronoiDiagram, compute_voronoi, get_sentinel_points

TRIANGLE = [Point(0, 0), Point(4, 0), Point(0, 3)]


class TestCircumcenters:
    """Test Voronoi vertex extraction."""

    def test_triangle_circumcenter(self):
        """Three sites have a single Voronoi vertex at their circumcenter."""
        diagram = compute_voronoi(TRIANGLE)

        assert diagram.circumcenters.shape == (1, 2)
        np.testing.assert_allclose(diagram.circumcenters[0], [2.0, 1.5], atol=1e-9)

    def test_circumcenters_equidistant(self):
        """Every Voronoi vertex is equidistant from its three nearest sites."""
        sites = generate_points(12, 100, 100, seed=8)
        diagram = compute_voronoi(sites)
        site_array = np.array(sites)

        assert len(diagram.circumcenters) > 0
        for vertex in diagram.circumcenters:
            d = np.sort(np.linalg.norm(site_array - vertex, axis=1))
            assert d[2] == pytest.approx(d[0], rel=1e-7)

    def test_circumcenter_points(self):
        diagram = compute_voronoi(TRIANGLE)
        points = diagram.circumcenter_points()
        assert isinstance(points[0], Point)
        assert points[0].x == pytest.approx(2.0)

    def test_too_few_sites(self):
        diagram = compute_voronoi([Point(0, 0), Point(1, 1)])
        assert len(diagram.circumcenters) == 0
        assert diagram.cells == [None, None]

    def test_no_sites(self):
        diagram = compute_voronoi([])
        assert len(diagram.circumcenters) == 0
        assert diagram.bounds is None

    def test_collinear_sites(self):
        """Degenerate input gives an empty diagram instead of raising."""
        diagram = compute_voronoi([Point(0, 0), Point(1, 1), Point(2, 2), Point(3, 3)])
        assert len(diagram.circumcenters) == 0
        assert diagram.cells == [None] * 4

    def test_accepts_tuples(self):
        diagram = compute_voronoi([(0, 0), (4, 0), (0, 3)])
        assert diagram.circumcenters.shape == (1, 2)


class TestCells:
    """Test clipped cell construction."""

    def test_default_bounds_are_padded(self):
        diagram = compute_voronoi(TRIANGLE)
        assert diagram.bounds.min_x < 0
        assert diagram.bounds.max_x > 4
        assert diagram.bounds.max_y > 3

    def test_one_cell_per_site(self):
        sites = generate_points(10, 100, 100, seed=1)
        diagram = compute_voronoi(sites)
        assert len(diagram.cells) == len(sites)
        assert all(cell is not None for cell in diagram.cells)

    def test_site_inside_its_cell(self):
        sites = generate_points(10, 100, 100, seed=2)
        diagram = compute_voronoi(sites)
        for site, cell in zip(sites, diagram.cells):
            assert point_in_polygon(site, cell)

    def test_cells_within_bounds(self):
        bounds = Bounds(-5, -5, 105, 105)
        sites = generate_points(10, 100, 100, seed=4)
        diagram = compute_voronoi(sites, bounds)
        assert diagram.bounds == bounds
        for cell in diagram.cells:
            for p in cell:
                assert bounds.min_x - 1e-9 <= p.x <= bounds.max_x + 1e-9
                assert bounds.min_y - 1e-9 <= p.y <= bounds.max_y + 1e-9

    def test_cells_tile_the_bounds(self):
        """Clipped cells partition the bounding rectangle."""
        bounds = Bounds(0, 0, 100, 100)
        sites = generate_points(15, 100, 100, seed=9)
        diagram = compute_voronoi(sites, bounds)

        total = sum(ShapelyPolygon(cell).area for cell in diagram.cells)
        assert total == pytest.approx(box(*bounds).area, rel=1e-6)


class TestSentinels:
    """Test sentinel site placement."""

    def test_sentinels_surround_bounds(self):
        bounds = Bounds(0, 0, 10, 20)
        sentinels = get_sentinel_points(bounds)
        assert sentinels.shape == (4, 2)
        assert sentinels[:, 0].min() < bounds.min_x
        assert sentinels[:, 0].max() > bounds.max_x
        assert sentinels[:, 1].min() < bounds.min_y
        assert sentinels[:, 1].max() > bounds.max_y


class TestDiagramType:
    """Test the diagram container."""

    def test_defaults(self):
        diagram = VoronoiDiagram(sites=np.empty((0, 2)), circumcenters=np.empty((0, 2)))
        assert diagram.cells == []
        assert diagram.circumcenter_points() == []
