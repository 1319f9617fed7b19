"""Tests for geometry primitives."""

import math

import pytest
from py_incircle.core.geometry import (
    Bounds, Point, as_points, bounding_box, centroid, distance,
    distance_to_polygon_boundary, distance_to_segment, point_in_polygon,
)
from py_incircle.exceptions import InvalidInputError

SQUARE = [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]


class TestDistance:
    """Test point distance."""

    def test_pythagorean_triple(self):
        assert distance(Point(0, 0), Point(3, 4)) == 5

    def test_symmetric(self):
        a, b = Point(1.5, -2), Point(-7, 3.25)
        assert distance(a, b) == distance(b, a)


class TestCentroid:
    """Test centroid computation."""

    def test_mean_of_points(self):
        """Centroid equals the elementwise mean."""
        c = centroid([Point(0, 0), Point(2, 0), Point(2, 4)])
        assert c.x == pytest.approx(4 / 3)
        assert c.y == pytest.approx(4 / 3)

    def test_single_point(self):
        assert centroid([Point(7, -3)]) == Point(7, -3)

    def test_empty_raises(self):
        """Empty input must not silently produce NaN."""
        with pytest.raises(InvalidInputError):
            centroid([])

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            centroid([])


class TestPointInPolygon:
    """Test even-odd containment."""

    def test_inside_square(self):
        assert point_in_polygon(Point(5, 5), SQUARE)

    def test_outside_square(self):
        assert not point_in_polygon(Point(15, 5), SQUARE)

    def test_outside_below(self):
        assert not point_in_polygon(Point(5, -1), SQUARE)

    def test_edge_point_is_deterministic(self):
        """Points on an edge get the same answer every time."""
        results = {point_in_polygon(Point(10, 5), SQUARE) for _ in range(5)}
        assert len(results) == 1

    def test_concave_notch(self):
        """Point in the notch of a U shape is outside."""
        u_shape = [Point(0, 0), Point(9, 0), Point(9, 9), Point(6, 9),
                   Point(6, 3), Point(3, 3), Point(3, 9), Point(0, 9)]
        assert not point_in_polygon(Point(4.5, 6), u_shape)
        assert point_in_polygon(Point(1.5, 6), u_shape)

    def test_self_intersecting_even_odd(self):
        """Center of a pentagram is outside under the even-odd rule."""
        pentagram = [Point(10 * math.cos(math.radians(90 + 144 * k)),
                           10 * math.sin(math.radians(90 + 144 * k))) for k in range(5)]
        assert not point_in_polygon(Point(0, 0), pentagram)

    def test_degenerate_polygons_do_not_crash(self):
        assert point_in_polygon(Point(0, 0), []) is False
        assert isinstance(point_in_polygon(Point(0.5, 0.5), [Point(0, 0), Point(1, 1)]), bool)
        assert isinstance(point_in_polygon(Point(1, 0), [Point(0, 0), Point(2, 0), Point(4, 0)]), bool)

    def test_accepts_plain_tuples(self):
        assert point_in_polygon(Point(5, 5), [(0, 0), (10, 0), (10, 10), (0, 10)])


class TestDistanceToSegment:
    """Test point to segment distance."""

    def test_point_on_segment(self):
        assert distance_to_segment(Point(0, 5), Point(0, 0), Point(0, 10)) == 0

    def test_perpendicular(self):
        assert distance_to_segment(Point(5, 0), Point(0, 0), Point(0, 10)) == 5

    def test_clamped_past_end(self):
        """Projection beyond an endpoint measures to that endpoint."""
        assert distance_to_segment(Point(0, 13), Point(0, 0), Point(0, 10)) == pytest.approx(3)
        assert distance_to_segment(Point(3, -4), Point(0, 0), Point(0, 10)) == pytest.approx(5)

    def test_zero_length_segment(self):
        assert distance_to_segment(Point(3, 4), Point(0, 0), Point(0, 0)) == 5


class TestDistanceToPolygonBoundary:
    """Test point to polygon boundary distance."""

    def test_square_center(self):
        assert distance_to_polygon_boundary(Point(5, 5), SQUARE) == 5

    def test_off_center(self):
        assert distance_to_polygon_boundary(Point(2, 7), SQUARE) == 2

    def test_closing_edge_included(self):
        """The edge from the last vertex back to the first counts."""
        assert distance_to_polygon_boundary(Point(-1, 5), SQUARE) == 1

    def test_empty_polygon(self):
        assert distance_to_polygon_boundary(Point(0, 0), []) == math.inf


class TestBoundingBox:
    """Test bounding boxes."""

    def test_bounds(self):
        bounds = bounding_box([Point(1, 5), Point(-2, 3), Point(4, -1)])
        assert bounds == Bounds(-2, -1, 4, 5)
        assert bounds.width == 6
        assert bounds.height == 6

    def test_padding(self):
        bounds = bounding_box(SQUARE, padding=2)
        assert bounds == Bounds(-2, -2, 12, 12)

    def test_empty_raises(self):
        with pytest.raises(InvalidInputError):
            bounding_box([])


class TestAsPoints:
    """Test coordinate coercion."""

    def test_pairs(self):
        points = as_points([(1, 2), [3.5, 4]])
        assert points == [Point(1.0, 2.0), Point(3.5, 4.0)]
        assert all(isinstance(p, Point) for p in points)
