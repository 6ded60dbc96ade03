import math

import pytest

from coursekit.geometry import Circle, Point, Polygon, perimeter


def round_two_digits(x):
    return math.floor(x * 100.0 + 0.5) / 100.0


def test_point_magnitude():
    p1 = Point(12, 13)
    assert round_two_digits(p1.magnitude()) == 17.69


def test_point_dist():
    p1 = Point(10, 10)
    p2 = Point(14, 13)
    assert round_two_digits(p1.dist(p2)) == 5.00


def test_point_add():
    p1 = Point(16, 16)
    p2 = p1 + Point(-4, 3)
    assert p2 == Point(12, 19)


def test_point_sub_inverts_add():
    a = Point(7, -2)
    b = Point(3, 9)
    assert (a + b) - b == a


def test_polygon_left_most_point():
    p1 = Point(12, 13)
    p2 = Point(16, 16)
    poly = Polygon()
    poly.add_point(p1)
    poly.add_point(p2)
    assert poly.left_most_point() == p1


def test_polygon_left_most_point_empty():
    assert Polygon().left_most_point() is None


def test_polygon_left_most_point_tie_returns_first():
    poly = Polygon()
    poly.add_point(Point(1, 5))
    poly.add_point(Point(1, 2))
    assert poly.left_most_point() == Point(1, 5)


def test_polygon_iter():
    poly = Polygon()
    poly.add_point(Point(12, 13))
    poly.add_point(Point(16, 16))
    assert list(poly) == [Point(12, 13), Point(16, 16)]


def test_empty_polygon_length_is_zero():
    assert Polygon().length() == 0.0


def test_single_point_polygon_length_is_zero():
    poly = Polygon()
    poly.add_point(Point(3, 4))
    assert poly.length() == 0.0


def test_shape_perimeters():
    poly = Polygon()
    poly.add_point(Point(12, 13))
    poly.add_point(Point(17, 11))
    poly.add_point(Point(16, 16))
    shapes = [poly, Circle(Point(10, 20), 5)]
    perimeters = [round_two_digits(perimeter(shape)) for shape in shapes]
    assert perimeters == [15.48, 31.42]


def test_method_perimeter_matches_function():
    circle = Circle(Point(0, 0), 3)
    assert circle.perimeter() == perimeter(circle)


def test_circle_dist_is_center_distance():
    a = Circle(Point(10, 10), 1)
    b = Circle(Point(14, 13), 7)
    assert a.dist(b) == Point(10, 10).dist(Point(14, 13))


def test_perimeter_rejects_non_shape():
    with pytest.raises(TypeError):
        perimeter(Point(1, 1))