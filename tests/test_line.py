import pytest

from animray.line import Line
from animray.point3d import Point3D


def test_default_line_is_empty():
    assert Line().length_squared() == 0


def test_length_squared():
    assert Line(Point3D(0, 0, 0), Point3D(1, 2, 2)).length_squared() == 9


def test_length_is_symmetric():
    a, b = Point3D(1, -3, 2), Point3D(4, 0.5, -7)
    assert Line(a, b).length_squared() == pytest.approx(Line(b, a).length_squared())


def test_proportion_along_ends():
    start, end = Point3D(1, 2, 3), Point3D(5, -6, 7)
    line = Line(start, end)
    assert line.proportion_along(0) == start
    assert line.proportion_along(1) == end


def test_proportion_along_midpoint_splits_length():
    line = Line(Point3D(0.0, 0.0, 0.0), Point3D(2.0, 4.0, 6.0))
    mid = line.proportion_along(0.5)
    first = Line(line.start, mid).length_squared()
    second = Line(mid, line.end).length_squared()
    assert first == pytest.approx(second)
    assert first * 4 == pytest.approx(line.length_squared())


def test_equality():
    a, b = Point3D(1, 2, 3), Point3D(4, 5, 6)
    assert Line(a, b) == Line(Point3D(2, 4, 6, 2), b)
    assert Line(a, b) != Line(b, a)


def test_str_format():
    line = Line(Point3D(0, 0, 0), Point3D(1, 2, 2))
    assert str(line) == "(0, 0, 0, 1) -> (1, 2, 2, 1)"