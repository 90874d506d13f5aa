import pytest

from animray.point3d import Point3D, UnitVector


def test_default_is_origin():
    p = Point3D()
    assert (p.x(), p.y(), p.z()) == (0, 0, 0)
    assert p.array[3] == 1


def test_homogeneous_equality():
    assert Point3D(2, 4, 6, 2) == Point3D(1, 2, 3)
    assert Point3D(1, 2, 3) != Point3D(1, 2, 4)


def test_not_equal_to_other_types():
    assert (Point3D(1, 2, 3) == "point") is False


def test_add_sub_round_trip():
    a = Point3D(1, 2, 3)
    b = Point3D(-4, 7, 0.5)
    assert (a + b) - b == a


def test_scalar_multiply_and_divide():
    p = Point3D(1, 2, 3)
    assert p * 2 == p + p
    assert (p * 4) / 4 == p
    assert p * 0 == Point3D()


def test_negation():
    p = Point3D(1, -2, 3)
    assert -p + p == Point3D()
    assert (-p).x() == -p.x()


def test_elementwise_multiply_identity():
    p = Point3D(3, 5, 7)
    assert p * Point3D(1, 1, 1) == p


def test_dot_and_magnitude():
    p = Point3D(3, 4, 0)
    assert p.dot() == 25
    assert p.magnitude() == 5


def test_unit_has_length_one():
    p = Point3D(1.5, -2.0, 7.0)
    assert p.unit().to_point().magnitude() == pytest.approx(1.0)


def test_str_format():
    assert str(Point3D(1, 2, 3)) == "(1, 2, 3, 1)"


def test_unit_vector_default_points_along_z():
    uv = UnitVector()
    assert (uv.x(), uv.y(), uv.z()) == (0, 0, 1)


def test_unit_vector_from_point():
    assert UnitVector.from_point(Point3D(0, 0, 5)) == UnitVector()


def test_unit_vector_negation():
    uv = Point3D(1, 2, 2).unit()
    neg = -uv
    assert neg.x() == pytest.approx(-uv.x())
    assert neg.y() == pytest.approx(-uv.y())
    assert neg.z() == pytest.approx(-uv.z())


def test_unit_vector_scaled_magnitude():
    uv = Point3D(2.0, -1.0, 3.0).unit()
    assert (uv * 7.5).magnitude() == pytest.approx(7.5)


def test_unit_vector_add_matches_point_add():
    uv = Point3D(1.0, 1.0, 0.0).unit()
    p = Point3D(4, 5, 6)
    assert uv + p == uv.to_point() + p


def test_unit_vector_str_shows_components():
    assert str(UnitVector(0, 0, 1, 1)) == str(Point3D(0, 0, 1, 1))


def test_zero_vector_unit_fails():
    with pytest.raises(ZeroDivisionError):
        Point3D().unit().x()