import math

import pytest

from animray.angles import PI, degrees


def test_half_turn_is_pi():
    assert degrees(180) == pytest.approx(math.pi)


def test_quarter_turn():
    assert degrees(90) == pytest.approx(math.pi / 2)


def test_zero():
    assert degrees(0) == 0


def test_full_turn_is_two_pi():
    assert degrees(360) == pytest.approx(2 * PI)


@pytest.mark.parametrize("value", [-720.0, -45.5, 1.0, 33.3, 270])
def test_round_trip_with_math_degrees(value):
    assert math.degrees(degrees(value)) == pytest.approx(value)


def test_negative_is_opposite():
    assert degrees(-60) == pytest.approx(-degrees(60))