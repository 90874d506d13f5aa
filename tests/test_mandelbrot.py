import pytest

from animray.mandelbrot import Transformer, default_colour


def _count(d, bits):
    return d


def test_centre_of_set_wraps_to_zero():
    t = Transformer(10, 10, 0.0, 0.0, 0.001, 8)
    assert t(5, 5) == 0


def test_point_far_outside_escapes_immediately():
    t = Transformer(10, 10, 10.0, 10.0, 0.001, 8, _count)
    assert t(5, 5) == 1


def test_counter_within_mask():
    t = Transformer(20, 20, -0.5, 0.0, 3.0, 6, _count)
    results = [t(x, y) for x in range(20) for y in range(20)]
    assert all(0 <= r < (1 << 6) for r in results)
    assert len(set(results)) > 2


def test_colour_receives_bits():
    def report_bits(d, bits):
        return bits

    result = Transformer(4, 4, 0.0, 0.0, 1.0, 7, report_bits)(1, 1)
    assert result == 7


def test_per_pixel_uses_smaller_dimension():
    t = Transformer(200, 100, 0.0, 0.0, 4.0, 8)
    assert t.per_pixel == pytest.approx(4.0 / 100)


@pytest.mark.parametrize("value", [0, 1, 77, 255])
def test_default_colour_identity_at_eight_bits(value):
    assert default_colour(value, 8) == value


@pytest.mark.parametrize("value", [0, 3, 100, 255])
def test_default_colour_drops_extra_bits(value):
    assert default_colour((value << 2) | 3, 10) == value


def test_default_colour_widens_small_counts():
    assert default_colour(1, 4) == 16


def test_default_colour_stays_in_byte_range():
    for bits in range(1, 13):
        assert 0 <= default_colour((1 << bits) - 1, bits) <= 255