import pytest

from animray.array_based import ArrayBased, array_sum, make_array


def test_at_returns_values():
    arr = ArrayBased([7, 8, 9])
    assert [arr.at(i) for i in range(3)] == [7, 8, 9]


@pytest.mark.parametrize("index", [3, 10, -1])
def test_at_out_of_bounds(index):
    arr = ArrayBased([1, 2, 3])
    with pytest.raises(IndexError):
        arr.at(index)


def test_set_then_at():
    arr = ArrayBased([1, 2, 3])
    arr.set(1, 42)
    assert arr.at(1) == 42
    with pytest.raises(IndexError):
        arr.set(3, 0)


def test_add_scalar_round_trip():
    arr = ArrayBased([1, 2, 3, 4])
    added = arr + 3
    assert [v - 3 for v in added] == list(arr)
    assert arr.values == (1, 2, 3, 4)


def test_iadd_array():
    arr = ArrayBased([1, 2, 3])
    other = ArrayBased([10, 20, 30])
    arr += other
    assert [a - b for a, b in zip(arr, other)] == [1, 2, 3]


def test_iadd_size_mismatch():
    arr = ArrayBased([1, 2, 3])
    with pytest.raises(ValueError):
        arr += ArrayBased([1, 2])


def test_mul_identity_and_elementwise():
    arr = ArrayBased([2, 3, 5])
    assert arr * 1 == arr
    assert arr * ArrayBased([1, 1, 1]) == arr
    product = arr * ArrayBased([2, 2, 2])
    assert product == arr * 2


def test_itruediv_round_trip():
    arr = ArrayBased([2, 4, 6])
    arr /= 2
    assert arr * 2 == ArrayBased([2, 4, 6])


def test_str_format():
    assert str(ArrayBased([1, 2, 3])) == "(1, 2, 3)"


def test_array_sum():
    assert array_sum([1, 2, 3]) == 6
    assert array_sum([]) == 0


def test_make_array():
    assert make_array(1, 2, 3) == [1, 2, 3]