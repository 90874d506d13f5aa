"""Fixed-size arrays of numbers with component-wise arithmetic."""

from __future__ import annotations

from numbers import Number
from typing import Any, Iterable, Iterator


def _quotient(numerator, denominator):
    """Divide, keeping integers exact when the division is exact."""
    if (
        isinstance(numerator, int)
        and isinstance(denominator, int)
        and numerator % denominator == 0
    ):
        return numerator // denominator
    return numerator / denominator


class ArrayBased:
    """A fixed-size sequence of numbers supporting component-wise operations."""

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[Any]):
        self._values = list(values)

    @property
    def values(self) -> tuple:
        """The components as a tuple."""
        return tuple(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArrayBased):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # mutable

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._values):
            raise IndexError(
                f"Array index was out of bounds: {index} (size {len(self._values)})"
            )

    def at(self, index: int):
        """Return the component at ``index``, raising IndexError when out of range."""
        self._check_index(index)
        return self._values[index]

    def set(self, index: int, value) -> None:
        """Replace the component at ``index``, raising IndexError when out of range."""
        self._check_index(index)
        self._values[index] = value

    def _check_same_size(self, other: "ArrayBased") -> None:
        if len(other) != len(self):
            raise ValueError(
                f"Array sizes differ: {len(self)} and {len(other)}"
            )

    def __add__(self, other):
        """Add a scalar to every component."""
        if not isinstance(other, Number):
            return NotImplemented
        return type(self)(v + other for v in self._values)

    def __iadd__(self, other):
        """Add the corresponding components of another array in place."""
        if not isinstance(other, ArrayBased):
            return NotImplemented
        self._check_same_size(other)
        self._values = [a + b for a, b in zip(self._values, other._values)]
        return self

    def __mul__(self, other):
        """Multiply by a scalar, or component-wise by another array."""
        if isinstance(other, ArrayBased):
            self._check_same_size(other)
            return type(self)(a * b for a, b in zip(self._values, other._values))
        if isinstance(other, Number):
            return type(self)(v * other for v in self._values)
        return NotImplemented

    def __itruediv__(self, scalar):
        """Divide every component by a scalar in place."""
        if not isinstance(scalar, Number):
            return NotImplemented
        self._values = [_quotient(v, scalar) for v in self._values]
        return self

    def __str__(self) -> str:
        return "(" + ", ".join(str(v) for v in self._values) + ")"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._values!r})"


def array_sum(values: Iterable[Any]):
    """Return the sum of the values."""
    return sum(values)


def make_array(*args) -> list:
    """Collect the arguments into a list."""
    return list(args)