"""Checked narrowing of integers into fixed-width integer types."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class UnderflowError(ArithmeticError):
    """Raised when a value is below the smallest value of the target type."""


class IntegerType(Enum):
    """Fixed-width integer types, described by their width and signedness."""

    BOOL = (1, False)
    INT8 = (8, True)
    UINT8 = (8, False)
    INT16 = (16, True)
    UINT16 = (16, False)
    INT32 = (32, True)
    UINT32 = (32, False)
    INT64 = (64, True)
    UINT64 = (64, False)

    @property
    def bits(self) -> int:
        return self.value[0]

    @property
    def signed(self) -> bool:
        return self.value[1]

    @property
    def size(self) -> int:
        """The storage size in bytes."""
        return max(1, self.bits // 8)

    @property
    def minimum(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def maximum(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1


def _too_small(value: int, target: IntegerType) -> None:
    if value < target.minimum:
        raise UnderflowError(
            f"Value {value} is too small for the target type {target.name}"
        )


def _too_large(value: int, target: IntegerType) -> None:
    if value > target.maximum:
        raise OverflowError(
            f"Value {value} is too large for the target type {target.name}"
        )


def narrow(value: int, target: IntegerType, source: Optional[IntegerType] = None):
    """Convert ``value`` from type ``source`` to ``target``, checking the range.

    With no ``source`` the value is treated as an unbounded integer and checked
    against both ends of the target range. A ``BOOL`` target never fails.
    """
    if target is IntegerType.BOOL:
        return bool(value)
    value = int(value)
    if source is None:
        _too_small(value, target)
        _too_large(value, target)
    elif target.signed == source.signed:
        if target.size < source.size:
            _too_small(value, target)
            _too_large(value, target)
    elif target.signed:
        if target.size <= source.size:
            _too_large(value, target)
    else:
        if value < 0:
            raise UnderflowError(
                f"Value {value} is negative going into unsigned type {target.name}"
            )
        if target.size < source.size:
            _too_large(value, target)
    return value