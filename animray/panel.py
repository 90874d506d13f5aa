"""A panel: one rectangular part of a larger film."""

from __future__ import annotations

from typing import Any, Callable


class Panel:
    """A film of ``width`` by ``height`` pixels taken from a larger image.

    Each pixel is computed by ``fn`` at its position in the larger image,
    that is offset by ``(offset_x, offset_y)`` from the panel's own position.
    Pixels are indexed by column and then by row.
    """

    def __init__(
        self,
        width: int,
        height: int,
        offset_x: int,
        offset_y: int,
        fn: Callable[[int, int], Any],
    ):
        if width < 0 or height < 0:
            raise ValueError(f"Panel size must not be negative: {width}x{height}")
        self._columns = tuple(
            tuple(fn(x + offset_x, y + offset_y) for y in range(height))
            for x in range(width)
        )
        self.width = width
        self.height = height
        self.offset_x = offset_x
        self.offset_y = offset_y

    def __getitem__(self, column: int) -> tuple:
        """Return the pixels of one column, top row first."""
        return self._columns[column]

    def __len__(self) -> int:
        return len(self._columns)