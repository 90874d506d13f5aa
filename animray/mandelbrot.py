"""A film transformation that draws the Mandelbrot set."""

from __future__ import annotations

from typing import Any, Callable


def default_colour(count: int, bits: int) -> int:
    """Scale an iteration count of ``bits`` bits into the 0-255 range."""
    if bits < 8:
        return count << (8 - bits)
    return count >> (bits - 8)


class Transformer:
    """Maps pixel co-ordinates to a colour showing Mandelbrot escape time."""

    def __init__(
        self,
        width: int,
        height: int,
        x: float,
        y: float,
        size: float,
        bits: int,
        colour: Callable[[int, int], Any] = default_colour,
    ):
        self.width = width
        self.height = height
        self.center_x = x
        self.center_y = y
        self.diameter = size
        self.per_pixel = size / min(width, height)
        self.bits = bits
        self.colour = colour

    def __call__(self, lx: int, ly: int):
        x = (lx - self.width / 2) * self.per_pixel
        y = (ly - self.height / 2) * self.per_pixel
        position = complex(x + self.center_x, y + self.center_y)
        mask = (1 << self.bits) - 1
        counter = 1
        current = position
        while current.real ** 2 + current.imag ** 2 < 4 and counter > 0:
            counter = (counter + 1) & mask
            current = current * current + position
        return self.colour(counter, self.bits)