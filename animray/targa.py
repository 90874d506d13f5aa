"""Writing images as uncompressed Targa files."""

from __future__ import annotations

import os
from typing import Sequence, Union

from animray.narrow import IntegerType, narrow

_GRAYSCALE = (3, 8)
_RGB = (2, 24)
_SIGNATURE = b"TRUEVISION-XFILE."


def _is_rgb(pixel) -> bool:
    if isinstance(pixel, int):
        return False
    if len(pixel) == 3:
        return True
    raise TypeError(f"Unsupported pixel value: {pixel!r}")


def encode_targa(rows: Sequence[Sequence]) -> bytes:
    """Encode an image, given top row first, as Targa bytes.

    Pixels are either single 0-255 grey levels or ``(red, green, blue)``
    triples of 0-255 values.
    """
    rows = [list(row) for row in rows]
    height = len(rows)
    width = len(rows[0]) if rows else 0
    if width == 0:
        raise ValueError("Image has no pixels")
    if any(len(row) != width for row in rows):
        raise ValueError("Image rows have different widths")

    rgb = _is_rgb(rows[0][0])
    image_type, bits = _RGB if rgb else _GRAYSCALE
    w = narrow(width, IntegerType.UINT16)
    h = narrow(height, IntegerType.UINT16)

    header = bytes([0, 0, image_type, 0, 0, 0, 0, 0, 0, 0, 0, 0])
    header += w.to_bytes(2, "little") + h.to_bytes(2, "little")
    header += bytes([bits, 0x20])

    data = bytearray()
    for row in rows:
        for pixel in row:
            if _is_rgb(pixel) != rgb:
                raise TypeError("Image mixes grey and colour pixels")
            if rgb:
                red, green, blue = pixel
                data += bytes([blue, green, red])
            else:
                data += bytes([pixel])

    footer = bytes([0, 0]) + _SIGNATURE + bytes([0])
    return header + bytes(data) + footer


def save_targa(path: Union[str, os.PathLike], rows: Sequence[Sequence]) -> None:
    """Save an image as a Targa file at ``path``."""
    encoded = encode_targa(rows)
    with open(path, "wb") as file:
        file.write(encoded)