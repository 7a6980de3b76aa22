"""Binary PPM output of Mandelbrot iteration counts."""

from __future__ import annotations

import struct
from typing import Sequence

_F32 = struct.Struct("f")


def _f32(x: float) -> float:
    return _F32.unpack(_F32.pack(x))[0]


def _shade(value: int, max_iterations: int) -> int:
    clamped = min(float(max_iterations), float(value))
    if clamped < 0:
        raise ValueError("iteration counts must not be negative")
    mapped = _f32(_f32(clamped / 256.0) ** 0.5)
    return int(_f32(255.0 * mapped)) & 0xFF


def encode_ppm(data: Sequence[int], width: int, height: int, max_iterations: int) -> bytes:
    """Grey-scale P6 image of the first ``width * height`` counts in ``data``."""
    size = width * height
    if width < 0 or height < 0 or len(data) < size:
        raise ValueError("data does not cover the image")
    header = f"P6\n{width} {height}\n255\n".encode("ascii")
    pixels = bytearray()
    for value in data[:size]:
        pixels += bytes((_shade(value, max_iterations),)) * 3
    return header + bytes(pixels)


def write_ppm_image(
    data: Sequence[int], width: int, height: int, filename, max_iterations: int
) -> None:
    """Write the image produced by :func:`encode_ppm` to ``filename``."""
    encoded = encode_ppm(data, width, height, max_iterations)
    with open(filename, "wb") as fp:
        fp.write(encoded)
    print(f"Wrote image file {filename}")