"""Serial Mandelbrot set computation in single-precision arithmetic."""

from __future__ import annotations

import math
import struct
from typing import List, Sequence, Tuple

_F32 = struct.Struct("f")


def _f32(x: float) -> float:
    """Round a value to the nearest single-precision float."""
    try:
        return _F32.unpack(_F32.pack(x))[0]
    except OverflowError:
        return math.copysign(math.inf, x)


def mandel(c_re: float, c_im: float, count: int) -> int:
    """Iterations before the orbit of ``c`` leaves radius 2, at most ``count``."""
    c_re = _f32(c_re)
    c_im = _f32(c_im)
    z_re, z_im = c_re, c_im
    for i in range(count):
        re2 = _f32(z_re * z_re)
        im2 = _f32(z_im * z_im)
        if _f32(re2 + im2) > 4.0:
            return i
        new_re = _f32(re2 - im2)
        new_im = _f32(_f32(2.0 * z_re) * z_im)
        z_re = _f32(c_re + new_re)
        z_im = _f32(c_im + new_im)
    return max(count, 0)


def mandelbrot_serial(
    x0: float,
    y0: float,
    x1: float,
    y1: float,
    width: int,
    height: int,
    start_row: int,
    total_rows: int,
    max_iterations: int,
) -> List[int]:
    """Iteration counts of a ``width`` x ``height`` view, row-major.

    Only rows ``start_row`` to ``start_row + total_rows - 1`` are computed;
    the other entries of the returned image are zero.
    """
    if width <= 0 or height <= 0:
        raise ValueError("image dimensions must be positive")
    if start_row < 0 or total_rows < 0 or start_row + total_rows > height:
        raise ValueError("row range lies outside the image")
    x0, y0, x1, y1 = (_f32(v) for v in (x0, y0, x1, y1))
    dx = _f32(_f32(x1 - x0) / width)
    dy = _f32(_f32(y1 - y0) / height)

    output = [0] * (width * height)
    for j in range(start_row, start_row + total_rows):
        y = _f32(y0 + _f32(j * dy))
        base = j * width
        for i in range(width):
            x = _f32(x0 + _f32(i * dx))
            output[base + i] = mandel(x, y, max_iterations)
    return output


def scale_and_shift(
    x0: float,
    x1: float,
    y0: float,
    y1: float,
    scale: float,
    shift_x: float,
    shift_y: float,
) -> Tuple[float, float, float, float]:
    """Scale a view and then move it; returns the new (x0, x1, y0, y1)."""
    return (
        x0 * scale + shift_x,
        x1 * scale + shift_x,
        y0 * scale + shift_y,
        y1 * scale + shift_y,
    )


def verify_result(gold: Sequence[int], result: Sequence[int], width: int, height: int) -> bool:
    """Compare two images; report the first differing pixel and return False on mismatch."""
    for i in range(height):
        row = slice(i * width, (i + 1) * width)
        for j, (expected, actual) in enumerate(zip(gold[row], result[row])):
            if expected != actual:
                print(f"Mismatch : [{i}][{j}], Expected : {expected}, Actual : {actual}")
                return False
    return True