"""Reading and writing 8-bit grey-scale BMP images as float pixels."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

_MIN_HEADER = 26


@dataclass
class BmpImage:
    """A grey-scale image with pixels stored row-major, top row first."""

    width: int
    height: int
    pixels: List[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("image dimensions must not be negative")
        if len(self.pixels) != self.width * self.height:
            raise ValueError("pixel count does not match the image size")


def _header_fields(data: bytes) -> Tuple[int, int, int]:
    """Pixel data offset, width and height from a bitmap file's header."""
    if len(data) < _MIN_HEADER:
        raise ValueError("not a bitmap: header too short")
    (offset,) = struct.unpack_from("<i", data, 10)
    width, height = struct.unpack_from("<ii", data, 18)
    if offset < 0 or width < 0 or height < 0:
        raise ValueError("bitmap header holds negative values")
    return offset, width, height


def _row_padding(width: int) -> int:
    """Bytes needed to bring a row of ``width`` bytes to a multiple of four."""
    return (-width) % 4


def _to_byte(value: float) -> int:
    return int(value) & 0xFF


def read_image(filename) -> BmpImage:
    """Load an 8-bit bitmap, turning the bottom-up rows right side up."""
    print(f"Reading input image from {filename}")
    with open(filename, "rb") as fp:
        data = fp.read()

    offset, width, height = _header_fields(data)
    print(f"width = {width}")
    print(f"height = {height}")

    stride = width + _row_padding(width)
    needed = offset + stride * (height - 1) + width if height else offset
    if len(data) < needed:
        raise ValueError("bitmap pixel data is truncated")

    stored_rows = [
        data[offset + r * stride : offset + r * stride + width] for r in range(height)
    ]
    pixels = [float(value) for row in reversed(stored_rows) for value in row]
    return BmpImage(width=width, height=height, pixels=pixels)


def store_image(
    image_out: Sequence[float],
    filename,
    rows: int,
    cols: int,
    ref_filename,
) -> None:
    """Write ``image_out`` (``rows`` x ``cols``) as a bitmap using the header of ``ref_filename``.

    The width and height written are those of the reference image; each
    pixel is truncated to a byte and rows are padded with their last byte.
    """
    with open(ref_filename, "rb") as ref:
        ref_data = ref.read()
    offset, width, height = _header_fields(ref_data)
    if offset > len(ref_data):
        raise ValueError("reference bitmap header is truncated")
    if height > rows or width > cols:
        raise ValueError("reference image is larger than the output image")
    if len(image_out) < rows * cols:
        raise ValueError("output image holds too few pixels")

    print(f"Writing output image to {filename}")
    body = bytearray(ref_data[:offset])
    pad = _row_padding(width)
    for i in reversed(range(height)):
        row = bytes(_to_byte(v) for v in image_out[i * cols : i * cols + width])
        body += row
        filler = row[-1:] if row else b"\x00"
        body += filler * pad

    with open(filename, "wb") as fp:
        fp.write(body)