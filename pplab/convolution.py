"""Serial 2-D convolution of grey-scale images and filter file handling."""

from __future__ import annotations

from typing import List, Sequence, Tuple


def serial_conv(
    filter_width: int,
    filt: Sequence[float],
    image_height: int,
    image_width: int,
    image: Sequence[float],
) -> List[float]:
    """Convolve ``image`` with a square filter, treating outside pixels as absent."""
    if filter_width < 1:
        raise ValueError("filter width must be positive")
    if len(filt) < filter_width * filter_width:
        raise ValueError("filter holds too few values")
    if image_height < 0 or image_width < 0 or len(image) < image_height * image_width:
        raise ValueError("image holds too few pixels")

    half = filter_width // 2
    offsets = range(-half, half + 1)
    output = []
    for i in range(image_height):
        for j in range(image_width):
            total = 0.0
            for k in offsets:
                y = i + k
                if not 0 <= y < image_height:
                    continue
                for l in offsets:
                    x = j + l
                    if 0 <= x < image_width:
                        total += (
                            image[y * image_width + x]
                            * filt[(k + half) * filter_width + l + half]
                        )
            output.append(total)
    return output


def parse_filter(text: str) -> Tuple[int, List[float]]:
    """Filter width followed by width * width coefficients, whitespace separated."""
    tokens = text.split()
    if not tokens:
        raise ValueError("filter text is empty")
    width = int(tokens[0])
    if width < 1:
        raise ValueError("filter width must be positive")
    count = width * width
    values = tokens[1 : 1 + count]
    if len(values) < count:
        raise ValueError(f"filter needs {count} values, found {len(values)}")
    return width, [float(v) for v in values]


def read_filter(filename) -> Tuple[int, List[float]]:
    """Load a filter file; returns (width, coefficients)."""
    print(f"Reading filter data from {filename}")
    with open(filename, "r", encoding="ascii") as fp:
        width, values = parse_filter(fp.read())
    print(f"Filter width: {width}")
    return width, values


def diff_ratio(
    output: Sequence[float], reference: Sequence[float], threshold: int = 10
) -> float:
    """Share of pixels whose truncated absolute difference exceeds ``threshold``."""
    if len(output) != len(reference):
        raise ValueError("images differ in size")
    if not output:
        raise ValueError("images are empty")
    differing = sum(int(abs(a - b)) > threshold for a, b in zip(output, reference))
    return differing / len(output)