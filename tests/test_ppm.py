import pytest

from pplab.ppm import encode_ppm, write_ppm_image


def test_header_and_size():
    encoded = encode_ppm([0] * 6, 3, 2, 256)
    assert encoded.startswith(b"P6\n3 2\n255\n")
    assert len(encoded) == len(b"P6\n3 2\n255\n") + 3 * 2 * 3


def test_pixel_shades():
    body = encode_ppm([0, 256, 64], 3, 1, 256)[len(b"P6\n3 1\n255\n"):]
    assert body == bytes([0, 0, 0, 255, 255, 255, 127, 127, 127])


def test_counts_clamped_to_max_iterations():
    a = encode_ppm([1000], 1, 1, 256)
    b = encode_ppm([256], 1, 1, 256)
    assert a == b


def test_channels_equal_and_monotone():
    body = encode_ppm(list(range(0, 257, 16)), 17, 1, 256)[len(b"P6\n17 1\n255\n"):]
    greys = body[::3]
    assert body[1::3] == greys and body[2::3] == greys
    assert list(greys) == sorted(greys)


def test_short_data_rejected():
    with pytest.raises(ValueError):
        encode_ppm([1, 2], 2, 2, 256)


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        encode_ppm([-1], 1, 1, 256)


def test_write_round_trip(tmp_path, capsys):
    path = tmp_path / "out.ppm"
    data = [0, 10, 100, 256]
    write_ppm_image(data, 2, 2, str(path), 256)
    assert path.read_bytes() == encode_ppm(data, 2, 2, 256)
    assert capsys.readouterr().out == f"Wrote image file {path}\n"