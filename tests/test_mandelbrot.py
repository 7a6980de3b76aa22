import pytest

from pplab.mandelbrot import mandel, mandelbrot_serial, scale_and_shift, verify_result


def test_origin_stays_in_set():
    assert mandel(0.0, 0.0, 256) == 256


def test_far_point_escapes_immediately():
    assert mandel(2.0, 2.0, 256) == 0


@pytest.mark.parametrize("x,y", [(-0.5, 0.3), (0.3, 0.5), (-1.2, 0.1), (0.25, 0.6)])
def test_symmetric_about_real_axis(x, y):
    assert mandel(x, y, 300) == mandel(x, -y, 300)


@pytest.mark.parametrize("x,y", [(-0.75, 0.1), (0.4, 0.4), (-2.0, 1.0), (0.0, 1.0)])
def test_count_within_bounds(x, y):
    result = mandel(x, y, 100)
    assert 0 <= result <= 100


def test_more_iterations_never_lower_count():
    assert mandel(-0.75, 0.1, 500) >= mandel(-0.75, 0.1, 100)


def test_serial_image_size_and_range():
    image = mandelbrot_serial(-2, -1, 1, 1, 16, 12, 0, 12, 64)
    assert len(image) == 16 * 12
    assert all(0 <= v <= 64 for v in image)


def test_partial_rows_match_full_image():
    full = mandelbrot_serial(-2, -1, 1, 1, 10, 8, 0, 8, 50)
    part = mandelbrot_serial(-2, -1, 1, 1, 10, 8, 3, 2, 50)
    assert part[30:50] == full[30:50]
    assert all(v == 0 for v in part[:30] + part[50:])


def test_serial_rejects_bad_rows():
    with pytest.raises(ValueError):
        mandelbrot_serial(-2, -1, 1, 1, 4, 4, 3, 5, 10)


def test_serial_pixel_matches_mandel():
    image = mandelbrot_serial(-2, -1, 1, 1, 4, 4, 0, 4, 40)
    assert image[0] == mandel(-2.0, -1.0, 40)


def test_scale_and_shift_identity():
    assert scale_and_shift(-2, 1, -1, 1, 1, 0, 0) == (-2, 1, -1, 1)


def test_scale_and_shift_scales_then_shifts():
    assert scale_and_shift(-2, 1, -1, 1, 2, 1, 0) == (-3, 3, -2, 2)


def test_verify_result_equal():
    assert verify_result([1, 2, 3, 4], [1, 2, 3, 4], 2, 2) is True


def test_verify_result_mismatch_reports(capsys):
    assert verify_result([1, 1, 1, 1], [1, 2, 1, 1], 2, 2) is False
    assert capsys.readouterr().out == "Mismatch : [0][1], Expected : 1, Actual : 2\n"