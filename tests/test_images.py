import io
import random

import pytest
from PIL import Image

from primer.images import (
    NFRAMES,
    acos_color,
    lissajous,
    mandelbrot_color,
    mandelbrot_image,
    newton_color,
    sqrt_color,
)


@pytest.fixture(scope="module")
def gif_bytes():
    buffer = io.BytesIO()
    lissajous(buffer, random.Random(7))
    return buffer.getvalue()


def test_lissajous_is_gif(gif_bytes):
    assert gif_bytes.startswith(b"GIF8")


def test_lissajous_frames(gif_bytes):
    with Image.open(io.BytesIO(gif_bytes)) as im:
        assert im.n_frames == NFRAMES
        assert im.size == (201, 201)
        assert im.info["loop"] == NFRAMES
        assert im.info["duration"] == 80


def test_lissajous_first_frame_pixels(gif_bytes):
    with Image.open(io.BytesIO(gif_bytes)) as im:
        frame = im.convert("L")
        assert frame.getpixel((100, 100)) == 0
        assert frame.getpixel((0, 0)) == 255


def test_lissajous_deterministic_with_seed(gif_bytes):
    again = io.BytesIO()
    lissajous(again, random.Random(7))
    assert again.getvalue() == gif_bytes


def test_mandelbrot_inside_is_black():
    assert mandelbrot_color(0j) == (0, 0, 0)


def test_mandelbrot_immediate_escape_is_white():
    assert mandelbrot_color(3 + 0j) == (255, 255, 255)


def test_mandelbrot_image_pixels():
    img = mandelbrot_image(4, 4)
    assert img.size == (4, 4)
    assert img.mode == "RGBA"
    assert img.getpixel((2, 2)) == (0, 0, 0, 255)
    assert img.getpixel((0, 0)) == (255, 255, 255, 255)


def test_newton_root_converges_immediately():
    assert newton_color(1 + 0j) == (255, 255, 255)


def test_newton_origin_is_black():
    assert newton_color(0j) == (0, 0, 0)


def test_sqrt_color_of_zero_is_near_luma():
    assert all(abs(channel - 128) <= 2 for channel in sqrt_color(0j))


def test_acos_color_of_one_is_near_luma():
    assert all(abs(channel - 192) <= 2 for channel in acos_color(1 + 0j))