import pytest
import numpy as np

from raytrace_tools import canvas, color
from raytrace_tools import CanvasError, PixelOutOfBoundsError
from raytrace_tools.color import Color

from raytrace_tools.utils.testing import *

@pytest.fixture
def blank():
    return canvas.Canvas(10, 20)

@pytest.fixture
def red():
    return Color(1.0, 0.0, 0.0)

@pytest.fixture
def small():
    c = canvas.Canvas(3, 2)
    c.write_pixel(0, 0, Color(1.0, 0.0, 0.0))
    c.write_pixel(2, 0, Color(0.0, 1.0, 0.0))
    c.write_pixel(1, 1, Color(0.0, 0.0, 1.0))
    return c

def test_new_canvas(blank):
    assert blank.width == 10
    assert blank.height == 20

    for x in range(10):
        for y in range(20):
            assert_color_approx(blank.pixel_at(x, y), color.BLACK)

def test_zero_height_canvas():
    c = canvas.Canvas(10, 0)
    assert c.width == 0
    assert c.height == 0
    assert len(c.to_framebuffer()) == 0

def test_negative_dimensions():
    with pytest.raises(CanvasError):
        canvas.Canvas(-1, 5)

def test_write_pixel(blank, red):
    blank.write_pixel(2, 3, red)
    assert_color_approx(blank.pixel_at(2, 3), red)
    assert_color_approx(blank.pixel_at(3, 2), color.BLACK)

def test_write_every_pixel():
    c = canvas.Canvas(4, 3)
    for y in range(3):
        for x in range(4):
            shade = Color(x / 4, y / 3, 0.5)
            c.write_pixel(x, y, shade)
            assert_color_approx(c.pixel_at(x, y), shade)

def test_pixel_at_returns_copy(blank, red):
    blank.write_pixel(0, 0, red)
    px = blank.pixel_at(0, 0)
    blank.write_pixel(0, 0, color.WHITE)
    assert_color_approx(px, red)

@pytest.mark.parametrize("x, y", [(10, 0), (0, 20), (-1, 0), (0, -1),
                                  (100, 100)])
def test_out_of_bounds(blank, red, x, y):
    with pytest.raises(PixelOutOfBoundsError):
        blank.write_pixel(x, y, red)

    with pytest.raises(PixelOutOfBoundsError):
        blank.pixel_at(x, y)

def test_out_of_bounds_is_index_error(blank):
    with pytest.raises(IndexError):
        blank.pixel_at(10, 20)

def test_non_integer_coordinates(blank, red):
    with pytest.raises(TypeError):
        blank.write_pixel(1.5, 2, red)

    with pytest.raises(TypeError):
        blank.write_pixel(True, False, red)

    with pytest.raises(TypeError):
        blank.pixel_at(0, True)

    assert_color_approx(blank.pixel_at(1, 0), color.BLACK)

def test_framebuffer_length(blank):
    fb = blank.to_framebuffer()
    assert fb.dtype == np.dtype('uint32')
    assert len(fb) == 10 * 20
    assert np.all(fb == 0xFF000000)

def test_framebuffer_order(small):
    assert np.array_equal(
        small.to_framebuffer(),
        np.array([0xFFFF0000, 0xFF000000, 0xFF00FF00,
                  0xFF000000, 0xFF0000FF, 0xFF000000])
    )

def test_framebuffer_clamps():
    c = canvas.Canvas(2, 1)
    c.write_pixel(0, 0, Color(1.5, 0.0, 0.0))
    c.write_pixel(1, 0, Color(0.0, 0.5, -0.5))
    assert np.array_equal(c.to_framebuffer(),
                          np.array([0xFFFF0000, 0xFF008000]))

def test_framebuffer_matches_colors(small):
    fb = small.to_framebuffer()
    for x, y, px in small.pixels():
        assert fb[y * small.width + x] == px.to_argb32()

def test_fill(blank, red):
    blank.fill(red)
    assert all(px.approx_equal(red) for _, _, px in blank.pixels())

def test_rgb_array(small):
    rgb = small.to_rgb_array()
    assert rgb.shape == (2, 3, 3)
    assert rgb.dtype == np.dtype('uint8')
    assert np.array_equal(rgb[0, 2], np.array([0, 255, 0]))
