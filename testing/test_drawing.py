import pytest
import numpy as np

import matplotlib
matplotlib.use("Agg")

from raytrace_tools import canvas, drawtools
from raytrace_tools.color import Color
from raytrace_tools.drawtools import DrawingError

@pytest.fixture
def figure():
    drawing = drawtools.CanvasDrawing(figsize=2)
    yield drawing
    drawing.close()

@pytest.fixture
def small():
    c = canvas.Canvas(3, 2)
    c.write_pixel(1, 1, Color(0.0, 0.0, 1.0))
    return c

def test_draw_canvas(figure, small):
    image = figure.draw_canvas(small)
    assert np.array_equal(image.get_array(), small.to_rgb_array())

def test_draw_framebuffer(figure, small):
    image = figure.draw_framebuffer(small.to_framebuffer(), small.width)
    assert np.array_equal(image.get_array(), small.to_rgb_array())

def test_bad_framebuffer_width(figure, small):
    with pytest.raises(DrawingError):
        figure.draw_framebuffer(small.to_framebuffer(), 4)

    with pytest.raises(DrawingError):
        figure.draw_framebuffer([], 3)

def test_save(figure, small, tmp_path):
    figure.draw_canvas(small)
    filename = tmp_path / "canvas.png"
    figure.save(filename)
    assert filename.exists()
