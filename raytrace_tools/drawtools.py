"""This submodule provides an interface between
`raytrace_tools.canvas` and [matplotlib](https://matplotlib.org/).

The central class in this module is `CanvasDrawing`. To display a
canvas (or a framebuffer produced from one), instantiate this class
and pass the canvas to one of the drawing methods.

```python
from raytrace_tools import canvas, color, drawtools

c = canvas.Canvas(20, 10)
c.write_pixel(3, 4, color.Color(1., 0.5, 0.))

drawing = drawtools.CanvasDrawing()
drawing.draw_framebuffer(c.to_framebuffer(), c.width)
drawing.show()
```

"""

import logging

import numpy as np
import matplotlib.pyplot as plt

from raytrace_tools import color

logger = logging.getLogger(__name__)

class DrawingError(Exception):
    """Thrown if we try to draw pixel data which doesn't describe a
    rectangular image.

    """
    pass

class CanvasDrawing:
    def __init__(self, figsize=8, ax=None, fig=None):
        if ax is None or fig is None:
            fig, ax = plt.subplots(figsize=(figsize, figsize))

        self.ax, self.fig = ax, fig

        self.ax.axis("off")
        self.ax.set_aspect("equal")

    def _draw_rgb(self, rgb, **kwargs):
        default_kwargs = {
            "interpolation": "nearest",
            "origin": "upper"
        }
        for key, value in kwargs.items():
            default_kwargs[key] = value

        return self.ax.imshow(rgb, **default_kwargs)

    def draw_canvas(self, canvas, **kwargs):
        """Draw the pixels of a canvas, with its top row at the top of
        the figure.
        """
        return self._draw_rgb(canvas.to_rgb_array(), **kwargs)

    def draw_framebuffer(self, framebuffer, width, **kwargs):
        """Draw a packed ARGB framebuffer.

        Parameters
        ----------
        framebuffer : array-like
            row-major sequence of packed 0xAARRGGBB pixels
        width : int
            number of pixels in each row

        Raises
        ------
        DrawingError
            if the framebuffer is empty, or its length is not a
            multiple of `width`.

        """
        packed = np.asarray(framebuffer, dtype=np.uint32)

        if width <= 0 or packed.size == 0 or packed.size % width != 0:
            raise DrawingError(
                "Can't split framebuffer of length {} into rows of width {}".format(
                    packed.size, width)
            )

        rows = packed.reshape(-1, width)
        return self._draw_rgb(color.unpack_argb(rows), **kwargs)

    def save(self, filename, **kwargs):
        logger.debug("saving drawing to %s", filename)
        self.fig.savefig(filename, **kwargs)

    def show(self):
        plt.show()

    def close(self):
        plt.close(self.fig)
