"""A rectangular grid of colors which can be converted to a packed
framebuffer for display.

Pixel (0, 0) is the top-left corner of the canvas; x increases to the
right and y increases downward. Pixel data is stored in a float64
ndarray of shape (height, width, 3), so each row of the canvas is a
contiguous block.

"""

import logging
import operator

import numpy as np

from raytrace_tools.base import CanvasError, PixelOutOfBoundsError
from raytrace_tools import color as rt_color
from raytrace_tools.color import Color

logger = logging.getLogger(__name__)

class Canvas:
    """A `width` x `height` grid of colors, initially black.

    Unlike tuples and colors, a canvas is mutable: `write_pixel`
    modifies it in place.
    """

    def __init__(self, width, height):
        """Parameters
        ----------
        width : int
            number of pixels in each row
        height : int
            number of rows

        Raises
        ------
        CanvasError
            if either dimension is negative.

        """
        width = operator.index(width)
        height = operator.index(height)

        if width < 0 or height < 0:
            raise CanvasError(
                "Canvas dimensions must be nonnegative, got {} x {}".format(
                    width, height)
            )

        self.pixel_data = np.zeros((height, width, 3))
        logger.debug("created %d x %d canvas", width, height)

    @property
    def width(self):
        #no rows means no pixels, whatever width was asked for
        if self.height == 0:
            return 0
        return self.pixel_data.shape[1]

    @property
    def height(self):
        return self.pixel_data.shape[0]

    def _check_bounds(self, x, y):
        if isinstance(x, bool) or isinstance(y, bool):
            raise TypeError("pixel coordinates must be integers, not bool")

        x = operator.index(x)
        y = operator.index(y)

        if not (0 <= x < self.width and 0 <= y < self.height):
            raise PixelOutOfBoundsError(
                "pixel ({}, {}) is outside of {} x {} canvas".format(
                    x, y, self.width, self.height)
            )
        return x, y

    def write_pixel(self, x, y, color):
        """Set the color of the pixel at (x, y).

        Raises
        ------
        PixelOutOfBoundsError
            if (x, y) does not lie on the canvas. Negative coordinates
            are out of bounds (they do not wrap around).

        """
        x, y = self._check_bounds(x, y)
        self.pixel_data[y, x] = color.channels

    def pixel_at(self, x, y):
        """Get the color of the pixel at (x, y).

        Raises
        ------
        PixelOutOfBoundsError
            if (x, y) does not lie on the canvas.

        """
        x, y = self._check_bounds(x, y)
        return Color(self.pixel_data[y, x].copy())

    def fill(self, color):
        """Set every pixel of the canvas to the same color."""
        self.pixel_data[...] = color.channels

    def pixels(self):
        """Iterate over the pixels of the canvas in row-major order.

        Yields
        ------
        tuple
            tuples of the form `(x, y, color)`.

        """
        for y in range(self.height):
            for x in range(self.width):
                yield x, y, Color(self.pixel_data[y, x].copy())

    def to_framebuffer(self):
        """Get the packed framebuffer for this canvas.

        Returns
        -------
        ndarray
            uint32 array of length `width * height`, holding one
            0xAARRGGBB pixel per cell, with the top row first and each
            row ordered from left to right. Channels outside of [0, 1]
            saturate at 0 or 255.

        """
        logger.debug("packing %d x %d canvas into framebuffer",
                     self.width, self.height)
        return rt_color.pack_argb(self.pixel_data).reshape(-1)

    def to_rgb_array(self):
        """Get the canvas as a (height, width, 3) array of 8-bit RGB
        values, suitable for an image encoder.
        """
        return rt_color.to_8bit(self.pixel_data)

    def __repr__(self):
        return "Canvas({}, {})".format(self.width, self.height)
