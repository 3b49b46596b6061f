"""RGB colors, and conversion of colors to packed 32-bit pixels.

Channels are unconstrained real numbers: intermediate results may
exceed [0, 1], and are only clamped when colors are packed for
display by `pack_argb`.

"""

import numpy as np

from raytrace_tools.base import TupleError
from raytrace_tools.operations import TupleOperations
from raytrace_tools.utils import numerical
from raytrace_tools.utils.numerical import EPSILON

#largest value of an 8-bit channel
CHANNEL_MAX = 255

#alpha channel of every packed pixel (fully opaque)
OPAQUE_ALPHA = 0xFF

class Color(TupleOperations):
    """An RGB color, stored as a read-only float64 ndarray of shape (3,)
    (available as `channels`).
    """

    __slots__ = ("_channels",)

    def __init__(self, red, green=None, blue=None):
        others = (green, blue)
        if all(c is None for c in others):
            data = red
        elif any(c is None for c in others):
            raise TupleError(
                "Color expects either three channels or a single sequence"
            )
        else:
            data = (red, green, blue)

        channels = numerical.as_components(data, 3)
        if channels is None:
            raise TupleError(
                "Color expects three real channels, got {!r}".format(data)
            )
        self._channels = channels

    @property
    def channels(self):
        return self._channels

    @property
    def red(self):
        return float(self.channels[0])

    @property
    def green(self):
        return float(self.channels[1])

    @property
    def blue(self):
        return float(self.channels[2])

    def add(self, other):
        return Color(self.channels + other.channels)

    def sub(self, other):
        return Color(self.channels - other.channels)

    def scale(self, scalar):
        return Color(self.channels * scalar)

    def hadamard(self, other):
        """Multiply two colors channel by channel.

        This is how the intensity of a light is combined with the
        color of a surface.

        """
        return Color(self.channels * other.channels)

    def approx_equal(self, other, tolerance=EPSILON):
        return numerical.approx_equal(self.channels, other.channels,
                                      tolerance)

    def to_argb32(self):
        """Get this color as a packed 0xAARRGGBB integer, with each
        channel clamped to [0, 1] and alpha fully opaque.
        """
        return int(pack_argb(self.channels))

    def __mul__(self, other):
        if isinstance(other, Color):
            return self.hadamard(other)
        return TupleOperations.__mul__(self, other)

    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return bool(np.array_equal(self.channels, other.channels))

    def __hash__(self):
        return hash(tuple(self.channels.tolist()))

    def __iter__(self):
        return iter((self.red, self.green, self.blue))

    def __repr__(self):
        return "Color({}, {}, {})".format(self.red, self.green, self.blue)

BLACK = Color(0., 0., 0.)
WHITE = Color(1., 1., 1.)

def hadamard_multiply(c1, c2):
    return c1.hadamard(c2)

def to_8bit(channels):
    """Clamp an array of real channel values to [0, 1] and scale them to
    integers in [0, 255].

    NaN channels are treated as 0.

    """
    clamped = np.clip(np.nan_to_num(np.asarray(channels, dtype=float),
                                    nan=0.0), 0.0, 1.0)
    return np.round(clamped * CHANNEL_MAX).astype(np.uint8)

def pack_argb(channels):
    """Pack RGB channel data into 32-bit ARGB pixels.

    Parameters
    ----------
    channels : array-like
        array of shape (..., 3) of real RGB values. Values outside of
        [0, 1] saturate.

    Returns
    -------
    ndarray
        uint32 array of shape (...), with each entry of the form
        0xAARRGGBB.

    """
    rgb = to_8bit(channels).astype(np.uint32)
    return ((np.uint32(OPAQUE_ALPHA) << np.uint32(24)) |
            (rgb[..., 0] << np.uint32(16)) |
            (rgb[..., 1] << np.uint32(8)) |
            rgb[..., 2])

def unpack_argb(packed):
    """Unpack 32-bit ARGB pixels into 8-bit RGB channels.

    Parameters
    ----------
    packed : array-like
        array of packed 0xAARRGGBB pixels, of any shape.

    Returns
    -------
    ndarray
        uint8 array with one more axis than `packed`, of length 3,
        holding the red, green and blue channels. The alpha channel is
        dropped.

    """
    arr = np.asarray(packed, dtype=np.uint32)
    return np.stack([(arr >> np.uint32(16)) & np.uint32(0xFF),
                     (arr >> np.uint32(8)) & np.uint32(0xFF),
                     arr & np.uint32(0xFF)], axis=-1).astype(np.uint8)
