r"""
raytrace_tools
==============

`raytrace_tools` is the numerical foundation for a small ray tracer.

The package is built on top of [numpy](https://numpy.org) and
[matplotlib](https://matplotlib.org), and provides modules to:

- do arithmetic with points and vectors in homogeneous coordinates
  (`raytrace_tools.tuples`)

- do arithmetic with RGB colors, and pack them into 32-bit pixels
  (`raytrace_tools.color`)

- paint colors onto a canvas and convert it to a framebuffer
  (`raytrace_tools.canvas`)

- look at the result (`raytrace_tools.drawtools`)

Matrices, rays, and shading are not here yet.

## Example usage

```python
from raytrace_tools import tuples, color, canvas

p = tuples.point(3., 2., 1.)
q = tuples.point(5., 6., 7.)

# the difference of two points is a vector
displacement = p - q
assert displacement.is_vector()

# colors combine channel by channel
c = color.Color(1., 0.2, 0.4) * color.Color(0.9, 1., 0.1)

img = canvas.Canvas(10, 20)
img.write_pixel(2, 3, c)
framebuffer = img.to_framebuffer()
```
"""

from .base import RaytraceError, TupleError, CanvasError, PixelOutOfBoundsError
