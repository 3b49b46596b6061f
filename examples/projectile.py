"""Fire a projectile through a world with gravity and wind, and plot
its path on a canvas."""

from raytrace_tools import tuples, canvas, color, drawtools

gravity = tuples.vector(0., -0.1, 0.)
wind = tuples.vector(-0.01, 0., 0.)

position = tuples.point(0., 1., 0.)
velocity = tuples.vector(1., 1.8, 0.).normalize() * 11.25

img = canvas.Canvas(900, 550)
trail = color.Color(1., 0.8, 0.6)

# y increases downward on the canvas, so flip the height
while position.y > 0:
    x, y = int(round(position.x)), img.height - int(round(position.y))
    if 0 <= x < img.width and 0 <= y < img.height:
        img.write_pixel(x, y, trail)

    position = position + velocity
    velocity = velocity + gravity + wind

fig = drawtools.CanvasDrawing()
fig.draw_framebuffer(img.to_framebuffer(), img.width)
fig.show()
