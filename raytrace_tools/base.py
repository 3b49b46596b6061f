class RaytraceError(Exception):
    """Base class for errors raised by this package."""
    pass

class TupleError(RaytraceError):
    """Thrown if there's an attempt to construct a tuple or color with
    numerical data that doesn't have the right number of real
    components.

    """
    pass

class CanvasError(RaytraceError):
    """Thrown if a canvas is created or accessed with invalid
    dimensions.

    """
    pass

class PixelOutOfBoundsError(CanvasError, IndexError):
    """Thrown when reading or writing a pixel outside of the extent of a
    canvas.

    """
    pass
