import numpy as np

#loose enough to absorb the drift from a few rounds of arithmetic,
#tight enough to tell 0 from 1 in the w component
EPSILON = 1e-5

def approx_equal(a, b, tolerance=EPSILON):
    """Check whether two arrays of components agree up to a given
    tolerance.

    Parameters
    ----------
    a, b : array-like
        Component data to compare. The arrays must be broadcastable.
    tolerance : float
        Largest allowed (strict) absolute difference between
        corresponding components.

    Returns
    -------
    bool
        `True` if every component-wise absolute difference is
        strictly smaller than `tolerance`. A difference exactly equal
        to `tolerance` counts as unequal (unlike an inclusive `<=`
        comparison).

    """
    diff = np.abs(np.asarray(a, dtype=float) - np.asarray(b, dtype=float))
    return bool(np.all(diff < tolerance))

def as_components(data, count):
    """Convert data to a read-only float64 array with exactly `count`
    entries, or return None if that's not possible.

    Only integer and floating-point data is accepted: booleans and
    strings (even numeric ones) are rejected. The returned array is a
    view of a frozen buffer, so it can't be made writeable again.

    """
    try:
        arr = np.asarray(data)
    except (TypeError, ValueError):
        return None

    if arr.dtype.kind not in "iuf" or arr.shape != (count,):
        return None

    frozen = arr.astype("float64")
    frozen.flags.writeable = False
    return frozen.view()
