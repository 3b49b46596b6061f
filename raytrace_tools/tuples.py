"""Work with points and vectors in homogeneous coordinates.

The main class provided by this module is `Tuple`, a 4-component
value (x, y, z, w). A tuple with w = 1 represents a point (a position
in affine 3-space), and a tuple with w = 0 represents a vector (a
displacement, which is unaffected by translation).

```python
from raytrace_tools import tuples

start = tuples.point(0., 1., 0.)
velocity = tuples.vector(1., 1., 0.).normalize()

position = start + velocity * 2.5
```

Tuples are immutable: every operation returns a new tuple. The type
does not keep track of whether a tuple "should" be a point or a
vector, so e.g. adding two points gives a tuple with w = 2, which is
not meaningful but is not an error either.

Floating-point results should be compared with `Tuple.approx_equal`
rather than `==`, which checks for exact equality.

"""

import numpy as np

from raytrace_tools.base import TupleError
from raytrace_tools.operations import TupleOperations
from raytrace_tools.utils import numerical
from raytrace_tools.utils.numerical import EPSILON

POINT_W = 1.0
VECTOR_W = 0.0

class Tuple(TupleOperations):
    """A 4-component homogeneous tuple.

    The underlying data is a read-only float64 ndarray of shape (4,),
    available as `coords`.
    """

    __slots__ = ("_coords",)

    def __init__(self, x, y=None, z=None, w=None):
        """Parameters
        ----------
        x : float or array-like
            either the x component, or (if `y`, `z` and `w` are all
            `None`) a sequence of four components.
        y, z, w : float
            remaining components of the tuple.

        Raises
        ------
        TupleError
            if the given data does not consist of exactly four real
            numbers.

        """
        others = (y, z, w)
        if all(c is None for c in others):
            data = x
        elif any(c is None for c in others):
            raise TupleError(
                "Tuple expects either four components or a single sequence"
            )
        else:
            data = (x, y, z, w)

        coords = numerical.as_components(data, 4)
        if coords is None:
            raise TupleError(
                "Tuple expects four real components, got {!r}".format(data)
            )
        self._coords = coords

    @property
    def coords(self):
        return self._coords

    @classmethod
    def point(cls, x, y, z):
        return cls(x, y, z, POINT_W)

    @classmethod
    def vector(cls, x, y, z):
        return cls(x, y, z, VECTOR_W)

    @classmethod
    def zero(cls):
        """Get the zero vector."""
        return cls.vector(0., 0., 0.)

    @property
    def x(self):
        return float(self.coords[0])

    @property
    def y(self):
        return float(self.coords[1])

    @property
    def z(self):
        return float(self.coords[2])

    @property
    def w(self):
        return float(self.coords[3])

    def is_point(self, tolerance=EPSILON):
        """Check whether the w component of this tuple is (approximately)
        1.
        """
        return numerical.approx_equal(self.w, POINT_W, tolerance)

    def is_vector(self, tolerance=EPSILON):
        """Check whether the w component of this tuple is (approximately)
        0.
        """
        return numerical.approx_equal(self.w, VECTOR_W, tolerance)

    def add(self, other):
        return Tuple(self.coords + other.coords)

    def sub(self, other):
        return Tuple(self.coords - other.coords)

    def neg(self):
        return Tuple(-self.coords)

    def scale(self, scalar):
        return Tuple(self.coords * scalar)

    def divide(self, scalar):
        """Divide every component of this tuple by a scalar.

        Dividing by zero is not trapped: the result has infinite or NaN
        components, and numpy issues a `RuntimeWarning`.
        """
        return Tuple(self.coords / scalar)

    def magnitude(self):
        """Get the Euclidean length of this tuple, including the w
        component.
        """
        return float(np.sqrt(np.sum(self.coords * self.coords)))

    def normalize(self):
        """Get a tuple pointing in the same direction as this one, with
        magnitude 1.

        Normalizing a tuple with zero magnitude gives a tuple of NaNs.

        Returns
        -------
        Tuple
            this tuple, divided by its magnitude.

        """
        return self.divide(self.magnitude())

    def dot(self, other):
        """Get the dot product of two tuples (summing over all four
        components).
        """
        return float(np.dot(self.coords, other.coords))

    def cross(self, other):
        """Get the cross product of two tuples.

        Only the first three components of each tuple are used, and the
        result is always a vector.

        Returns
        -------
        Tuple
            vector perpendicular to both `self` and `other`.

        """
        return Tuple(np.append(np.cross(self.coords[:3], other.coords[:3]),
                               VECTOR_W))

    def approx_equal(self, other, tolerance=EPSILON):
        """Check whether two tuples agree component-wise up to
        `tolerance`.
        """
        return numerical.approx_equal(self.coords, other.coords, tolerance)

    def __neg__(self):
        return self.neg()

    def __truediv__(self, scalar):
        if isinstance(scalar, TupleOperations):
            return NotImplemented
        return self.divide(scalar)

    def __eq__(self, other):
        if not isinstance(other, Tuple):
            return NotImplemented
        return bool(np.array_equal(self.coords, other.coords))

    def __hash__(self):
        return hash(tuple(self.coords.tolist()))

    def __iter__(self):
        return iter((self.x, self.y, self.z, self.w))

    def __repr__(self):
        return "{}({}, {}, {}, {})".format(
            self.__class__.__name__, self.x, self.y, self.z, self.w
        )

def point(x, y, z):
    """Get a new point (a tuple with w = 1)."""
    return Tuple.point(x, y, z)

def vector(x, y, z):
    """Get a new vector (a tuple with w = 0)."""
    return Tuple.vector(x, y, z)

def add(a, b):
    return a.add(b)

def sub(a, b):
    return a.sub(b)

def negate(a):
    return a.neg()

def scale(a, scalar):
    return a.scale(scalar)

def divide(a, scalar):
    return a.divide(scalar)

def magnitude(a):
    return a.magnitude()

def normalize(a):
    return a.normalize()

def dot(a, b):
    return a.dot(b)

def cross(a, b):
    return a.cross(b)

def approx_equal(a, b, tolerance=EPSILON):
    return a.approx_equal(b, tolerance)
