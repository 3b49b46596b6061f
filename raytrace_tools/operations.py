"""The arithmetic capability shared by tuples and colors.

Both `Tuple` and `Color` can be added, subtracted, and scaled by a
real number, and each of these operations returns a new object of
the same type. The concrete classes implement `add`, `sub` and
`scale` over their own storage; this module only supplies the
operator syntax on top of those three methods.

"""

from numbers import Real

class TupleOperations:
    """Mixin providing `+`, `-` and scalar `*` for any class which
    implements `add`, `sub` and `scale`.
    """

    __slots__ = ()

    #make numpy scalars defer to our reflected operators
    __array_ufunc__ = None

    def add(self, other):
        raise NotImplementedError

    def sub(self, other):
        raise NotImplementedError

    def scale(self, scalar):
        raise NotImplementedError

    def __add__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return self.scale(scalar)

    def __rmul__(self, scalar):
        return self.__mul__(scalar)
