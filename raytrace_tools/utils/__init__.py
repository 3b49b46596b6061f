"""Provide utility functions used by the various modules in this
package.

"""

from .numerical import EPSILON, approx_equal, as_components

from . import numerical, testing
