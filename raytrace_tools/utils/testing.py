import numpy as np

from .numerical import EPSILON, approx_equal

def assert_tuple_approx(actual, expected, tolerance=EPSILON):
    assert approx_equal(actual.coords, expected.coords, tolerance), \
        "{} is not approximately {}".format(actual, expected)

def assert_color_approx(actual, expected, tolerance=EPSILON):
    assert approx_equal(actual.channels, expected.channels, tolerance), \
        "{} is not approximately {}".format(actual, expected)

def assert_scalar_approx(actual, expected, tolerance=EPSILON):
    assert np.abs(actual - expected) < tolerance, \
        "{} is not approximately {}".format(actual, expected)
