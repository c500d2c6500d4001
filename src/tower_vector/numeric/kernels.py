# tower_vector/numeric/kernels.py
from numba import njit
import numpy as np


@njit(cache=False)
def ordered_sum_real(values):
    """
    Sequential sum of a float64 array. numpy.sum uses pairwise summation,
    which changes rounding; this loop keeps strict left-to-right order.
    """
    total = 0.0
    for i in range(values.shape[0]):
        total += values[i]
    return total


@njit(cache=False)
def ordered_sum_complex(values):
    """Sequential sum of a complex128 array."""
    total = 0j
    for i in range(values.shape[0]):
        total += values[i]
    return total


def ordered_sum(terms: list):
    """
    Sums a homogeneous list of floats or complex values with the matching
    kernel. Returns None when the list is not homogeneous, leaving the caller
    to fold it in Python.
    """
    if all(type(t) is float for t in terms):
        return float(ordered_sum_real(np.array(terms, dtype=np.float64)))
    if all(type(t) is complex for t in terms):
        return complex(ordered_sum_complex(np.array(terms, dtype=np.complex128)))
    return None
