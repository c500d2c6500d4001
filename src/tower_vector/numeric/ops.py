# tower_vector/numeric/ops.py
"""
Scalar operations over int, float and complex values.

Every function returns a plain Python scalar. Square root and arc-cosine
widen to complex when the real result would be undefined; complex branches
go through numpy.emath.
"""

import math
from typing import Callable, Optional
import numpy as np

from tower_vector.numeric.number import Number, ScalarResult, is_complex, unwrap
from tower_vector.core.log import get_logger
from tower_vector.numeric.kernels import ordered_sum
from tower_vector.numeric.settings import get_settings

log = get_logger(__name__)


def add(a: Number, b: Number) -> Number:
    return a + b


def subtract(a: Number, b: Number) -> Number:
    return a - b


def multiply(a: Number, b: Number) -> Number:
    return a * b


def invert(a: Number) -> Number:
    """Multiplicative inverse. Raises ZeroDivisionError for zero."""
    return 1 / a


def divide(a: Number, b: Number) -> Number:
    return multiply(a, invert(b))


def pow(a: Number, n: Number) -> Number:
    """
    a ** n. For a non-negative integer n, a float or complex result past the
    float range is inf (as repeated multiply gives) instead of OverflowError.
    """
    try:
        return a ** n
    except OverflowError:
        if not isinstance(n, int) or n < 0:
            raise
    result, base = 1, a
    while n:
        if n & 1:
            result = multiply(result, base)
        base = multiply(base, base)
        n >>= 1
    return result


def _real_sqrt(a: Number) -> Number:
    # a >= 0
    try:
        return math.sqrt(a)
    except OverflowError:
        pass
    # int too large for a float: exact root when a is a perfect square
    root = math.isqrt(a)
    if root * root == a:
        return root
    try:
        return float(root)
    except OverflowError:
        return math.inf


def widening_sqrt(a: Number) -> ScalarResult:
    """
    Square root tagged with whether the complex branch was taken: complex
    input, or a negative real.

    Complex input takes the principal root, which follows the sign of the
    imaginary part, including a signed zero: sqrt(-4+0j) is 2j but
    sqrt(-4-0j) is -2j. A vector's complex magnitude can therefore come out
    as either root, depending on the zero sign its square sum carries.
    """
    if is_complex(a):
        return ScalarResult(unwrap(np.emath.sqrt(complex(a))), True)
    if a < 0:
        log.debug("sqrt(%r) widened to complex", a)
        return ScalarResult(complex(0, _real_sqrt(-a)), True)
    return ScalarResult(_real_sqrt(a), False)


def sqrt(a: Number) -> Number:
    return widening_sqrt(a).value


def widening_acos(a: Number) -> ScalarResult:
    """Arc-cosine in radians, complex outside the real domain [-1, 1]."""
    if is_complex(a):
        return ScalarResult(unwrap(np.emath.arccos(complex(a))), True)
    if a < -1 or a > 1:
        log.debug("acos(%r) widened to complex", a)
        return ScalarResult(complex(unwrap(np.emath.arccos(a))), True)
    return ScalarResult(math.acos(a), False)


def acos(a: Number) -> Number:
    return widening_acos(a).value


def equals(a: Number, b: Number, tolerance: Optional[float] = None) -> bool:
    """Tolerance-aware equality; works for mixed real and complex operands."""
    if tolerance is None:
        tolerance = get_settings().tolerance
    if a == b:
        return True
    return abs(a - b) <= tolerance


def summation(term: Callable[[int], Number], lo: int, hi: int) -> Number:
    """
    Sum of term(i) for i in [lo, hi], accumulated left to right. An empty
    range (hi < lo) sums to 0.
    """
    terms = [term(i) for i in range(lo, hi + 1)]
    if len(terms) >= get_settings().kernel_threshold:
        total = ordered_sum(terms)
        if total is not None:
            return total
    total = 0
    for t in terms:
        total = add(total, t)
    return total
