# tower_vector/numeric/number.py
from typing import NamedTuple, Union
import numpy as np

Number = Union[int, float, complex]


class ScalarResult(NamedTuple):
    """
    A scalar tagged with the branch that produced it. Operations that may
    leave the reals (square root, arc-cosine) report whether they did.
    """
    value: Number
    is_complex: bool


def is_complex(value: Number) -> bool:
    """Returns True if the scalar is held in complex form."""
    return isinstance(value, (complex, np.complexfloating))


def unwrap(value) -> Number:
    """
    Converts numpy scalars (np.float64, np.complex128, ...) to the matching
    Python scalar. Plain Python numbers pass through untouched.
    """
    if isinstance(value, np.generic):
        return value.item()
    return value
