# tower_vector/core/utils.py
from typing import Any, Callable, Iterable, Optional, Sequence
import numpy as np

from tower_vector.numeric import ops


def loop(values: Iterable[Any], action: Callable[[Any], None]) -> None:
    """
    Applies action to each value in order.
    """
    for value in values:
        action(value)


def loop_indexed(values: Iterable[Any], action: Callable[[Any, int], None]) -> None:
    """
    Applies action to each value along with its index. Use loop() when the
    index is not needed.
    """
    for i, value in enumerate(values):
        action(value, i)


def _is_sequence(value) -> bool:
    return isinstance(value, (list, tuple, np.ndarray)) or hasattr(value, "to_list")


def deep_equals(a: Sequence, b: Sequence, tolerance: Optional[float] = None) -> bool:
    """
    Compares two sequences element by element. Nested sequences are compared
    recursively; scalars use the tolerance-aware ops.equals.
    """
    if len(a) != len(b):
        return False
    for x, y in zip(a, b):
        if _is_sequence(x) or _is_sequence(y):
            if not (_is_sequence(x) and _is_sequence(y)):
                return False
            if not deep_equals(list(x), list(y), tolerance):
                return False
        elif not ops.equals(x, y, tolerance):
            return False
    return True
