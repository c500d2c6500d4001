# tower_vector/__init__.py
from tower_vector.core.errors import DimensionMismatchError, InvalidDimensionError, VectorError
from tower_vector.core.vector import Vector

__all__ = ["Vector", "VectorError", "DimensionMismatchError", "InvalidDimensionError"]
