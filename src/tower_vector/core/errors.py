# tower_vector/core/errors.py


class VectorError(Exception):
    """Base error for vector operations."""


class DimensionMismatchError(VectorError):
    """Operands of a binary operation have incompatible sizes."""


class InvalidDimensionError(VectorError):
    """A requested or implied dimensionality is not allowed."""
