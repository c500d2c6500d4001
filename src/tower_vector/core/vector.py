# tower_vector/core/vector.py
from typing import Callable, Iterable, Iterator, List, Sequence, Tuple
import numpy as np

from tower_vector.numeric import ops
from tower_vector.numeric.number import Number, unwrap
from tower_vector.core.errors import DimensionMismatchError, InvalidDimensionError
from tower_vector.core.utils import deep_equals, loop, loop_indexed


class Vector:
    """
    An immutable Euclidean vector of generic scalars. Components may be
    integers, reals or complex values; the vector is in the complex plane
    when its magnitude is complex.
    """
    __slots__ = ("_components", "_size", "_magnitude", "_is_complex")

    def __init__(self, *components: Number):
        components = tuple(unwrap(c) for c in components)
        mag = 0
        for c in components:
            mag = ops.add(mag, ops.pow(c, 2))
        root = ops.widening_sqrt(mag)

        object.__setattr__(self, "_components", components)
        object.__setattr__(self, "_size", len(components))
        object.__setattr__(self, "_magnitude", root.value)
        object.__setattr__(self, "_is_complex", root.is_complex)

    @classmethod
    def from_points(cls, start: Sequence[Number], end: Sequence[Number]) -> "Vector":
        """
        Builds the vector running from the start coordinates to the end
        coordinates.
        """
        if len(start) != len(end):
            raise InvalidDimensionError(
                f"start and end have different lengths: {len(start)} vs {len(end)}")
        return cls(*(ops.subtract(e, s) for s, e in zip(start, end)))

    @classmethod
    def from_array(cls, values: Iterable[Number]) -> "Vector":
        """Builds a vector from a 1-D numpy array or any iterable of scalars."""
        if isinstance(values, np.ndarray):
            values = values.tolist()
        return cls(*values)

    @classmethod
    def standard(cls, space: int, dimensions: int) -> "Vector":
        """
        Standard basis vector of the given dimensionality: 1 at index space,
        0 elsewhere. standard(2, 5) is <0, 0, 1, 0, 0>. The caller must keep
        0 <= space < dimensions.
        """
        comps = [0] * dimensions
        comps[space] = 1
        return cls(*comps)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def size(self) -> int:
        return self._size

    @property
    def magnitude(self) -> Number:
        return self._magnitude

    @property
    def is_complex(self) -> bool:
        return self._is_complex

    def get(self, index: int) -> Number:
        return self._components[index]

    def transform(self, spaces: int) -> "Vector":
        """
        Pads this vector to more dimensions; the new components are 0.
        Reducing the number of dimensions is not allowed.
        """
        if self._size > spaces:
            raise InvalidDimensionError(
                f"can't transform a {self._size}D vector to {spaces} dimensions")
        return Vector(*(self._components + (0,) * (spaces - self._size)))

    def unit(self) -> "Vector":
        return self.divide(self._magnitude)

    def multiply(self, n: Number) -> "Vector":
        return Vector(*(ops.multiply(c, n) for c in self._components))

    def divide(self, n: Number) -> "Vector":
        return self.multiply(ops.invert(n))

    def negate(self) -> "Vector":
        return self.multiply(-1)

    def _require_same_size(self, v: "Vector"):
        if self._size != v._size:
            raise DimensionMismatchError(
                f"vectors are not the same size: {self._size} vs {v._size}")

    def add(self, v: "Vector") -> "Vector":
        self._require_same_size(v)
        return Vector(*(ops.add(a, b) for a, b in zip(self._components, v._components)))

    def subtract(self, v: "Vector") -> "Vector":
        return self.add(v.multiply(-1))

    def dot(self, v: "Vector") -> Number:
        self._require_same_size(v)
        a, b = self._components, v._components
        return ops.summation(lambda i: ops.multiply(a[i], b[i]), 0, self._size - 1)

    def cross(self, v: "Vector") -> "Vector":
        """
        Cross product of 2D or 3D vectors. Two 2D vectors give the 3D vector
        (0, 0, x1*y2 - x2*y1); a 2D and a 3D vector are both padded to 3D.
        """
        s1, s2 = self._size, v._size
        if s1 not in (2, 3) or s2 not in (2, 3):
            raise DimensionMismatchError(f"vectors are not 2D or 3D: {s1} and {s2}")

        a, b = self._components, v._components
        if s1 != s2:
            a = self.transform(3)._components
            b = v.transform(3)._components

        if len(a) == 2:
            return Vector(0, 0, _det(a[0], a[1], b[0], b[1]))
        return Vector(
            _det(a[1], a[2], b[1], b[2]),
            _det(a[2], a[0], b[2], b[0]),
            _det(a[0], a[1], b[0], b[1]),
        )

    def is_orthogonal(self, v: "Vector") -> bool:
        """Two vectors are orthogonal when their dot product is 0."""
        return ops.equals(self.dot(v), 0)

    def project(self, v: "Vector") -> "Vector":
        """Projects this vector onto v."""
        mag_squared = ops.pow(v._magnitude, 2)
        return v.multiply(self.dot(v)).divide(mag_squared)

    def angle(self, v: "Vector") -> Number:
        """Angle between this vector and v, in radians."""
        return ops.acos(ops.divide(self.dot(v), ops.multiply(self._magnitude, v._magnitude)))

    def for_each(self, action: Callable[[Number], None]) -> None:
        loop(self._components, action)

    def for_each_indexed(self, action: Callable[[Number, int], None]) -> None:
        """
        Like for_each, but action also receives the component's index.
        """
        loop_indexed(self._components, action)

    def items(self) -> Iterator[Tuple[int, Number]]:
        return enumerate(self._components)

    def to_list(self) -> List[Number]:
        return list(self._components)

    def to_array(self) -> np.ndarray:
        return np.array(self._components)

    def equals(self, other) -> bool:
        """
        Same size and component-wise equal, within the numeric tolerance.
        """
        if not isinstance(other, Vector):
            return False
        return self._size == other._size and deep_equals(self._components, other._components)

    def __eq__(self, other) -> bool:
        return self.equals(other)

    # Tolerance-based equality can't be made consistent with hashing.
    __hash__ = None

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, index: int) -> Number:
        return self._components[index]

    def __iter__(self) -> Iterator[Number]:
        return iter(self._components)

    def __abs__(self) -> Number:
        return self._magnitude

    def __add__(self, other: "Vector") -> "Vector":
        return self.add(other)

    def __sub__(self, other: "Vector") -> "Vector":
        return self.subtract(other)

    def __mul__(self, n: Number) -> "Vector":
        if isinstance(n, Vector):
            return NotImplemented
        return self.multiply(n)

    def __rmul__(self, n: Number) -> "Vector":
        return self.__mul__(n)

    def __truediv__(self, n: Number) -> "Vector":
        if isinstance(n, Vector):
            return NotImplemented
        return self.divide(n)

    def __neg__(self) -> "Vector":
        return self.negate()

    def __str__(self) -> str:
        return "<" + ", ".join(str(c) for c in self._components) + ">"

    def __repr__(self) -> str:
        return f"Vector({', '.join(repr(c) for c in self._components)})"


def _det(a: Number, b: Number, c: Number, d: Number) -> Number:
    # a*d - b*c
    return ops.subtract(ops.multiply(a, d), ops.multiply(b, c))
