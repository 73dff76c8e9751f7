"""Fixed-size vectors of floating point values."""

from __future__ import annotations

import math
from collections.abc import Iterator
from numbers import Real
from typing import Union

Number = Union[int, float]


class Vector:
    """A vector with a fixed number of float components.

    Index 0, 1, 2, ... corresponds to the x, y, z, ... axis.
    """

    __slots__ = ("_values",)
    __hash__ = None  # mutable

    def __init__(self, *args: Number, size: int | None = None) -> None:
        """Create a vector from the given components.

        With no components the vector is all zeros. With fewer components
        than ``size`` the remaining ones repeat the last given value.
        """
        if size is None:
            size = len(args)
        if size <= 0:
            raise ValueError("a vector needs at least one component")
        if len(args) > size:
            raise ValueError(
                f"{len(args)} values given for a vector of size {size}"
            )
        values = [float(value) for value in args]
        fill = values[-1] if values else 0.0
        values.extend([fill] * (size - len(values)))
        self._values = values

    @classmethod
    def from_angle(cls, angle: float, size: int = 2) -> Vector:
        """Return a unit vector pointing at ``angle`` radians in the x/y plane.

        An angle of 0 points along the x axis; further components are zero.
        """
        if size < 2:
            raise ValueError("an angle needs at least two dimensions")
        vector = cls(size=size)
        vector._values[0] = math.cos(angle)
        vector._values[1] = math.sin(angle)
        return vector

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __getitem__(self, index: int) -> float:
        return self._values[index]

    def __setitem__(self, index: int, value: Number) -> None:
        self._values[index] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"Vector({', '.join(repr(v) for v in self._values)})"

    def at(self, index: int) -> float:
        """Return the component at ``index``, which must lie in 0..size-1."""
        if not 0 <= index < len(self._values):
            raise IndexError(
                f"index {index} out of range for a vector of size {len(self)}"
            )
        return self._values[index]

    def copy(self) -> Vector:
        """Return an independent copy of this vector."""
        return Vector(*self._values)

    def _check_same_size(self, other: Vector) -> None:
        if len(other) != len(self):
            raise ValueError(
                f"vector sizes differ: {len(self)} and {len(other)}"
            )

    def __iadd__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_size(other)
        self._values = [a + b for a, b in zip(self._values, other._values)]
        return self

    def __isub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_size(other)
        self._values = [a - b for a, b in zip(self._values, other._values)]
        return self

    def __imul__(self, factor: Number) -> Vector:
        if not isinstance(factor, Real):
            return NotImplemented
        self._values = [v * factor for v in self._values]
        return self

    def __itruediv__(self, factor: Number) -> Vector:
        if not isinstance(factor, Real):
            return NotImplemented
        self._values = [v / factor for v in self._values]
        return self

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        result = self.copy()
        result -= other
        return result

    def __mul__(self, other: Vector | Number) -> Vector | float:
        """Scalar (inner) product with a vector, or scaling by a number."""
        if isinstance(other, Vector):
            self._check_same_size(other)
            return sum(a * b for a, b in zip(self._values, other._values))
        if isinstance(other, Real):
            result = self.copy()
            result *= other
            return result
        return NotImplemented

    def __rmul__(self, scalar: Number) -> Vector:
        if not isinstance(scalar, Real):
            return NotImplemented
        result = self.copy()
        result *= scalar
        return result

    def __truediv__(self, factor: Number) -> Vector:
        if not isinstance(factor, Real):
            return NotImplemented
        result = self.copy()
        result /= factor
        return result

    def __neg__(self) -> Vector:
        return Vector(*(-v for v in self._values))

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(self.square_of_length())

    def square_of_length(self) -> float:
        """Return the square of the Euclidean length."""
        return sum(v * v for v in self._values)

    def normalize(self) -> None:
        """Scale this vector in place to length 1."""
        length = self.length()
        if length == 0.0:
            raise ValueError("cannot normalize a zero-length vector")
        self /= length

    def get_reflective(self, normal: Vector) -> Vector:
        """Return the specular reflection of this ray about a unit ``normal``."""
        return self - (2.0 * (self * normal)) * normal

    def angle(self, axis_1: int, axis_2: int) -> float:
        """Return the angle in radians of this vector in the plane of two axes."""
        return math.atan2(self.at(axis_2), self.at(axis_1))

    def cross_product(self, other: Vector) -> Vector:
        """Return the cross product; both vectors must be three-dimensional."""
        if len(self) != 3 or len(other) != 3:
            raise ValueError("the cross product needs three-dimensional vectors")
        ax, ay, az = self._values
        bx, by, bz = other
        return Vector(ay * bz - az * by, az * bx - ax * bz, ax * by - ay * bx)


def vector2(*args: Number) -> Vector:
    """Create a two-dimensional vector."""
    return Vector(*args, size=2)


def vector3(*args: Number) -> Vector:
    """Create a three-dimensional vector."""
    return Vector(*args, size=3)


def vector4(*args: Number) -> Vector:
    """Create a four-dimensional vector."""
    return Vector(*args, size=4)