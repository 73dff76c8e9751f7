"""Square matrices stored as column vectors."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Union

from vecmat.vector import Vector

Column = Union[Vector, Iterable[float]]


class SquareMatrix:
    """An N x N matrix whose values are stored column by column."""

    __slots__ = ("_columns",)
    __hash__ = None  # mutable

    def __init__(self, *args: Column, size: int | None = None) -> None:
        """Create a matrix from column vectors; missing columns are zero."""
        if size is None:
            size = len(args)
        if size <= 0:
            raise ValueError("a matrix needs at least one column")
        if len(args) > size:
            raise ValueError(
                f"{len(args)} columns given for a matrix of size {size}"
            )
        columns = [self._as_column(column, size) for column in args]
        columns.extend(Vector(size=size) for _ in range(size - len(columns)))
        self._columns = columns

    @staticmethod
    def _as_column(values: Column, size: int) -> Vector:
        components = list(values)
        if len(components) != size:
            raise ValueError(f"each column must contain exactly {size} values")
        return Vector(*components)

    def __len__(self) -> int:
        return len(self._columns)

    def __iter__(self) -> Iterator[Vector]:
        return iter(self._columns)

    def __getitem__(self, index: int) -> Vector:
        """Return the column vector at ``index`` (not a copy)."""
        return self._columns[index]

    def __setitem__(self, index: int, column: Column) -> None:
        self._columns[index] = self._as_column(column, len(self))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return self._columns == other._columns

    def __repr__(self) -> str:
        columns = ", ".join(
            "(" + ", ".join(repr(v) for v in column) + ")"
            for column in self._columns
        )
        return f"SquareMatrix({columns})"

    def _check_position(self, row: int, column: int) -> None:
        size = len(self)
        if not (0 <= row < size and 0 <= column < size):
            raise IndexError(
                f"position ({row}, {column}) out of range for size {size}"
            )

    def at(self, row: int, column: int) -> float:
        """Return the value at ``row`` and ``column``."""
        self._check_position(row, column)
        return self._columns[column][row]

    def set_at(self, row: int, column: int, value: float) -> None:
        """Set the value at ``row`` and ``column``."""
        self._check_position(row, column)
        self._columns[column][row] = value

    def _times_vector(self, vector: Vector) -> Vector:
        if len(vector) != len(self):
            raise ValueError(
                f"vector of size {len(vector)} for a matrix of size {len(self)}"
            )
        result = Vector(size=len(self))
        for column, factor in zip(self._columns, vector):
            result += factor * column
        return result

    def __mul__(self, other: Vector | SquareMatrix) -> Vector | SquareMatrix:
        """Multiply by a vector or by another square matrix."""
        if isinstance(other, SquareMatrix):
            if len(other) != len(self):
                raise ValueError("matrix sizes differ")
            return SquareMatrix(*(self._times_vector(c) for c in other))
        if isinstance(other, Vector):
            return self._times_vector(other)
        return NotImplemented


def matrix2(*args: Column) -> SquareMatrix:
    """Create a 2 x 2 matrix from column vectors."""
    return SquareMatrix(*args, size=2)


def matrix3(*args: Column) -> SquareMatrix:
    """Create a 3 x 3 matrix from column vectors."""
    return SquareMatrix(*args, size=3)


def matrix4(*args: Column) -> SquareMatrix:
    """Create a 4 x 4 matrix from column vectors."""
    return SquareMatrix(*args, size=4)