"""4x4 matrices over homogeneous vectors."""

from __future__ import annotations

from numbers import Real
from typing import Iterable, Union

from .vector import Vec4


class Matrix4:
    """A 4x4 matrix stored as four row vectors."""

    __slots__ = ("_rows",)

    def __init__(self, rows: Iterable[Union[Vec4, Iterable[float]]]) -> None:
        copied = tuple(Vec4(*row) for row in rows)
        if len(copied) != 4:
            raise ValueError("a 4x4 matrix needs exactly four rows")
        self._rows = copied

    @classmethod
    def identity(cls) -> "Matrix4":
        return cls(
            [
                (1, 0, 0, 0),
                (0, 1, 0, 0),
                (0, 0, 1, 0),
                (0, 0, 0, 1),
            ]
        )

    def transposed(self) -> "Matrix4":
        return Matrix4(self.column(j) for j in range(4))

    def row(self, i: int) -> Vec4:
        return Vec4(*self._rows[i])

    def column(self, j: int) -> Vec4:
        return Vec4(*(row[j] for row in self._rows))

    def __mul__(self, other):
        """Apply to a vector, scale by a number, or compose with a matrix.

        Composition gives the matrix whose rows are ``self`` applied to the
        columns of ``other``, i.e. the transpose of the conventional product.
        """
        if isinstance(other, Vec4):
            return Vec4(*(row.dot(other) for row in self._rows))
        if isinstance(other, Matrix4):
            return Matrix4(self * other.column(j) for j in range(4))
        if isinstance(other, Real):
            return Matrix4(row * other for row in self._rows)
        return NotImplemented

    def __rmul__(self, k: float) -> "Matrix4":
        if not isinstance(k, Real):
            return NotImplemented
        return Matrix4(row * k for row in self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return self._rows == other._rows

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows = ", ".join(str(tuple(row)) for row in self._rows)
        return f"Matrix4([{rows}])"