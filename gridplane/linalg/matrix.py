"""Immutable dense matrix with the handful of operations the transform needs."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from gridplane.api.errors import SingularMatrixError, SizeMismatchError


class Matrix:
    """Rectangular grid of real numbers; every operation returns a new value."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Sequence[Sequence[float]] | np.ndarray) -> None:
        try:
            array = np.array(entries, dtype=np.float64)
        except ValueError as exc:
            raise SizeMismatchError("Invalid entries - rows must have equal length") from exc
        if array.ndim != 2 or array.shape[0] == 0 or array.shape[1] == 0:
            raise SizeMismatchError(f"Invalid entries - expected a non-empty 2D grid, got shape {array.shape}")
        array.flags.writeable = False
        self._entries = array

    @classmethod
    def vector(cls, u: float, v: float) -> Matrix:
        """Return the column vector <u, v>."""
        return cls([[u], [v]])

    @classmethod
    def identity(cls, size: int = 2) -> Matrix:
        return cls(np.eye(size))

    @property
    def rows(self) -> int:
        return int(self._entries.shape[0])

    @property
    def cols(self) -> int:
        return int(self._entries.shape[1])

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    def entry(self, i: int, j: int) -> float:
        """Return the (i, j) entry, indexed from 0."""
        return float(self._entries[i, j])

    def to_list(self) -> list[list[float]]:
        return [[float(value) for value in row] for row in self._entries]

    def multiply(self, other: Matrix) -> Matrix:
        """Return self * other."""
        if self.cols != other.rows:
            raise SizeMismatchError(f"Incompatible sizes {self.shape} x {other.shape}")
        return Matrix(self._entries @ other._entries)

    def add(self, other: Matrix) -> Matrix:
        if self.shape != other.shape:
            raise SizeMismatchError(f"Incompatible sizes {self.shape} + {other.shape}")
        return Matrix(self._entries + other._entries)

    def subtract(self, other: Matrix) -> Matrix:
        if self.shape != other.shape:
            raise SizeMismatchError(f"Incompatible sizes {self.shape} - {other.shape}")
        return Matrix(self._entries - other._entries)

    def scale(self, k: float) -> Matrix:
        return Matrix(self._entries * float(k))

    def norm(self) -> float:
        """Euclidean norm of a column vector."""
        if self.cols != 1:
            raise SizeMismatchError(f"norm() needs a single column, got shape {self.shape}")
        return float(np.linalg.norm(self._entries[:, 0]))

    def determinant(self) -> float:
        self._require_2x2("determinant")
        e = self._entries
        return float(e[0, 0] * e[1, 1] - e[0, 1] * e[1, 0])

    def inverse(self) -> Matrix:
        self._require_2x2("inverse")
        det = self.determinant()
        if det == 0.0:
            raise SingularMatrixError("Matrix is not invertible")
        e = self._entries
        adjugate = [[e[1, 1], -e[0, 1]], [-e[1, 0], e[0, 0]]]
        return Matrix(adjugate).scale(1.0 / det)

    def _require_2x2(self, operation: str) -> None:
        if self.shape != (2, 2):
            raise SizeMismatchError(f"{operation}() is defined for 2x2 only, got shape {self.shape}")

    def __matmul__(self, other: Matrix) -> Matrix:
        return self.multiply(other)

    def __add__(self, other: Matrix) -> Matrix:
        return self.add(other)

    def __sub__(self, other: Matrix) -> Matrix:
        return self.subtract(other)

    def __mul__(self, k: float) -> Matrix:
        return self.scale(k)

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._entries, other._entries))

    def __hash__(self) -> int:
        return hash((self.shape, self._entries.tobytes()))

    def __repr__(self) -> str:
        return f"Matrix({self.to_list()!r})"

    def __str__(self) -> str:
        return "\n".join(" ".join(f"{float(v):g}" for v in row) for row in self._entries)


__all__ = ["Matrix"]
