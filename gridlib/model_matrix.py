"""A 4x4 matrix that places a grid in model space, and a builder for it."""

from __future__ import annotations

from typing import Sequence

__all__ = ["ModelMatrix", "ModelMatrixBuilder"]

Vector3 = tuple[float, float, float]
Matrix4 = tuple[tuple[float, ...], ...]


def _check_vector(v: Sequence[float]) -> tuple[float, float, float]:
    if len(v) != 3:
        raise ValueError(f"expected a vector of 3 values, got {len(v)}")
    return float(v[0]), float(v[1]), float(v[2])


def _check_matrix(matrix: Sequence[Sequence[float]]) -> Matrix4:
    rows = tuple(tuple(float(x) for x in row) for row in matrix)
    if len(rows) != 4 or any(len(row) != 4 for row in rows):
        raise ValueError("expected a 4x4 matrix")
    return rows


class ModelMatrix:
    """Read access to the position and axes stored in a 4x4 model matrix."""

    def __init__(self, matrix: Sequence[Sequence[float]]) -> None:
        self.matrix: Matrix4 = _check_matrix(matrix)

    def position(self) -> Vector3:
        m = self.matrix
        return m[0][3], m[1][3], m[2][3]

    def col_axis(self) -> Vector3:
        return self.matrix[0][:3]

    def row_axis(self) -> Vector3:
        return self.matrix[1][:3]

    def vertical_axis(self) -> Vector3:
        return self.matrix[2][:3]


class ModelMatrixBuilder:
    """Builds a model matrix, starting from the identity."""

    def __init__(self) -> None:
        self._matrix = [[1.0 if i == j else 0.0 for j in range(4)] for i in range(4)]

    def matrix(self) -> Matrix4:
        return tuple(tuple(row) for row in self._matrix)

    def position(self, v: Sequence[float]) -> ModelMatrixBuilder:
        for row, value in zip(self._matrix, _check_vector(v)):
            row[3] = value
        return self

    def _set_row(self, index: int, v: Sequence[float]) -> ModelMatrixBuilder:
        self._matrix[index][:3] = _check_vector(v)
        return self

    def col_axis(self, v: Sequence[float]) -> ModelMatrixBuilder:
        return self._set_row(0, v)

    def row_axis(self, v: Sequence[float]) -> ModelMatrixBuilder:
        return self._set_row(1, v)

    def vertical_axis(self, v: Sequence[float]) -> ModelMatrixBuilder:
        return self._set_row(2, v)