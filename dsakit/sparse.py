"""Sparse-matrix detection and triplet representation."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = Sequence[Sequence[int]]


def _counts(matrix: Matrix) -> tuple[int, int]:
    zero = sum(1 for row in matrix for value in row if value == 0)
    total = sum(len(row) for row in matrix)
    return zero, total - zero


def is_sparse(matrix: Matrix) -> bool:
    """Return True when zeros are at least as many as non-zero entries."""
    zero, non_zero = _counts(matrix)
    return zero >= non_zero


def to_triplets(matrix: Matrix) -> tuple[list[int], list[int], list[int]]:
    """Return the rows, columns and values of the non-zero entries, row-major.

    Raises ValueError when the matrix is not sparse.
    """
    if not is_sparse(matrix):
        raise ValueError("It is Not a Sparse Matrix")
    rows: list[int] = []
    cols: list[int] = []
    values: list[int] = []
    for i, row in enumerate(matrix):
        for j, value in enumerate(row):
            if value != 0:
                rows.append(i)
                cols.append(j)
                values.append(value)
    return rows, cols, values