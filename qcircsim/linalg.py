"""Dense complex linear algebra on nested lists."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

Matrix = list[list[complex]]
Vector = list[complex]

NORMALIZATION_EPSILON = 1e-14


def zeros(rows: int, cols: int) -> Matrix:
    """Return a rows x cols matrix filled with complex zeros."""
    return [[0j] * cols for _ in range(rows)]


def identity(dim: int) -> Matrix:
    """Return the dim x dim identity matrix."""
    return [[1 + 0j if r == c else 0j for c in range(dim)] for r in range(dim)]


def matmul(left: Sequence[Sequence[complex]], right: Sequence[Sequence[complex]]) -> Matrix:
    """Return the matrix product left x right."""
    if any(len(row) != len(right) for row in left):
        raise ValueError("inner dimensions of the matrices do not match")
    columns = list(zip(*right))
    return [
        [sum((a * b for a, b in zip(row, column)), 0j) for column in columns]
        for row in left
    ]


def matvec(matrix: Sequence[Sequence[complex]], vector: Sequence[complex]) -> Vector:
    """Return the product of a matrix and a column vector."""
    if any(len(row) != len(vector) for row in matrix):
        raise ValueError("matrix width does not match vector length")
    return [sum((a * b for a, b in zip(row, vector)), 0j) for row in matrix]


def modulus(value: complex) -> float:
    """Return the modulus of a complex number."""
    value = complex(value)
    return math.sqrt(value.imag * value.imag + value.real * value.real)


def is_normalized(vector: Iterable[complex]) -> bool:
    """Tell whether the squared moduli of the vector sum to one."""
    total = sum(modulus(v) ** 2 for v in vector)
    return abs(total - 1) < NORMALIZATION_EPSILON