"""Text rendering of complex numbers, vectors and matrices."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def format_complex(value: complex) -> str:
    """Render a complex number with four decimals for each part."""
    value = complex(value)
    return f"Re: {value.real:.4f}, img: {value.imag:.4f}"


def format_vector(vector: Iterable[complex]) -> str:
    """Render a vector with one indexed element per line, in parentheses."""
    lines = [f"({index}): {format_complex(value)}\n" for index, value in enumerate(vector)]
    return "(\n" + "".join(lines) + ")\n"


def format_matrix(matrix: Sequence[Sequence[complex]]) -> str:
    """Render a matrix with one bracketed row per line."""
    rows = []
    for r, row in enumerate(matrix):
        cells = " || ".join(
            f"({r})-({c}) {format_complex(value)}" for c, value in enumerate(row)
        )
        rows.append(f"[{cells} ]\n")
    return "".join(rows)