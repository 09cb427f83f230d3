"""Readers for the '#' commands of circuit and init descriptions."""

from __future__ import annotations

import re
from collections.abc import Iterable

from qcircsim.linalg import Matrix, zeros

MAX_MATRICES = 64
MAX_NAME_LENGTH = 64
_MAX_COMMAND_LENGTH = 100
_MAX_NUMBER_TEXT = 255

_DIGITS = frozenset("0123456789")
_NUMBER_CHARS = frozenset("+-i.0123456789")
_BLANKS = (" ", "\t")

_FLOAT_PREFIX = re.compile(
    r"[ \t\n\v\f\r]*([+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


class ParseError(ValueError):
    """Raised when a description lacks a command or holds invalid data."""


def _char(text: str, pos: int) -> str:
    return text[pos] if pos < len(text) else ""


def _skip_blanks(text: str, pos: int) -> int:
    while _char(text, pos) in _BLANKS and pos < len(text):
        pos += 1
    return pos


def _scan_word(text: str, pos: int, limit: int | None = None) -> int:
    end = pos
    while end < len(text) and text[end] not in " \n\t":
        if limit is not None and end - pos >= limit:
            break
        end += 1
    return end


def _atof(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def find_command(command: str, text: str, start: int = 0) -> int | None:
    """Find the next '#' token equal to command at or after start.

    Returns the index just past the command, or None if it is absent.
    """
    pos = start
    length = len(text)
    while pos < length:
        hash_at = text.find("#", pos)
        if hash_at < 0:
            return None
        end = hash_at
        while end < length and text[end] not in "\n " and end - hash_at < _MAX_COMMAND_LENGTH:
            end += 1
        pos = end
        if text[hash_at:end] == command:
            return end
    return None


def parse_complex(text: str) -> complex:
    """Parse a number such as '3', '-i', '2i', '1+2i' or '2i-1'."""
    text = text[:_MAX_NUMBER_TEXT]
    first_i = text.find("i")
    if first_i < 0:
        return complex(_atof(text), 0.0)

    head = text[:first_i]
    if head in ("", "+"):
        return complex(0.0, 1.0)
    if head == "-":
        return complex(0.0, -1.0)

    sep = max(text.rfind("+"), text.rfind("-"))
    if sep <= 0:
        return complex(0.0, _atof(text))

    left, right = text[:sep], text[sep:]
    if "i" in left:
        return complex(_atof(right), _atof(left.replace("i", "")))
    coefficient = right.replace("i", "")
    if coefficient in ("+", "-"):
        coefficient += "1"
    return complex(_atof(left), _atof(coefficient))


def qubit_count(text: str) -> int:
    """Return the number given after '#qubits'.

    Raises ParseError if no number follows the command or it is zero.
    """
    pos = 0
    digits = ""
    while not digits:
        found = find_command("#qubits", text, pos)
        if found is None:
            break
        pos = _skip_blanks(text, found)
        end = pos
        while _char(text, end) in _DIGITS and end - pos < _MAX_COMMAND_LENGTH:
            end += 1
        digits = text[pos:end]
        pos = end
    if not digits or int(digits) <= 0:
        raise ParseError("qubit count is missing or not valid")
    return int(digits)


def init_vector(text: str, dim: int) -> list[complex]:
    """Return the vector given as '#init [a, b, ...]', padded with zeros to dim.

    Raises ParseError if no valid vector is found.
    """
    values: list[complex] = []
    pending = ""
    last = ""
    pos = 0
    while not pending:
        found = find_command("#init", text, pos)
        if found is None:
            break
        last = ""
        pos = _skip_blanks(text, found)
        if _char(text, pos) != "[":
            continue
        while _char(text, pos) not in ("]", ""):
            pos += 1
            c = _char(text, pos)
            if c in _NUMBER_CHARS:
                pending += c
            elif c in (",", "]"):
                last = pending
                if len(values) >= dim:
                    break
                if pending.count("i") > 1:
                    last = pending = ""
                    values.clear()
                    break
                values.append(parse_complex(pending))
                pending = ""
            elif c in _BLANKS:
                continue
            else:
                last = pending = ""
                values.clear()
                break
    if pending or not last:
        raise ParseError("init vector is missing or not valid")
    return values + [0j] * (dim - len(values))


def circuit_order(text: str) -> list[str]:
    """Return the matrix names listed after '#circ', in order of appearance.

    Raises ParseError if no name is found.
    """
    names: list[str] = []
    pos = 0
    listed = False
    while not listed:
        found = find_command("#circ", text, pos)
        if found is None or found >= len(text):
            break
        pos = _skip_blanks(text, found)
        while _char(text, pos) not in ("\n", "") and len(names) < MAX_MATRICES:
            listed = True
            pos = _skip_blanks(text, pos)
            if _char(text, pos) not in ("\n", ""):
                end = _scan_word(text, pos, MAX_NAME_LENGTH)
                names.append(text[pos:end])
                pos = end
    if not names:
        raise ParseError("circuit order is missing")
    return names


def _read_matrix(text: str, pos: int, dim: int) -> tuple[Matrix | None, int]:
    matrix = zeros(dim, dim)
    opener = _char(text, pos)
    pos += 1
    if opener != "[":
        return matrix, pos

    pending = ""
    row = 0
    while _char(text, pos) != "]":
        column = 0
        pos = _skip_blanks(text, pos)
        if _char(text, pos) != "(":
            return None, pos
        valid = True
        while _char(text, pos) != ")":
            pos += 1
            c = _char(text, pos)
            if c in _NUMBER_CHARS:
                pending += c
            elif c in (",", ")") and pending:
                if column < dim and row < dim:
                    matrix[row][column] = parse_complex(pending)
                    pending = ""
                column += 1
                if c == ")" and column != dim:
                    valid = False
                    break
            elif c in _BLANKS:
                continue
            else:
                valid = False
                break
        pos += 1
        if not valid:
            return None, pos
        row += 1
    if row != dim:
        return None, pos
    return matrix, pos


def circuit_matrices(text: str, dim: int, order: Iterable[str]) -> list[Matrix]:
    """Return the dim x dim matrices defined by '#define NAME [(..)(..)]', in order.

    Raises ParseError unless every name in order has a valid definition.
    """
    names = list(order)
    matrices: list[Matrix] = []
    pos = 0
    while len(matrices) < len(names):
        found = find_command("#define", text, pos)
        if found is None:
            break
        start = _skip_blanks(text, found)
        pos = _scan_word(text, start)
        if text[start:pos] != names[len(matrices)]:
            continue
        matrix, pos = _read_matrix(text, _skip_blanks(text, pos), dim)
        if matrix is not None:
            matrices.append(matrix)
            pos = 0
    if len(matrices) != len(names):
        raise ParseError("circuit matrices are missing or not valid")
    return matrices