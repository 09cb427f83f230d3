"""Command line entry point: run a circuit description over an initial state."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

from qcircsim.formatting import format_matrix, format_vector
from qcircsim.linalg import Matrix, Vector, identity, is_normalized, matmul, matvec
from qcircsim.parsing import (
    ParseError,
    circuit_matrices,
    circuit_order,
    init_vector,
    qubit_count,
)

DEFAULT_CIRC = Path("data") / "circ.txt"
DEFAULT_INIT = Path("data") / "init.txt"

READ_ERROR = "ERRORE LETTURA FILE"
QUBITS_ERROR = "I QUBITS NON SONO VALIDI O NON PRESENTI NEL FILE"
INIT_ERROR = "I DATI INIT NON SONO VALIDI O NON PRESENTI NEL FILE"
ORDER_ERROR = "ERRORE NELLA DICHIARAZIONE NOMI CIRCUITI"
MATRICES_ERROR = "ERRORE NELLA DICHIARAZIONE DELLE MATRCICI DI CIRCUITO"
INCORRECT = "NON CORRETTO"


@dataclass(frozen=True)
class SimulationResult:
    """Everything computed while running a circuit over an initial vector."""

    qubits: int
    init: Vector
    names: list[str]
    matrices: list[Matrix]
    product: Matrix
    final: Vector

    @property
    def dim(self) -> int:
        return 2**self.qubits

    @property
    def correct(self) -> bool:
        """Tell whether the final state is normalized."""
        return is_normalized(self.final)


def read_text(path: str | Path) -> str:
    """Return the whole content of the file at path.

    Raises OSError if the file cannot be read.
    """
    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
        return handle.read()


def simulate(circ_text: str, init_text: str) -> SimulationResult:
    """Run the circuit described by circ_text over the state in init_text.

    Raises ParseError, carrying a message that names the failing stage.
    """
    try:
        qubits = qubit_count(init_text)
    except ParseError as exc:
        raise ParseError(QUBITS_ERROR) from exc
    dim = 2**qubits

    try:
        init = init_vector(init_text, dim)
    except ParseError as exc:
        raise ParseError(INIT_ERROR) from exc

    try:
        names = circuit_order(circ_text)
    except ParseError as exc:
        raise ParseError(ORDER_ERROR) from exc

    try:
        matrices = circuit_matrices(circ_text, dim, names)
    except ParseError as exc:
        raise ParseError(MATRICES_ERROR) from exc

    product = identity(dim)
    for matrix in reversed(matrices):
        product = matmul(product, matrix)

    return SimulationResult(
        qubits=qubits,
        init=init,
        names=names,
        matrices=matrices,
        product=product,
        final=matvec(product, init),
    )


def render(result: SimulationResult) -> str:
    """Render the report of a simulation, ending with the correctness check."""
    parts = [
        f"numero Qubits: {result.qubits}\n\n",
        "VETTORE INIT:\n",
        format_vector(result.init),
        "\n",
    ]
    for name, matrix in reversed(list(zip(result.names, result.matrices))):
        parts.append(f"MATRICE : {name}\n")
        parts.append(format_matrix(matrix))
    parts.append("MOLTIPLICAZIONE TRA MATRICI:\n")
    parts.append(format_matrix(result.product))
    parts.append("\nMOLTIPLICAZIONE TRA LA MATRICE MOLTIPLICATA CON IL VETTORE INIT\n")
    parts.append(format_vector(result.final))
    parts.append("\nCONTROLLO SULLA CORRETTEZZA: ")
    if result.correct:
        parts.append("CORRETTO\n")
    return "".join(parts)


def main(argv: list[str] | None = None) -> int:
    """Read the circuit and init files, simulate and print the report."""
    parser = argparse.ArgumentParser(
        prog="qcircsim",
        description="Apply a quantum circuit to an initial state vector.",
    )
    parser.add_argument("--circ", type=Path, default=DEFAULT_CIRC, help="circuit description file")
    parser.add_argument("--init", type=Path, default=DEFAULT_INIT, help="initial state file")
    args = parser.parse_args(argv)

    try:
        circ_text = read_text(args.circ)
        init_text = read_text(args.init)
    except OSError:
        print(READ_ERROR, file=sys.stderr)
        return 0

    try:
        result = simulate(circ_text, init_text)
    except ParseError as exc:
        print(exc, file=sys.stderr)
        return 0

    sys.stdout.write(render(result))
    sys.stdout.flush()
    if not result.correct:
        print(INCORRECT, file=sys.stderr)
    return 0