# qcircsim

`qcircsim` applies a small quantum circuit to an initial state. The state and
the circuit are read from two plain-text files. The gate matrices are
multiplied together, and the product is applied to the initial state vector.
The tool then checks that the resulting state is still normalised: the squared
moduli of its entries must sum to 1 within `1e-14`.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Usage

```
qcircsim [--circ CIRC_FILE] [--init INIT_FILE]
```

By default the command reads `data/circ.txt` and `data/init.txt`, relative to
the current directory.

The report is written in Italian. It prints, in this order:

1. the number of qubits (`numero Qubits`);
2. the initial vector (`VETTORE INIT`);
3. each gate matrix (`MATRICE : <name>`), from the last gate listed to the first;
4. the product of the gate matrices (`MOLTIPLICAZIONE TRA MATRICI`);
5. the resulting state vector;
6. the normalisation check (`CONTROLLO SULLA CORRETTEZZA`).

If the check passes, the report ends with `CORRETTO`. If it fails, the tool
writes `NON CORRETTO` to standard error.

If a file cannot be read, a short message goes to standard error. The same
happens if the input is malformed; the message names the stage that failed.
The exit status is always 0.

## Input files

### Init file

```
#qubits 1
#init [1, 0]
```

- `#qubits` gives the number of qubits `n`, which must be greater than zero.
  Every vector then has `2**n` entries, and every matrix is `2**n` by `2**n`.
- `#init` gives the initial state vector:
  - the entries are enclosed in square brackets and separated by commas;
  - missing trailing entries are taken as zero;
  - more than `2**n` entries is an error.

### Circuit file

```
#circ x y
#define x [(0, 1) (1, 0)]
#define y [(0, -i) (i, 0)]
```

- `#circ` lists gate names on one line, separated by spaces or tabs. The first
  name listed is applied to the state first. At most 64 names are read.
- `#define NAME [...]` gives a gate's matrix:
  - each row is enclosed in parentheses;
  - within a row, the entries are separated by commas.

  Each row must have exactly `2**n` entries, and there must be exactly `2**n`
  rows. A name listed in `#circ` may be used more than once, and each use is
  looked up from the start of the file.

### Complex numbers

Entries are made of digits, `.`, `+`, `-` and `i`. Spaces inside an entry are
ignored. Examples:

- `1`, `-0.5`
- `i`, `-i`, `2i`
- `0.5+0.5i`, `1-i`, `2i-1`

## Library use

The modules can also be used directly:

- `qcircsim.parsing` reads the input: `qubit_count`, `init_vector`,
  `circuit_order`, `circuit_matrices`, `parse_complex` and `find_command`.
- `qcircsim.linalg` does the arithmetic on nested lists of `complex`:
  `zeros`, `identity`, `matmul`, `matvec`, `modulus` and `is_normalized`.
- `qcircsim.formatting` renders values as text: `format_complex`,
  `format_vector` and `format_matrix`.
- `qcircsim.cli` runs the whole pipeline: `simulate` returns a
  `SimulationResult`, `render` turns it into the report, and `read_text`
  reads a file.

```python
from qcircsim.cli import render, simulate
from qcircsim.parsing import parse_complex, qubit_count

parse_complex("1-2i")          # (1-2j)
qubit_count("#qubits 2")       # 2

result = simulate(
    "#circ x\n#define x [(0, 1) (1, 0)]\n",
    "#qubits 1\n#init [1, 0]\n",
)
result.final                   # [0j, (1+0j)]
result.correct                 # True
print(render(result))
```

Malformed input raises `qcircsim.parsing.ParseError`, a subclass of
`ValueError`.

## Limitations

- There are no built-in gates. Every gate must be written out as a full
  `2**n` by `2**n` matrix.
- There is no measurement or sampling. The tool only computes the final state
  vector and checks its normalisation.
- The whole state and every matrix are held as dense lists, so only small
  numbers of qubits are practical.

## Running the tests

```
pytest
```