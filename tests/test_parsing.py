import pytest

from qcircsim.linalg import zeros
from qcircsim.parsing import (
    MAX_MATRICES,
    ParseError,
    circuit_matrices,
    circuit_order,
    find_command,
    init_vector,
    parse_complex,
    qubit_count,
)


def test_find_command_returns_index_after_command():
    assert find_command("#qubits", "#qubits 3", 0) == len("#qubits")


def test_find_command_absent():
    assert find_command("#init", "#qubits 3\n", 0) is None


def test_find_command_needs_whole_token():
    assert find_command("#init", "#initial [1]", 0) is None


def test_find_command_respects_start():
    text = "#a x\n#a y"
    assert find_command("#a", text, 3) == text.index("#a", 3) + len("#a")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("5", complex(5, 0)),
        ("-2.5", complex(-2.5, 0)),
        ("", complex(0, 0)),
        ("i", complex(0, 1)),
        ("+i", complex(0, 1)),
        ("-i", complex(0, -1)),
        ("3i", complex(0, 3)),
        ("-3i", complex(0, -3)),
        ("1+2i", complex(1, 2)),
        ("1-2i", complex(1, -2)),
        ("2i-1", complex(-1, 2)),
        ("1-i", complex(1, -1)),
        ("0.5+i", complex(0.5, 1)),
    ],
)
def test_parse_complex(text, expected):
    assert parse_complex(text) == expected


def test_qubit_count_reads_number():
    assert qubit_count("#qubits 2\n#init [1,0,0,0]") == 2


def test_qubit_count_skips_empty_command():
    assert qubit_count("#qubits\n#qubits 3\n") == 3


def test_qubit_count_missing_raises():
    with pytest.raises(ParseError):
        qubit_count("#init [1,0]")


def test_qubit_count_zero_raises():
    with pytest.raises(ParseError):
        qubit_count("#qubits 0")


def test_init_vector_reads_values():
    assert init_vector("#qubits 1\n#init [1,0]", 2) == [1, 0]


def test_init_vector_complex_entries():
    values = init_vector("#init [0.5+0.5i, 0.5-0.5i]", 2)
    assert values == [complex(0.5, 0.5), complex(0.5, -0.5)]


def test_init_vector_pads_missing_values():
    assert init_vector("#init [1]", 2) == [1, 0]


def test_init_vector_too_many_values_raises():
    with pytest.raises(ParseError):
        init_vector("#init [1,0,0]", 2)


def test_init_vector_trailing_empty_value_raises():
    with pytest.raises(ParseError):
        init_vector("#init [1,]", 2)


def test_init_vector_double_imaginary_raises():
    with pytest.raises(ParseError):
        init_vector("#init [1ii,0]", 2)


def test_init_vector_missing_raises():
    with pytest.raises(ParseError):
        init_vector("#qubits 1\n", 2)


def test_init_vector_falls_back_to_later_valid_command():
    assert init_vector("#init [1,x]\n#init [0,1]", 2) == [0, 1]


def test_init_vector_continues_across_commands():
    assert init_vector("#init [1]\n#init [0]", 2) == [1, 0]


def test_circuit_order_lists_names():
    assert circuit_order("#circ A B\tC\n#define A [(1)]") == ["A", "B", "C"]


def test_circuit_order_skips_empty_command():
    assert circuit_order("#circ\n#circ X") == ["X"]


def test_circuit_order_missing_raises():
    with pytest.raises(ParseError):
        circuit_order("#define A [(1)]")


def test_circuit_order_is_limited():
    names = [f"M{n}" for n in range(MAX_MATRICES + 6)]
    assert circuit_order("#circ " + " ".join(names)) == names[:MAX_MATRICES]


CIRCUIT = (
    "#circ X I\n"
    "#define I [(1,0) (0,1)]\n"
    "#define X [(0,1)(1,0)]\n"
)


def test_circuit_matrices_in_order():
    x_matrix, i_matrix = circuit_matrices(CIRCUIT, 2, ["X", "I"])
    assert x_matrix == [[0, 1], [1, 0]]
    assert i_matrix == [[1, 0], [0, 1]]


def test_circuit_matrices_repeated_name():
    matrices = circuit_matrices(CIRCUIT, 2, ["X", "X"])
    assert matrices[0] == matrices[1] == [[0, 1], [1, 0]]


def test_circuit_matrices_complex_entries():
    text = "#define Y [( 0 , -i )( i , 0 )]"
    assert circuit_matrices(text, 2, ["Y"]) == [[[0, -1j], [1j, 0]]]


def test_circuit_matrices_wrong_dimension_raises():
    with pytest.raises(ParseError):
        circuit_matrices(CIRCUIT, 4, ["X"])


def test_circuit_matrices_missing_definition_raises():
    with pytest.raises(ParseError):
        circuit_matrices(CIRCUIT, 2, ["H"])


def test_circuit_matrices_rows_on_separate_lines_raise():
    with pytest.raises(ParseError):
        circuit_matrices("#define X [(0,1)\n(1,0)]", 2, ["X"])


def test_circuit_matrices_uses_later_valid_definition():
    text = "#define X [(0,1)]\n#define X [(0,1)(1,0)]"
    assert circuit_matrices(text, 2, ["X"]) == [[[0, 1], [1, 0]]]


def test_circuit_matrices_definition_without_brackets_is_zero():
    assert circuit_matrices("#define Z nothing", 2, ["Z"]) == [zeros(2, 2)]