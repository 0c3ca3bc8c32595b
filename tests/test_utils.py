import pytest

from numericlib.utils import (
    convert_line,
    format_matrix,
    get_value_horner,
    is_number,
    load_matrix,
    print_iterations,
    print_matrix,
    verify_solution,
)


def test_horner_default_degree():
    assert get_value_horner(2.0, [1, 2, 3, 4]) == pytest.approx(49.0)


def test_horner_explicit_degree():
    assert get_value_horner(3.0, [1, 1], n=1) == pytest.approx(4.0)


def test_horner_too_few_coefficients():
    with pytest.raises(IndexError):
        get_value_horner(1.0, [1, 2])


def test_verify_solution_true():
    assert verify_solution([[2, 1], [1, 3]], [5, 7], [1.6, 1.8]) is True


def test_verify_solution_false():
    assert verify_solution([[2, 1], [1, 3]], [5, 7], [1.0, 1.0]) is False


def test_verify_solution_tolerance():
    assert verify_solution([[1.0]], [1.0], [1.0 + 1e-6]) is True
    assert verify_solution([[1.0]], [1.0], [1.0 + 1e-4]) is False


@pytest.mark.parametrize("char,expected", [("0", True), ("9", True), ("-", True),
                                           (".", True), ("a", False), (" ", False),
                                           ("+", False)])
def test_is_number(char, expected):
    assert is_number(char) is expected


def test_convert_line():
    assert convert_line("1 -2.5 abc 3") == [1.0, -2.5, 3.0]


def test_convert_line_empty():
    assert convert_line("b:") == []


def test_convert_line_lone_minus_raises():
    with pytest.raises(ValueError):
        convert_line("x - y")


def test_format_matrix():
    assert format_matrix([[1, 2], [3, 4]]) == (
        "         1          2 \n         3          4 \n\n"
    )


def test_format_matrix_with_rhs():
    assert format_matrix([[1, 2], [3, 4]], [5, 6.5]) == (
        "         1          2 | 5\n         3          4 | 6.5\n\n"
    )


def test_print_matrix(capsys):
    print_matrix([[1.5]])
    assert capsys.readouterr().out == "       1.5 \n\n"


def test_print_iterations(capsys):
    print_iterations("bis", [1.5, 1.25], 1.0)
    assert capsys.readouterr().out == (
        "\nPrzyblizenia (bis) [|x_n - x*|]:\n"
        "Iteracja 1:          1.5  Blad: 0.5\n"
        "Iteracja 2:         1.25  Blad: 0.25\n"
    )


def test_load_matrix(tmp_path):
    path = tmp_path / "system.txt"
    path.write_text("Data\nn: 2\nb:\n5 7\nA:\n2 1\n1 3\n", encoding="utf-8")
    a, b = load_matrix(path)
    assert a == [[2.0, 1.0], [1.0, 3.0]]
    assert b == [5.0, 7.0]


def test_load_matrix_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_matrix(tmp_path / "missing.txt")


def test_load_matrix_without_size(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("Data\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_matrix(path)