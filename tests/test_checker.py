import io
import itertools

import pytest

from pushswap.checker import execute, main, run_checker
from pushswap.sorter import sort_numbers
from pushswap.stack import Stack


def _run_main(monkeypatch, capsys, argv, stdin_text):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin_text))
    code = main(argv)
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_execute_swaps_top_of_a():
    stack_a = Stack([2, 1, 3])
    stack_b = Stack()
    execute("sa\n", stack_a, stack_b)
    assert list(stack_a) == [1, 2, 3]


def test_execute_push_moves_value_to_b():
    stack_a = Stack([5, 6])
    stack_b = Stack()
    execute("pb", stack_a, stack_b)
    assert list(stack_a) == [6]
    assert list(stack_b) == [5]


def test_execute_pa_on_empty_b_does_nothing():
    stack_a = Stack([1, 2])
    stack_b = Stack()
    execute("pa\n", stack_a, stack_b)
    assert list(stack_a) == [1, 2]
    assert len(stack_b) == 0


@pytest.mark.parametrize("line", ["", "\n", "sa ", "SA", "rrrr", "s", "foo\n", "sa\r\n"])
def test_execute_rejects_unknown_instruction(line):
    with pytest.raises(ValueError):
        execute(line, Stack([1, 2]), Stack())


def test_run_checker_accepts_sorting_moves():
    assert run_checker([2, 1], ["sa\n"]) is True


def test_run_checker_without_moves_on_unsorted_is_false():
    assert run_checker([2, 1], []) is False


def test_run_checker_nonempty_b_is_false():
    assert run_checker([1, 2, 3], ["pb\n"]) is False


def test_run_checker_last_line_without_newline():
    assert run_checker([3, 1, 2], ["ra\n", "sa"]) is False
    assert run_checker([3, 1, 2], ["ra"]) is True


def test_run_checker_stops_at_bad_line():
    remaining = iter(["sa\n", "oops\n", "sa\n"])
    with pytest.raises(ValueError):
        run_checker([2, 1], remaining)
    assert list(remaining) == ["sa\n"]


@pytest.mark.parametrize("values", list(itertools.permutations([4, -1, 7, 0, 3])))
def test_sorter_output_passes_checker(values):
    lines = [f"{op}\n" for op in sort_numbers(values)]
    assert run_checker(values, lines) is True


def test_sorter_output_passes_checker_large():
    values = [(i * 37) % 101 for i in range(101)]
    lines = [f"{op}\n" for op in sort_numbers(values)]
    assert run_checker(values, lines) is True


def test_main_reports_ok(monkeypatch, capsys):
    code, out, err = _run_main(monkeypatch, capsys, ["2", "1", "3"], "sa\n")
    assert (code, out, err) == (0, "OK\n", "")


def test_main_reports_ko(monkeypatch, capsys):
    code, out, err = _run_main(monkeypatch, capsys, ["2", "1", "3"], "ra\n")
    assert (code, out, err) == (0, "KO\n", "")


def test_main_splits_single_argument(monkeypatch, capsys):
    code, out, _ = _run_main(monkeypatch, capsys, ["3 2 1"], "sa\nrra\n")
    assert (code, out) == (0, "OK\n")


def test_main_sorted_input_no_moves(monkeypatch, capsys):
    code, out, _ = _run_main(monkeypatch, capsys, ["1", "2", "3"], "")
    assert (code, out) == (0, "OK\n")


@pytest.mark.parametrize(
    "argv",
    [[], [""], ["1", "2", "2"], ["1", "x"], ["2147483648"], ["1", "+"]],
)
def test_main_rejects_bad_arguments(monkeypatch, capsys, argv):
    code, out, err = _run_main(monkeypatch, capsys, argv, "")
    assert (code, out, err) == (1, "", "Error\n")


def test_main_rejects_bad_instruction(monkeypatch, capsys):
    code, out, err = _run_main(monkeypatch, capsys, ["2", "1"], "sa\nbad\n")
    assert (code, out, err) == (1, "", "Error\n")


def test_main_rejects_empty_line(monkeypatch, capsys):
    code, out, err = _run_main(monkeypatch, capsys, ["2", "1"], "sa\n\n")
    assert (code, out, err) == (1, "", "Error\n")