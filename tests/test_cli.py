import io

import pytest

from pushswap.cli import main
from pushswap.parsing import parse_values
from pushswap.stacks import Stacks

_OPS = {
    "pa": "push_a",
    "pb": "push_b",
    "sa": "swap_a",
    "sb": "swap_b",
    "ss": "swap_both",
    "ra": "rotate_a",
    "rb": "rotate_b",
    "rr": "rotate_both",
    "rra": "reverse_rotate_a",
    "rrb": "reverse_rotate_b",
    "rrr": "reverse_rotate_both",
}


def _replay(initial, text):
    stacks = Stacks(initial, out=io.StringIO())
    for line in text.splitlines():
        if line in _OPS:
            getattr(stacks, _OPS[line])()
    return stacks


def test_no_arguments(capsys):
    assert main([]) == 1
    captured = capsys.readouterr()
    assert captured.out == "" and captured.err == ""


def test_single_number_is_silent(capsys):
    assert main(["5"]) == 1
    captured = capsys.readouterr()
    assert captured.out == "" and captured.err == ""


@pytest.mark.parametrize(
    "args",
    [
        ["1", "abc"],
        ["1", "2", "1"],
        ["1", "2147483648"],
        ["-", "1"],
        ["1 2 x"],
        ["4 4 2"],
        [""],
    ],
)
def test_bad_input_reports_error(capsys, args):
    assert main(args) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


@pytest.mark.parametrize("args", [["1", "2", "3"], ["-4 0 9"]])
def test_sorted_input_is_silent(capsys, args):
    assert main(args) == 1
    captured = capsys.readouterr()
    assert captured.out == "" and captured.err == ""


@pytest.mark.parametrize(
    "args",
    [["3", "1", "2"], ["3 1 2"], ["2", "1"], ["50", "-7", "12", "0", "33"], ["9 8 7 6"]],
)
def test_small_input_is_sorted(capsys, args):
    assert main(args) == 0
    out = capsys.readouterr().out
    initial = parse_values(args)
    result = _replay(initial, out)
    assert result.a == sorted(initial)
    assert result.b == []


@pytest.mark.parametrize(
    "args",
    [
        ["40", "-3", "17", "8", "99", "0", "-25", "61"],
        ["6 5 4 3 2 1"],
        ["2", "7", "1", "9", "3", "12", "5"],
    ],
)
def test_large_input_ends_with_zero_on_top(capsys, args):
    assert main(args) == 0
    out = capsys.readouterr().out
    initial = parse_values(args)
    result = _replay(initial, out)
    assert result.b == []
    assert sorted(result.a) == sorted(initial)
    assert result.a[0] == 0
    assert out.startswith("pb\n") or out.startswith("ra\n") or out.startswith("seq: ")