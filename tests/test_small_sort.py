import io
from itertools import permutations

import pytest

from pushswap.small_sort import find_min, get_index, sort_five, sort_three
from pushswap.stacks import Stacks


def run(sorter, values):
    out = io.StringIO()
    stacks = Stacks(values, [], out)
    sorter(stacks)
    return stacks, out.getvalue().splitlines()


def replay(values, instructions):
    stacks = Stacks(values, [], io.StringIO())
    actions = {
        "pa": stacks.push_a,
        "pb": stacks.push_b,
        "sa": stacks.swap_a,
        "sb": stacks.swap_b,
        "ss": stacks.swap_both,
        "ra": stacks.rotate_a,
        "rb": stacks.rotate_b,
        "rr": stacks.rotate_both,
        "rra": stacks.reverse_rotate_a,
        "rrb": stacks.reverse_rotate_b,
        "rrr": stacks.reverse_rotate_both,
    }
    for name in instructions:
        actions[name]()
    return stacks


def test_find_min():
    assert find_min([4, 2, 9, 3]) == 2


def test_find_min_empty_raises():
    with pytest.raises(ValueError):
        find_min([])


def test_get_index_found_and_missing():
    stack = [4, 2, 9]
    assert get_index(stack, 9) == 2
    assert get_index(stack, 7) == -1


@pytest.mark.parametrize("values", [list(p) for p in permutations(range(3))])
def test_sort_three_all_orders(values):
    stacks, instructions = run(sort_three, values)
    assert stacks.a == sorted(values)
    assert len(instructions) <= 2
    assert replay(values, instructions).a == sorted(values)


def test_sort_three_descending_instructions():
    _, instructions = run(sort_three, [2, 1, 0])
    assert instructions == ["sa", "rra"]


def test_sort_three_sorted_needs_nothing():
    stacks, instructions = run(sort_three, [0, 1, 2])
    assert stacks.a == [0, 1, 2]
    assert instructions == []


def test_sort_three_two_elements():
    stacks, instructions = run(sort_three, [1, 0])
    assert stacks.a == [0, 1]
    assert instructions == ["sa"]


@pytest.mark.parametrize("size", [2, 3, 4, 5])
def test_sort_five_all_orders(size):
    for perm in permutations(range(size)):
        values = list(perm)
        stacks, instructions = run(sort_five, values)
        assert stacks.a == sorted(values)
        assert stacks.b == []
        replayed = replay(values, instructions)
        assert replayed.a == sorted(values)
        assert replayed.b == []


def test_sort_five_pushes_balance():
    _, instructions = run(sort_five, [4, 3, 2, 1, 0])
    assert instructions.count("pb") == instructions.count("pa") == 2


def test_sort_five_min_near_bottom_uses_reverse_rotate():
    _, instructions = run(sort_five, [1, 2, 3, 0])
    assert instructions[0] == "rra"
    assert "ra" not in instructions