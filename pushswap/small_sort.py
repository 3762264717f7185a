"""Sorting stacks of at most five numbers."""

from __future__ import annotations

from collections.abc import Sequence

from pushswap.stacks import Stacks


def find_min(stack: Sequence[int]) -> int:
    """The smallest number on the stack."""
    if not stack:
        raise ValueError("empty stack has no minimum")
    return min(stack)


def get_index(stack: Sequence[int], value: int) -> int:
    """Position of ``value`` counted from the top, or -1 when absent."""
    try:
        return list(stack).index(value)
    except ValueError:
        return -1


def sort_three(stacks: Stacks) -> None:
    """Sort stack ``a`` when it holds two or three numbers."""
    a = stacks.a
    if len(a) < 2:
        return
    first, second = a[0], a[1]
    if len(a) == 2:
        if first > second:
            stacks.swap_a()
        return
    third = a[2]
    if second < first < third:
        stacks.swap_a()
    elif first > third and second < third:
        stacks.rotate_a()
    elif first < second and second > third and first < third:
        stacks.reverse_rotate_a()
        stacks.swap_a()
    elif first < second and second > third and first > third:
        stacks.reverse_rotate_a()
    elif first > second > third:
        stacks.swap_a()
        stacks.reverse_rotate_a()


def sort_five(stacks: Stacks) -> None:
    """Sort stack ``a`` of up to five numbers, using ``b`` as scratch.

    The smallest numbers are pushed to ``b`` until three remain, those are
    sorted, and the rest are pushed back on top.
    """
    while len(stacks.a) > 3:
        smallest = find_min(stacks.a)
        if get_index(stacks.a, smallest) < 3:
            while stacks.a[0] != smallest:
                stacks.rotate_a()
        else:
            while stacks.a[0] != smallest:
                stacks.reverse_rotate_a()
        stacks.push_b()
    sort_three(stacks)
    while stacks.b:
        stacks.push_a()