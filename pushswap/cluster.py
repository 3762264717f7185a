"""Sorting larger stacks by keeping one increasing run in ``a`` and
inserting every other number back next to its neighbour."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass, fields

from pushswap.stacks import Stacks


@dataclass
class MoveCounts:
    """Costs and directions worked out for the next insertion."""

    mov_a: int = 0
    mov_b: int = 0
    mov_bb: int = 0
    ma_to_top: int = 0
    ma_to_bottom: int = 0
    mb_to_top: int = 0
    mb_to_bottom: int = 0
    m_a: int = 0
    m_b: int = 0
    m_bb: int = 0

    def reset(self) -> None:
        """Set every count and flag back to zero."""
        for field in fields(self):
            setattr(self, field.name, 0)

    def describe(self) -> str:
        """The diagnostic listing printed before each insertion."""
        return (
            f"\nmove_a: {self.mov_a}\n"
            f"\nmove_b: {self.mov_b}\n"
            f"\nmove_both: {self.mov_bb}\n"
            f"modes:\nma_to_top:{self.ma_to_top}\nma_to_bottom:{self.ma_to_bottom}\n"
            f"mb_to_top:{self.mb_to_top}\nmb_to_bottom:{self.mb_to_bottom}\n"
            f"m_a:{self.m_a}\nm_b:{self.m_b}\nm_bb:{self.m_bb}\n"
        )


def _write(stacks: Stacks, text: str) -> None:
    (stacks.out if stacks.out is not None else sys.stdout).write(text)


def _position(stack: Sequence[int], wanted: int) -> int:
    """1-based position of ``wanted``, or the stack size when it is absent."""
    return next(
        (place for place, value in enumerate(stack, 1) if value == wanted),
        len(stack),
    )


def check_stack_b_moves(
    stack_a: Sequence[int], stack_b: Sequence[int], counts: MoveCounts
) -> int:
    """Cost of bringing the predecessor of ``a``'s top to the top of ``b``.

    Returns 0 when the top of ``a`` is already the smallest rank.
    """
    if stack_a[0] == 0:
        return 0
    target = _position(stack_b, stack_a[0] - 1)
    size = len(stack_b)
    counts.m_b = 1
    if target <= size // 2:
        counts.mb_to_top = 1
        return target
    counts.mb_to_bottom = 1
    return size - target + 2


def check_stack_a_moves(
    stack_a: Sequence[int], stack_b: Sequence[int], counts: MoveCounts
) -> int:
    """Cost of bringing the successor of ``b``'s top to the top of ``a``."""
    target = _position(stack_a, stack_b[0] + 1)
    size = len(stack_a)
    counts.m_a = 1
    if target <= size // 2:
        counts.ma_to_top = 1
        return target
    counts.ma_to_bottom = 1
    return size - target + 2


def check_both_moves(
    stack_a: Sequence[int], stack_b: Sequence[int], counts: MoveCounts
) -> int:
    """Cost of rotating both stacks together until ``a`` holds the
    predecessor of ``b``'s top at the same depth; 0 when that never happens."""
    target = 0
    for target, (value_a, value_b) in enumerate(zip(stack_a, stack_b), 1):
        if value_a == value_b - 1:
            counts.m_bb = 1
            break
    size_a, size_b = len(stack_a), len(stack_b)
    if size_a > size_b and counts.m_bb == 1:
        if target <= size_a // 2:
            return target
    elif size_a == size_b and counts.m_bb == 1:
        if target <= size_a // 2:
            return target
        return size_a - target + 2
    return 0


def _repeat(step: Callable[[], None], count: int) -> None:
    if count < 1:
        raise ValueError(f"move count must be at least 1, got {count}")
    for _ in range(count - 1):
        step()


def execute_move_a(stacks: Stacks, counts: MoveCounts) -> None:
    """Rotate ``a`` as planned in ``counts``, then push ``b``'s top onto it."""
    step = stacks.reverse_rotate_a if counts.ma_to_bottom == 1 else stacks.rotate_a
    _repeat(step, counts.mov_a)
    counts.mov_a = 0
    stacks.push_a()


def execute_move_b(stacks: Stacks, counts: MoveCounts) -> None:
    """Rotate ``b`` as planned in ``counts``, then push its top onto ``a``."""
    step = stacks.reverse_rotate_b if counts.mb_to_bottom == 1 else stacks.rotate_b
    _repeat(step, counts.mov_b)
    counts.mov_b = 0
    stacks.push_a()


def execute_move_both(stacks: Stacks, counts: MoveCounts) -> None:
    """Rotate both stacks together as planned, then push ``b``'s top onto ``a``."""
    _repeat(stacks.rotate_both, counts.mov_bb)
    counts.mov_bb = 0
    stacks.push_a()


def rotate_to_zero(stacks: Stacks) -> None:
    """Rotate ``a`` until the smallest rank is on top."""
    if stacks.a and 0 not in stacks.a:
        raise ValueError("stack a holds no 0")
    while stacks.a and stacks.a[0] != 0:
        stacks.rotate_a()


def push_outside_sequence(stacks: Stacks, sequence: Sequence[int], length: int) -> None:
    """Push to ``b`` every number of ``a`` not among the first ``length + 1``
    of ``sequence``; those stay in ``a``, rotated past as they come up."""
    members = set(sequence[: length + 1])
    if len(members) != length + 1 or not members <= set(stacks.a):
        raise ValueError("the sequence must name length + 1 numbers found in stack a")
    while len(stacks.a) - 1 != length:
        if stacks.a[0] in members:
            stacks.rotate_a()
        else:
            stacks.push_b()


def _run_after(values: Sequence[int], index: int) -> int:
    """How many greedy increasing steps follow ``values[index]``."""
    current = values[index]
    steps = 0
    for value in values[index + 1 :]:
        if current < value:
            steps += 1
            current = value
    return steps


def longest_run(values: Sequence[int]) -> tuple[int, int]:
    """The starting number of the longest greedy increasing run and the
    number of steps it takes after that start.

    The first start wins ties; when no run has any step the first number
    is the start.
    """
    if not values:
        raise ValueError("no numbers to search")
    best_value, best_length = values[0], 0
    for index, value in enumerate(values):
        length = _run_after(values, index)
        if length > best_length:
            best_value, best_length = value, length
    return best_value, best_length


def increasing_run(values: Sequence[int], start: int) -> list[int]:
    """The greedy increasing run that begins at the number ``start``."""
    values = list(values)
    index = values.index(start)
    run = [start]
    for value in values[index + 1 :]:
        if run[-1] < value:
            run.append(value)
    return run


def _choose(stacks: Stacks, counts: MoveCounts) -> None:
    if counts.mov_bb == 0:
        if counts.mov_a < counts.mov_b or counts.mov_b == 0:
            execute_move_a(stacks, counts)
        else:
            execute_move_b(stacks, counts)
    elif counts.mov_b == 0:
        if counts.mov_a < counts.mov_bb or counts.mov_bb == 0:
            execute_move_a(stacks, counts)
        else:
            execute_move_both(stacks, counts)
    elif counts.mov_a < counts.mov_b and counts.mov_a < counts.mov_bb:
        execute_move_a(stacks, counts)
    elif counts.mov_b < counts.mov_a and counts.mov_b < counts.mov_bb:
        execute_move_b(stacks, counts)
    else:
        execute_move_both(stacks, counts)


def cluster_sort(stacks: Stacks) -> None:
    """Keep the longest increasing run in ``a``, move the rest to ``b`` and
    push them back one at a time by the cheapest plan, then bring 0 to the top.

    Diagnostic listings of the stacks and costs go to the same output as
    the instructions.
    """
    start, length = longest_run(stacks.a)
    _write(stacks, f"seq: {length}\nvalue: {start}\n")
    run = increasing_run(stacks.a, start)
    push_outside_sequence(stacks, run, length)
    counts = MoveCounts()
    while stacks.b:
        stacks.describe_a()
        stacks.describe_b()
        counts.mov_a = check_stack_a_moves(stacks.a, stacks.b, counts)
        if len(stacks.b) != 1:
            counts.mov_b = check_stack_b_moves(stacks.a, stacks.b, counts)
        counts.mov_bb = check_both_moves(stacks.a, stacks.b, counts)
        _write(stacks, counts.describe())
        _choose(stacks, counts)
        counts.reset()
    rotate_to_zero(stacks)
    stacks.describe_a()
    stacks.describe_b()