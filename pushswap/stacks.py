"""The two stacks and the instructions that move numbers between them."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO


class Stacks:
    """Stacks ``a`` and ``b`` with the top of each at index 0.

    Each instruction changes the stacks and writes its name, one per line,
    to ``out`` (standard output when none is given).
    """

    def __init__(
        self,
        a: Iterable[int] | None = None,
        b: Iterable[int] | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.a: list[int] = list(a) if a is not None else []
        self.b: list[int] = list(b) if b is not None else []
        self.out = out

    def __repr__(self) -> str:
        return f"Stacks(a={self.a!r}, b={self.b!r})"

    def _emit(self, text: str) -> None:
        (self.out if self.out is not None else sys.stdout).write(text)

    def push_a(self) -> None:
        """Move the top of ``b`` onto ``a``; nothing happens when ``b`` is empty."""
        if not self.b:
            return
        self.a.insert(0, self.b.pop(0))
        self._emit("pa\n")

    def push_b(self) -> None:
        """Move the top of ``a`` onto ``b``; nothing happens when ``a`` is empty."""
        if not self.a:
            return
        self.b.insert(0, self.a.pop(0))
        self._emit("pb\n")

    @staticmethod
    def _swap(stack: list[int]) -> bool:
        if len(stack) < 2:
            return False
        stack[0], stack[1] = stack[1], stack[0]
        return True

    @staticmethod
    def _rotate(stack: list[int]) -> None:
        if not stack:
            raise IndexError("cannot rotate an empty stack")
        stack.append(stack.pop(0))

    @staticmethod
    def _reverse_rotate(stack: list[int]) -> None:
        if not stack:
            raise IndexError("cannot rotate an empty stack")
        stack.insert(0, stack.pop())

    def swap_a(self, announce: bool = True) -> None:
        """Exchange the two top elements of ``a``; fewer than two is a no-op."""
        if self._swap(self.a) and announce:
            self._emit("sa\n")

    def swap_b(self, announce: bool = True) -> None:
        """Exchange the two top elements of ``b``; fewer than two is a no-op."""
        if self._swap(self.b) and announce:
            self._emit("sb\n")

    def swap_both(self) -> None:
        """Swap the tops of both stacks as one instruction."""
        self.swap_a(False)
        self.swap_b(False)
        self._emit("ss\n")

    def rotate_a(self, announce: bool = True) -> None:
        """Move the top of ``a`` to its bottom."""
        self._rotate(self.a)
        if announce:
            self._emit("ra\n")

    def rotate_b(self, announce: bool = True) -> None:
        """Move the top of ``b`` to its bottom."""
        self._rotate(self.b)
        if announce:
            self._emit("rb\n")

    def rotate_both(self) -> None:
        """Rotate both stacks as one instruction."""
        self.rotate_a(False)
        self.rotate_b(False)
        self._emit("rr\n")

    def reverse_rotate_a(self, announce: bool = True) -> None:
        """Move the bottom of ``a`` to its top."""
        self._reverse_rotate(self.a)
        if announce:
            self._emit("rra\n")

    def reverse_rotate_b(self, announce: bool = True) -> None:
        """Move the bottom of ``b`` to its top."""
        self._reverse_rotate(self.b)
        if announce:
            self._emit("rrb\n")

    def reverse_rotate_both(self) -> None:
        """Reverse-rotate both stacks as one instruction."""
        self.reverse_rotate_a(False)
        self.reverse_rotate_b(False)
        self._emit("rrr\n")

    @staticmethod
    def _describe(name: str, stack: list[int]) -> str:
        lines = "".join(f"{name}[{index}]: {value}\n" for index, value in enumerate(stack))
        return "\n" + lines

    def describe_a(self) -> str:
        """Write a listing of ``a`` to the output and return it."""
        text = self._describe("stack_a", self.a)
        self._emit(text)
        return text

    def describe_b(self) -> str:
        """Write a listing of ``b`` to the output and return it."""
        text = self._describe("stack_b", self.b)
        self._emit(text)
        return text