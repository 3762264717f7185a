"""Reading and validating the numbers given on the command line."""

from __future__ import annotations

import re
from bisect import bisect_left
from collections.abc import Iterable, Sequence
from itertools import pairwise

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
HASH_TABLE_SIZE = 1_000_000

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"
_SIGNS = "+-"
_NUMBER = re.compile(r"-?[0-9]+")


class InputError(ValueError):
    """Raised when the arguments cannot be turned into a stack.

    ``show`` tells whether the failure is reported with ``Error`` on
    standard error or ends the program silently.
    """

    def __init__(self, message: str = "Error", *, show: bool = True) -> None:
        super().__init__(message)
        self.show = show


def _wrap64(value: int) -> int:
    """Reduce an integer to a signed 64-bit value, as a ``long long`` would."""
    value &= (1 << 64) - 1
    return value - (1 << 64) if value >= 1 << 63 else value


def atoi(text: str) -> int:
    """Convert the leading part of ``text`` to an integer.

    Leading whitespace is skipped and one sign is accepted; two signs in a
    row give 0. Reading stops at the first character that is not a digit.
    """
    length = len(text)
    i = 0
    while i < length and text[i] in _WHITESPACE:
        i += 1
    sign = 1
    while i < length and text[i] in _SIGNS:
        if i + 1 < length and text[i + 1] in _SIGNS:
            return 0
        if text[i] == "-":
            sign = -sign
        i += 1
    result = 0
    while i < length and text[i] in _DIGITS:
        result = _wrap64(result * 10 + int(text[i]))
        i += 1
    return _wrap64(result * sign)


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    return [word for word in text.split(sep) if word]


def _words(args: Sequence[str]) -> list[str]:
    """A single argument holds all numbers separated by spaces."""
    if len(args) == 1:
        return split_words(args[0], " ")
    return list(args)


def check_if_num(args: Iterable[str]) -> bool:
    """Tell whether every given word is an integer: an optional '-' then digits."""
    args = list(args)
    if not args:
        return True
    words = _words(args)
    if not words:
        return False
    return all(_NUMBER.fullmatch(word) for word in words)


def _hash(number: int) -> int:
    return (number & 0xFFFFFFFF) % HASH_TABLE_SIZE


def check_duplicates(args: Iterable[str]) -> bool:
    """Tell whether the numbers are free of duplicates.

    Numbers are compared through a fixed-size hash of their 32-bit value,
    so two numbers whose hashes collide also count as duplicates.
    """
    seen: set[int] = set()
    for word in _words(list(args)):
        key = _hash(atoi(word))
        if key in seen:
            return False
        seen.add(key)
    return True


def check_if_sorted(args: Iterable[str]) -> bool:
    """Tell whether the numbers already appear in ascending order.

    With no arguments at all there is nothing to judge and the answer is False.
    """
    args = list(args)
    if not args:
        return False
    values = [atoi(word) for word in _words(args)]
    return all(left <= right for left, right in pairwise(values))


def rank_values(values: Iterable[int]) -> list[int]:
    """Replace each value by its position in the sorted order."""
    values = list(values)
    order = sorted(values)
    return [bisect_left(order, value) for value in values]


def parse_values(args: Iterable[str]) -> list[int]:
    """Build the starting stack: each number replaced by its rank.

    A single argument holding only one number ends the program silently;
    a number outside the 32-bit signed range is an error.
    """
    args = list(args)
    if len(args) == 1:
        words = split_words(args[0], " ")
        if len(words) == 1:
            raise InputError("a single number needs no sorting", show=False)
    else:
        words = args
    values = []
    for word in words:
        number = atoi(word)
        if not INT_MIN <= number <= INT_MAX:
            raise InputError()
        values.append(number)
    return rank_values(values)