"""Day 9: extrapolate sensor histories forwards and backwards."""

from __future__ import annotations

import re
from collections.abc import Sequence

_INT = re.compile(r"[+-]?[0-9]+")


def _differences(numbers: Sequence[int]) -> list[int]:
    return [b - a for a, b in zip(numbers, numbers[1:])]


def extrapolate_next(numbers: Sequence[int]) -> int:
    """Value that follows the sequence."""
    if not numbers:
        raise ValueError("cannot extrapolate an empty history")
    diffs = _differences(numbers)
    if all(d == 0 for d in diffs):
        return numbers[-1]
    return numbers[-1] + extrapolate_next(diffs)


def extrapolate_previous(numbers: Sequence[int]) -> int:
    """Value that precedes the sequence."""
    if not numbers:
        raise ValueError("cannot extrapolate an empty history")
    diffs = _differences(numbers)
    if all(d == 0 for d in diffs):
        return numbers[-1]
    return numbers[0] - extrapolate_previous(diffs)


def _parse_history(line: str) -> list[int]:
    values = []
    for token in line.strip().split(" "):
        if not _INT.fullmatch(token):
            raise ValueError(f"not a number: {token!r}")
        values.append(int(token))
    return values


def _histories(text: str) -> list[list[int]]:
    return [_parse_history(line) for line in text.strip().splitlines()]


def part1(text: str) -> int:
    """Sum of the next value of every history."""
    return sum(extrapolate_next(history) for history in _histories(text))


def part2(text: str) -> int:
    """Sum of the previous value of every history."""
    return sum(extrapolate_previous(history) for history in _histories(text))