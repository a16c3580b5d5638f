"""Day 12: count arrangements of damaged springs in condition records."""

from __future__ import annotations

import re
from collections.abc import Sequence
from functools import lru_cache

_UINT = re.compile(r"\+?[0-9]+")


def count_arrangements(record: str, groups: Sequence[int]) -> int:
    """Number of ways the '?' in record can be filled to match the damaged groups."""
    pattern = record + "."
    sizes = tuple(groups)
    length = len(pattern)

    @lru_cache(maxsize=None)
    def solve(index: int, group: int) -> int:
        if group == len(sizes):
            return 0 if "#" in pattern[index:] else 1
        if index == length:
            return 0
        ways = 0
        if pattern[index] != "#":
            ways += solve(index + 1, group)
        end = index + sizes[group]
        if end < length and "." not in pattern[index:end] and pattern[end] != "#":
            ways += solve(end + 1, group + 1)
        return ways

    return solve(0, 0)


def unfold(record: str, groups: Sequence[int], factor: int = 5) -> tuple[str, list[int]]:
    """Repeat the record factor times joined by '?', and the groups factor times."""
    if factor < 1:
        raise ValueError("unfold factor must be at least 1")
    return "?".join([record] * factor), list(groups) * factor


def _parse_line(line: str) -> tuple[str, list[int]]:
    record, sep, groups_text = line.strip().partition(" ")
    if not sep:
        raise ValueError(f"invalid record line: {line!r}")
    groups = []
    for token in groups_text.strip().split(","):
        if not _UINT.fullmatch(token):
            raise ValueError(f"not a number: {token!r}")
        groups.append(int(token))
    return record.strip(), groups


def _lines(text: str) -> list[tuple[str, list[int]]]:
    return [_parse_line(line) for line in text.strip().splitlines()]


def part1(text: str) -> int:
    """Sum of arrangement counts over all records."""
    return sum(count_arrangements(record, groups) for record, groups in _lines(text))


def part2(text: str) -> int:
    """Sum of arrangement counts over all records unfolded five times."""
    return sum(
        count_arrangements(*unfold(record, groups, 5)) for record, groups in _lines(text)
    )