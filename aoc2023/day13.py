"""Day 13: find lines of reflection in patterns of ash and rocks."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


def _difference(a: Sequence[str], b: Sequence[str]) -> int:
    return sum(x != y for x, y in zip(a, b))


def _reflection(lines: Sequence[Sequence[str]], smudges: int) -> int | None:
    count = len(lines)
    for pos in range(1, count):
        diff = _difference(lines[pos - 1], lines[pos])
        if diff > smudges:
            continue
        dist = 1
        while pos + dist < count and pos - dist > 0:
            diff += _difference(lines[pos - 1 - dist], lines[pos + dist])
            if diff > smudges:
                break
            dist += 1
        if diff == smudges:
            return pos
    return None


@dataclass(frozen=True)
class Mirror:
    """One pattern, as its rows of text."""

    rows: tuple[str, ...]

    def find_reflection(self, smudges: int = 0) -> tuple[int, bool] | None:
        """(lines before the mirror, whether it is horizontal) with exactly smudges differences."""
        row = _reflection(self.rows, smudges)
        if row is not None:
            return row, True
        if not self.rows:
            raise ValueError("empty pattern")
        col = _reflection(list(zip(*self.rows)), smudges)
        if col is not None:
            return col, False
        return None


def _mirrors(text: str) -> list[Mirror]:
    blocks: list[list[str]] = [[]]
    for line in text.strip().splitlines():
        if line:
            blocks[-1].append(line)
        else:
            blocks.append([])
    return [Mirror(tuple(block)) for block in blocks]


def _summarize(text: str, smudges: int) -> int:
    total = 0
    for mirror in _mirrors(text):
        found = mirror.find_reflection(smudges)
        if found is not None:
            position, is_row = found
            total += position * 100 if is_row else position
    return total


def part1(text: str) -> int:
    """Summary of the exact reflection lines."""
    return _summarize(text, 0)


def part2(text: str) -> int:
    """Summary of the reflection lines once one smudge is fixed."""
    return _summarize(text, 1)