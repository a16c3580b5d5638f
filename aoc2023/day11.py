"""Day 11: distances between galaxies in an expanding universe."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Callable, Sequence
from itertools import combinations

_DEFAULT_FACTOR = 1_000_000


def _grid(text: str) -> list[str]:
    grid = text.strip().splitlines()
    if not grid:
        raise ValueError("empty universe image")
    return grid


def _total_distance(
    grid: Sequence[str], extra: int, row_is_empty: Callable[[str], bool]
) -> int:
    """Sum of pairwise distances once every empty row and column gains extra copies."""
    width = len(grid[0])
    empty_rows = [row for row, line in enumerate(grid) if row_is_empty(line)]
    empty_cols = [
        col for col in range(width) if all(line[col] != "#" for line in grid)
    ]
    galaxies = [
        (
            row + extra * bisect_left(empty_rows, row),
            col + extra * bisect_left(empty_cols, col),
        )
        for row, line in enumerate(grid)
        for col, char in enumerate(line)
        if char == "#"
    ]
    return sum(
        abs(r1 - r2) + abs(c1 - c2) for (r1, c1), (r2, c2) in combinations(galaxies, 2)
    )


def part1(text: str) -> int:
    """Sum of shortest paths between galaxy pairs, empty lines doubled."""
    return _total_distance(
        _grid(text), 1, lambda line: all(char == "." for char in line)
    )


def part2(text: str, factor: int = _DEFAULT_FACTOR) -> int:
    """Sum of shortest paths when every empty line becomes factor lines."""
    if factor < 1:
        raise ValueError("expansion factor must be at least 1")
    return _total_distance(_grid(text), max(1, factor - 1), lambda line: "#" not in line)