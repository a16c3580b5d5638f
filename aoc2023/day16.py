"""Day 16: light beams bouncing through a contraption of mirrors and splitters."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum


class Direction(Enum):
    """Direction of travel, as a (row, column) step."""

    UP = (-1, 0)
    DOWN = (1, 0)
    RIGHT = (0, 1)
    LEFT = (0, -1)

    @property
    def delta(self) -> tuple[int, int]:
        return self.value


_SLASH = {
    Direction.UP: Direction.RIGHT,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.DOWN,
    Direction.RIGHT: Direction.UP,
}

_BACKSLASH = {
    Direction.UP: Direction.LEFT,
    Direction.DOWN: Direction.RIGHT,
    Direction.LEFT: Direction.UP,
    Direction.RIGHT: Direction.DOWN,
}

_VERTICAL = (Direction.UP, Direction.DOWN)
_HORIZONTAL = (Direction.LEFT, Direction.RIGHT)


def _outgoing(cell: str, direction: Direction) -> tuple[Direction, ...]:
    if cell == ".":
        return (direction,)
    if cell == "|":
        return _VERTICAL if direction in _HORIZONTAL else (direction,)
    if cell == "-":
        return _HORIZONTAL if direction in _VERTICAL else (direction,)
    if cell == "/":
        return (_SLASH[direction],)
    if cell == "\\":
        return (_BACKSLASH[direction],)
    raise ValueError(f"Unknown character {cell!r}")


def energized(grid: Sequence[str], row: int, col: int, direction: Direction) -> int:
    """Number of tiles a beam entering at (row, col) with direction passes through."""
    seen: set[tuple[int, int, Direction]] = set()
    pending = [(row, col, direction)]
    while pending:
        state = pending.pop()
        r, c, heading = state
        if state in seen or not (0 <= r < len(grid) and 0 <= c < len(grid[r])):
            continue
        seen.add(state)
        for out in _outgoing(grid[r][c], heading):
            d_row, d_col = out.delta
            pending.append((r + d_row, c + d_col, out))
    return len({(r, c) for r, c, _ in seen})


def _grid(text: str) -> list[str]:
    grid = [line.strip() for line in text.strip().splitlines()]
    if not grid or not grid[0]:
        raise ValueError("empty contraption")
    return grid


def _starts(height: int, width: int) -> list[tuple[int, int, Direction]]:
    last_row, last_col = height - 1, width - 1
    starts = [
        (0, 0, Direction.DOWN),
        (0, 0, Direction.RIGHT),
        (0, last_col, Direction.DOWN),
        (0, last_col, Direction.LEFT),
        (last_row, 0, Direction.UP),
        (last_row, 0, Direction.RIGHT),
        (last_row, last_col, Direction.UP),
        (last_row, last_col, Direction.LEFT),
    ]
    for r in range(1, height - 2):
        starts.append((r, 0, Direction.RIGHT))
        starts.append((r, last_col, Direction.LEFT))
    for c in range(1, width - 2):
        starts.append((0, c, Direction.DOWN))
        starts.append((last_row, c, Direction.UP))
    return starts


def part1(text: str) -> int:
    """Tiles energized by a beam entering the top-left tile heading right."""
    return energized(_grid(text), 0, 0, Direction.RIGHT)


def part2(text: str) -> int:
    """Most tiles energized by a beam entering from any edge."""
    grid = _grid(text)
    return max(
        energized(grid, r, c, d) for r, c, d in _starts(len(grid), len(grid[0]))
    )