"""Day 10: follow the pipe loop and count the tiles it encloses."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Heading of travel, as a (row, column) step."""

    NORTH = (-1, 0)
    EAST = (0, 1)
    SOUTH = (1, 0)
    WEST = (0, -1)

    @property
    def delta(self) -> tuple[int, int]:
        return self.value


@dataclass(frozen=True)
class Point:
    """A tile of the loop and the pipe it holds."""

    row: int
    col: int
    value: str


_TURNS = {
    ("|", Direction.SOUTH): Direction.SOUTH,
    ("|", Direction.NORTH): Direction.NORTH,
    ("-", Direction.EAST): Direction.EAST,
    ("-", Direction.WEST): Direction.WEST,
    ("L", Direction.SOUTH): Direction.EAST,
    ("L", Direction.WEST): Direction.NORTH,
    ("J", Direction.SOUTH): Direction.WEST,
    ("J", Direction.EAST): Direction.NORTH,
    ("7", Direction.EAST): Direction.SOUTH,
    ("7", Direction.NORTH): Direction.WEST,
    ("F", Direction.WEST): Direction.SOUTH,
    ("F", Direction.NORTH): Direction.EAST,
}

# Pipes that connect back to the start when found on each side of it.
_START_LINKS = (
    (Direction.NORTH, "|7F"),
    (Direction.EAST, "-J7"),
    (Direction.SOUTH, "|LJ"),
    (Direction.WEST, "-LF"),
)


def _step(grid: Sequence[str], row: int, col: int, heading: Direction) -> tuple[int, int]:
    d_row, d_col = heading.delta
    row, col = row + d_row, col + d_col
    if not (0 <= row < len(grid) and 0 <= col < len(grid[row])):
        raise ValueError(f"pipe leads off the grid at ({row}, {col})")
    return row, col


def _neighbour(grid: Sequence[str], row: int, col: int, heading: Direction) -> str:
    try:
        r, c = _step(grid, row, col, heading)
    except ValueError:
        return "."
    return grid[r][c]


def _start_heading(grid: Sequence[str], row: int, col: int) -> Direction:
    for heading, pipes in _START_LINKS:
        if _neighbour(grid, row, col, heading) in pipes:
            return heading
    raise ValueError("No pipe connect with Start")


def trace_loop(grid: Sequence[str]) -> list[Point]:
    """Tiles of the loop in walking order, beginning with the start tile."""
    start = next(
        ((r, c) for r, line in enumerate(grid) for c, char in enumerate(line) if char == "S"),
        None,
    )
    if start is None:
        raise ValueError("no start tile 'S' in grid")
    row, col = start
    path = [Point(row, col, "S")]
    heading = _start_heading(grid, row, col)
    while True:
        row, col = _step(grid, row, col, heading)
        value = grid[row][col]
        if value == "S":
            return path
        path.append(Point(row, col, value))
        try:
            heading = _TURNS[(value, heading)]
        except KeyError:
            raise ValueError(f"pipe {value!r} at ({row}, {col}) breaks the loop") from None


def _grid(text: str) -> list[str]:
    return [line.strip() for line in text.splitlines()]


def part1(text: str) -> int:
    """Steps to the point of the loop farthest from the start."""
    return len(trace_loop(_grid(text))) // 2


def part2(text: str) -> int:
    """Number of tiles enclosed by the loop."""
    grid = _grid(text)
    size = len(grid)
    cells: dict[tuple[int, int], str] = {}
    for point in trace_loop(grid):
        if point.row >= size or point.col >= size:
            raise ValueError("loop reaches past a square grid of the row count")
        cells[(point.row, point.col)] = point.value

    count = 0
    for row in range(size):
        inside = False
        for col in range(size):
            value = cells.get((row, col))
            if value is None:
                if inside:
                    count += 1
            elif value in "|LJ":
                inside = not inside
    return count