import pytest

from aoc2023.day16 import Direction, energized, part1, part2

EXAMPLE = r""".|...\....
    |.-.\.....
    .....|-...
    ........|.
    ..........
    .........\
    ..../.\\..
    .-.-/..|..
    .|....-|.\
    ..//.|...."""

GRID = [line.strip() for line in EXAMPLE.splitlines()]


def test_part1_example():
    assert part1(EXAMPLE) == 46


def test_part2_example():
    assert part2(EXAMPLE) == 51


def test_energized_matches_part1():
    assert energized(GRID, 0, 0, Direction.RIGHT) == 46


def test_energized_best_start_from_part2():
    assert energized(GRID, 0, 3, Direction.DOWN) == 51


def test_empty_row_passes_straight_through():
    assert energized(["....."], 0, 0, Direction.RIGHT) == 5


def test_start_off_grid_energizes_nothing():
    assert energized(["..."], 5, 0, Direction.RIGHT) == 0


def test_mirror_deflects_beam():
    assert energized(["./", ".."], 0, 0, Direction.RIGHT) == 2
    assert energized([".\\", ".."], 0, 0, Direction.RIGHT) == 3


def test_unknown_character_raises():
    with pytest.raises(ValueError):
        part1(".x..")


def test_empty_input_raises():
    with pytest.raises(ValueError):
        part2("")