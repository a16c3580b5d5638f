import pytest

from aoc2023.day10 import Point, part1, part2, trace_loop

SQUARE_LOOP = [".....", ".S-7.", ".|.|.", ".L-J.", "....."]
WINDING_LOOP = ["..F7.", ".FJ|.", "SJ.L7", "|F--J", "LJ..."]

EXAMPLE_1 = "\n".join(SQUARE_LOOP)
EXAMPLE_2 = "\n".join(WINDING_LOOP)


def test_part1_example_1():
    assert part1(EXAMPLE_1) == 4


def test_part1_example_2():
    assert part1(EXAMPLE_2) == 8


def test_part2_example_1():
    assert part2(EXAMPLE_1) == 1


def test_part2_example_2():
    assert part2(EXAMPLE_2) == 1


def test_indented_lines_are_trimmed():
    indented = "\n".join("    " + line for line in SQUARE_LOOP)
    assert part1(indented) == 4


def test_trace_loop_order():
    assert trace_loop(SQUARE_LOOP) == [
        Point(1, 1, "S"),
        Point(1, 2, "-"),
        Point(1, 3, "7"),
        Point(2, 3, "|"),
        Point(3, 3, "J"),
        Point(3, 2, "-"),
        Point(3, 1, "L"),
        Point(2, 1, "|"),
    ]


def test_wide_grid_part1():
    assert part1("S-7\nL-J") == 3


def test_wide_grid_part2_is_rejected():
    with pytest.raises(ValueError):
        part2("S-7\nL-J")


def test_missing_start():
    with pytest.raises(ValueError):
        trace_loop(["...", ".-.", "..."])


def test_start_without_connection():
    with pytest.raises(ValueError):
        trace_loop(["...", ".S.", "..."])


def test_broken_pipe():
    with pytest.raises(ValueError):
        trace_loop([".....", ".S-X.", "....."])


def test_pipe_leading_off_grid():
    with pytest.raises(ValueError):
        trace_loop(["S--"])