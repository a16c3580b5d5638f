import pytest

from aoc2023.day13 import Mirror, part1, part2

FIRST = (
    "#.##..##.",
    "..#.##.#.",
    "##......#",
    "##......#",
    "..#.##.#.",
    "..##..##.",
    "#.#.##.#.",
)
SECOND = (
    "#...##..#",
    "#....#..#",
    "..##..###",
    "#####.##.",
    "#####.##.",
    "..##..###",
    "#....#..#",
)
EXAMPLE = "\n".join(FIRST) + "\n\n" + "\n".join(SECOND)


def test_part1_example():
    assert part1(EXAMPLE) == 405


def test_part2_example():
    assert part2(EXAMPLE) == 400


def test_exact_reflections():
    assert Mirror(FIRST).find_reflection(0) == (5, False)
    assert Mirror(SECOND).find_reflection(0) == (4, True)


def test_smudged_reflections():
    assert Mirror(FIRST).find_reflection(1) == (3, True)
    assert Mirror(SECOND).find_reflection(1) == (1, True)


def test_no_reflection():
    assert Mirror(("#.", ".#", "..")).find_reflection(0) is None


def test_empty_pattern_rejected():
    with pytest.raises(ValueError):
        Mirror(()).find_reflection(0)