from aoc2023.day03 import part1, part2

EXAMPLE = """467..114..
...*......
..35..633.
......#...
617*......
.....+.58.
..592.....
......755.
...$.*....
.664.598.."""


def test_part1_example():
    assert part1(EXAMPLE) == 4361


def test_part2_example():
    assert part2(EXAMPLE) == 467835


def test_part1_number_without_symbol():
    assert part1("..5..\n.....") == 0


def test_part1_symbol_right_after_number():
    assert part1("12*") == 12


def test_part2_single_gear():
    assert part2("..1*2") == 2


def test_part2_needs_exactly_two_numbers():
    assert part2("..1*.") == 0