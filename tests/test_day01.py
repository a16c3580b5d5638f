from aoc2023.day01 import part1, part2


def test_part1_example():
    text = "1abc2\npqr3stu8vwx\na1b2c3d4e5f\ntreb7uchet"
    assert part1(text) == 142


def test_part2_example():
    text = (
        "two1nine\neightwothree\nabcone2threexyz\nxtwone3four\n"
        "4nineeightseven2\nzoneight234\n7pqrstsixteen"
    )
    assert part2(text) == 281


def test_part1_skips_lines_without_digits():
    assert part1("abc\nx5y\n") == 55


def test_part1_ignores_spelled_digits():
    assert part1("one2three") == 22


def test_part2_overlapping_words():
    assert part2("eightwo") == 82


def test_empty_input():
    assert part1("") == 0
    assert part2("") == 0