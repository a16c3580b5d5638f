"""Day 1: recover calibration values from lines of text."""

from collections.abc import Iterable

_DIGITS = frozenset("0123456789")

# Overlapping spellings come first so that both of their digits survive.
_SPELLED = (
    ("zerone", "01"),
    ("oneight", "18"),
    ("twone", "21"),
    ("threeight", "38"),
    ("fiveight", "58"),
    ("eightwo", "82"),
    ("eighthree", "83"),
    ("nineight", "98"),
    ("zero", "0"),
    ("one", "1"),
    ("two", "2"),
    ("three", "3"),
    ("four", "4"),
    ("five", "5"),
    ("six", "6"),
    ("seven", "7"),
    ("eight", "8"),
    ("nine", "9"),
)


def _calibration(line: str) -> int | None:
    digits = [char for char in line if char in _DIGITS]
    if not digits:
        return None
    return int(digits[0] + digits[-1])


def _total(lines: Iterable[str]) -> int:
    return sum(value for value in map(_calibration, lines) if value is not None)


def _spell_out(line: str) -> str:
    for word, digits in _SPELLED:
        line = line.replace(word, digits)
    return line


def part1(text: str) -> int:
    """Sum of the first and last digit of every line that has digits."""
    return _total(text.splitlines())


def part2(text: str) -> int:
    """Like part1, but spelled-out digits count as digits too."""
    return _total(_spell_out(line) for line in text.splitlines())