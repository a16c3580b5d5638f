"""Solutions to the 2023 Advent of Code puzzles for days 1 to 7 and 9 to 16."""

__version__ = "0.1.0"