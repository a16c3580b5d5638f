import pytest

from aoc2023.day02 import Game, Round, part1, part2

EXAMPLE = """Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green
Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue
Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red
Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red
Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green"""


def test_part1_example():
    assert part1(EXAMPLE) == 8


def test_part2_example():
    assert part2(EXAMPLE) == 2286


def test_game_parse():
    game = Game.parse("Game 7: 3 blue, 4 red; 2 green")
    assert game.id == 7
    assert game.rounds == (Round(red=4, blue=3), Round(green=2))


def test_game_parse_missing_colon():
    with pytest.raises(ValueError):
        Game.parse("Game 7 3 blue")


def test_game_parse_bad_id():
    with pytest.raises(ValueError):
        Game.parse("Game x: 3 blue")


def test_part1_skips_invalid_lines():
    assert part1("garbage\nGame 2: 1 red") == 2


def test_part1_repeated_color_in_round_adds_up():
    assert part1("Game 3: 7 red, 6 red") == 0


def test_part2_unknown_color():
    with pytest.raises(ValueError):
        part2("Game 1: 3 purple")