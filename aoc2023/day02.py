"""Day 2: games of coloured cubes drawn from a bag."""

from __future__ import annotations

import re
from dataclasses import dataclass

_UINT = re.compile(r"\+?[0-9]+")

_LIMITS = {"red": 12, "green": 13, "blue": 14}


def _parse_uint(token: str) -> int:
    if not _UINT.fullmatch(token):
        raise ValueError(f"not a number: {token!r}")
    return int(token)


@dataclass(frozen=True)
class Round:
    """Cubes shown in one round of a game."""

    red: int = 0
    green: int = 0
    blue: int = 0

    def __add__(self, other: Round) -> Round:
        return Round(
            self.red + other.red,
            self.green + other.green,
            self.blue + other.blue,
        )

    @classmethod
    def parse(cls, text: str) -> Round:
        total = cls()
        for hand in text.split(","):
            amount, sep, color = hand.strip().partition(" ")
            if not sep or color not in _LIMITS:
                continue
            try:
                count = _parse_uint(amount)
            except ValueError:
                continue
            total = total + cls(**{color: count})
        return total


@dataclass(frozen=True)
class Game:
    """A game id and the rounds played in it."""

    id: int
    rounds: tuple[Round, ...]

    @classmethod
    def parse(cls, line: str) -> Game:
        metadata, sep, body = line.strip().partition(":")
        if not sep:
            raise ValueError("Invalid game")
        _, sep, game_id = metadata.partition(" ")
        if not sep:
            raise ValueError("Invalid game id")
        rounds = tuple(Round.parse(round_text) for round_text in body.split(";"))
        try:
            number = _parse_uint(game_id)
        except ValueError:
            raise ValueError("Game Id not a number") from None
        return cls(number, rounds)

    def is_possible(self) -> bool:
        return all(
            r.red <= _LIMITS["red"]
            and r.green <= _LIMITS["green"]
            and r.blue <= _LIMITS["blue"]
            for r in self.rounds
        )


def _parse_or_none(line: str) -> Game | None:
    try:
        return Game.parse(line)
    except ValueError:
        return None


def part1(text: str) -> int:
    """Sum of the ids of games possible with 12 red, 13 green, 14 blue cubes."""
    games = (_parse_or_none(line) for line in text.splitlines())
    return sum(game.id for game in games if game is not None and game.is_possible())


def _minimum_set(body: str) -> dict[str, int]:
    fewest = dict.fromkeys(_LIMITS, 0)
    for round_text in body.split(";"):
        for hand in round_text.split(","):
            parts = hand.split()
            if len(parts) < 2:
                raise ValueError(f"invalid hand: {hand!r}")
            amount = _parse_uint(parts[0])
            color = parts[1]
            if color not in fewest:
                raise ValueError(f"unknown color: {color}")
            fewest[color] = max(fewest[color], amount)
    return fewest


def part2(text: str) -> int:
    """Sum of the powers of the smallest cube sets each game needs."""
    total = 0
    for line in text.splitlines():
        _, sep, body = line.strip().partition(":")
        if not sep:
            raise ValueError(f"missing ':' in line: {line!r}")
        fewest = _minimum_set(body)
        total += fewest["red"] * fewest["green"] * fewest["blue"]
    return total