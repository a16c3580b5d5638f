"""Day 6: toy boat races and how many ways each can be won."""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import reduce
from operator import mul

_UINT = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class Race:
    """A race's duration and the record distance to beat."""

    time: int
    distance: int


def simulate_race(time_hold: int, time_total: int) -> int:
    """Distance travelled when the button is held for time_hold."""
    if time_hold > time_total:
        raise ValueError("hold time exceeds race time")
    return time_total * time_hold - time_hold * time_hold


def count_ways(race: Race, strict_top: bool = False) -> int:
    """Count winning hold times.

    The search walks in from both ends; with strict_top the top end stops only
    on a distance strictly below the record, otherwise also on one equal to it.
    """
    half = race.time // 2
    count = 0
    while True:
        if count > half:
            raise ValueError(f"no bound found for race {race}")
        from_bottom = simulate_race(count, race.time) > race.distance
        top = simulate_race(half - count, race.time)
        from_top = top < race.distance if strict_top else top <= race.distance
        if from_top or from_bottom:
            break
        count += 1

    ways = 2 * (half - count + 1) if from_bottom else 2 * count
    if race.time % 2 == 0:
        ways -= 1
    if ways < 0:
        raise ValueError(f"no winning hold time for race {race}")
    return ways


def _field(line: str) -> str:
    _, sep, rest = line.partition(":")
    if not sep:
        raise ValueError(f"missing ':' in line: {line!r}")
    return rest


def _lines(text: str) -> tuple[str, str]:
    lines = text.strip().splitlines()
    if len(lines) < 2:
        raise ValueError("expected a time line and a distance line")
    return lines[0], lines[1]


def _numbers(line: str) -> list[int]:
    return [int(token) for token in _field(line).split(" ") if _UINT.fullmatch(token)]


def _joined_number(line: str) -> int:
    joined = "".join(token for token in _field(line).split(" ") if token)
    if not _UINT.fullmatch(joined):
        raise ValueError(f"not a number: {joined!r}")
    return int(joined)


def part1(text: str) -> int:
    """Product of the number of ways to win each race."""
    time_line, distance_line = _lines(text)
    races = (Race(t, d) for t, d in zip(_numbers(time_line), _numbers(distance_line)))
    return reduce(mul, (count_ways(race) for race in races), 1)


def part2(text: str) -> int:
    """Ways to win the single race read by ignoring the spaces."""
    time_line, distance_line = _lines(text)
    race = Race(_joined_number(time_line), _joined_number(distance_line))
    return count_ways(race, strict_top=True)