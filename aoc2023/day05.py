"""Day 5: follow seeds through the almanac's chain of mappings."""

from __future__ import annotations

import re
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

_UINT = re.compile(r"\+?[0-9]+")

_HEADERS = (
    "seed-to-soil map:",
    "soil-to-fertilizer map:",
    "fertilizer-to-water map:",
    "water-to-light map:",
    "light-to-temperature map:",
    "temperature-to-humidity map:",
    "humidity-to-location map:",
)


def _parse_uint(token: str) -> int:
    if not _UINT.fullmatch(token):
        raise ValueError(f"not a number: {token!r}")
    return int(token)


@dataclass(frozen=True)
class Mapping:
    """One line of a map: a source range shifted onto a destination range."""

    source_start: int
    dest_start: int
    length: int

    @classmethod
    def parse(cls, line: str) -> Mapping:
        values = line.strip().split(" ")
        if len(values) < 3:
            raise ValueError(f"invalid mapping line: {line!r}")
        return cls(
            source_start=_parse_uint(values[1].strip()),
            dest_start=_parse_uint(values[0].strip()),
            length=_parse_uint(values[2].strip()),
        )

    @property
    def source_end(self) -> int:
        return self.source_start + self.length

    def __contains__(self, n: int) -> bool:
        return self.source_start <= n < self.source_end

    def convert(self, n: int) -> int:
        """Position of n once shifted by this mapping."""
        return max(n + self.dest_start - self.source_start, 0)


def _split_section(lines: Sequence[str], header: str) -> tuple[list[str], Sequence[str]]:
    """Non-empty lines before header, and everything after it."""
    taken: list[str] = []
    for index, line in enumerate(lines):
        if line == "":
            continue
        if line == header:
            return taken, lines[index + 1 :]
        taken.append(line)
    return taken, lines[1:]


@dataclass(frozen=True)
class Almanac:
    """The seed numbers and the seven mapping stages, in order."""

    seeds: tuple[int, ...]
    stages: tuple[tuple[Mapping, ...], ...]

    @classmethod
    def parse(cls, text: str) -> Almanac:
        lines = text.splitlines()
        seed_lines, remaining = _split_section(lines, _HEADERS[0])
        if not seed_lines:
            raise ValueError("missing seeds line")
        _, sep, numbers = seed_lines[0].strip().partition(":")
        if not sep:
            raise ValueError("missing ':' in seeds line")
        seeds = tuple(_parse_uint(n.strip()) for n in numbers.strip().split(" "))

        stages: list[tuple[Mapping, ...]] = []
        for header in _HEADERS[1:]:
            section, remaining = _split_section(remaining, header)
            stages.append(tuple(Mapping.parse(line) for line in section))
        stages.append(tuple(Mapping.parse(line) for line in remaining))
        return cls(seeds, tuple(stages))

    def seed_ranges(self) -> list[tuple[int, int]]:
        """Seeds read as (start, length) pairs, as half-open ranges."""
        if len(self.seeds) % 2:
            raise ValueError("seed ranges need an even number of values")
        pairs = zip(self.seeds[::2], self.seeds[1::2])
        return [(start, start + length) for start, length in pairs]


def _convert(position: int, mappings: Iterable[Mapping]) -> int:
    for mapping in mappings:
        if position in mapping:
            return mapping.convert(position)
    return position


def _convert_ranges(
    ranges: Iterable[tuple[int, int]], mappings: Sequence[Mapping]
) -> list[tuple[int, int]]:
    pending = deque(ranges)
    done: list[tuple[int, int]] = []
    while pending:
        start, end = pending.popleft()
        last = end - 1
        converted = (start, end)
        for mapping in mappings:
            start_in = start in mapping
            last_in = last in mapping
            start_dist = max(start - mapping.source_start, 0)
            end_dist = max(last - mapping.source_start, 0)
            if start_in and last_in:
                converted = (mapping.dest_start + start_dist, mapping.dest_start + end_dist)
                break
            if start_in:
                converted = (mapping.dest_start + start_dist, mapping.dest_start + mapping.length)
                pending.appendleft((mapping.source_end, last + 1))
                break
            if last_in:
                converted = (mapping.dest_start, mapping.dest_start + end_dist)
                pending.appendleft((start, mapping.source_start))
                break
        done.append(converted)
    return done


def part1(text: str) -> int:
    """Lowest location reached by any of the listed seeds."""
    almanac = Almanac.parse(text)
    positions = list(almanac.seeds)
    for stage in almanac.stages:
        positions = [_convert(position, stage) for position in positions]
    if not positions:
        raise ValueError("no seeds")
    return min(positions)


def part2(text: str) -> int:
    """Lowest location reached when the seeds describe ranges."""
    almanac = Almanac.parse(text)
    ranges = almanac.seed_ranges()
    for stage in almanac.stages:
        ranges = _convert_ranges(ranges, stage)
    if not ranges:
        raise ValueError("no seeds")
    return min(start for start, _ in ranges)