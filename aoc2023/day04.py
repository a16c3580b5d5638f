"""Day 4: scratchcards and the cards they win."""

from __future__ import annotations

import re
from dataclasses import dataclass

_UINT = re.compile(r"\+?[0-9]+")


def _parse_uint(token: str) -> int:
    if not _UINT.fullmatch(token):
        raise ValueError(f"not a number: {token!r}")
    return int(token)


def _numbers(text: str) -> tuple[int, ...]:
    return tuple(_parse_uint(item.strip()) for item in text.split(" ") if item)


@dataclass(frozen=True)
class Scratchcard:
    """A card's id, its winning numbers and the numbers in hand."""

    id: int
    winning: tuple[int, ...]
    hand: tuple[int, ...]

    @classmethod
    def parse(cls, line: str) -> Scratchcard:
        metadata, sep, body = line.strip().partition(":")
        if not sep:
            raise ValueError("Invalid Game")
        _, sep, card_id = metadata.partition(" ")
        if not sep:
            raise ValueError("Invalid game id")
        win_text, sep, hand_text = body.partition("|")
        if not sep:
            raise ValueError("Invalid Game Line")
        winning = _numbers(win_text)
        hand = _numbers(hand_text)
        try:
            number = _parse_uint(card_id.strip())
        except ValueError:
            raise ValueError("Game Id not a number") from None
        return cls(number, winning, hand)

    def wins(self) -> int:
        """How many winning numbers appear in hand."""
        return sum(1 for number in self.winning if number in self.hand)


def _cards(text: str) -> list[Scratchcard]:
    return [Scratchcard.parse(line) for line in text.splitlines()]


def part1(text: str) -> int:
    """Total points: 1 for the first match, doubled for each further one."""
    return sum(
        2 ** (wins - 1) if wins else 0
        for wins in (card.wins() for card in _cards(text))
    )


def part2(text: str) -> int:
    """Total number of cards held once won copies are counted."""
    cards = _cards(text)
    if not cards:
        raise ValueError("no scratchcards")
    counts = [1] * len(cards)
    for index, card in enumerate(cards[:-1]):
        for offset in range(1, card.wins() + 1):
            counts[index + offset] += counts[index]
    return sum(counts)