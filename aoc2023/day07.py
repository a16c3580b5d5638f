"""Day 7: rank Camel Cards hands and total the winnings."""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass
from enum import IntEnum

_UINT = re.compile(r"\+?[0-9]+")

_ORDER = "23456789TJQKA"
_JOKER_ORDER = "J23456789TQKA"


class HandStrength(IntEnum):
    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIRS = 2
    THREE_OF_KIND = 3
    FULL_HOUSE = 4
    FOUR_OF_KIND = 5
    FIVE_OF_KIND = 6


_PATTERNS = {
    (1, 1, 1, 1, 1): HandStrength.HIGH_CARD,
    (2, 1, 1, 1): HandStrength.PAIR,
    (2, 2, 1): HandStrength.TWO_PAIRS,
    (3, 1, 1): HandStrength.THREE_OF_KIND,
    (3, 2): HandStrength.FULL_HOUSE,
    (4, 1): HandStrength.FOUR_OF_KIND,
    (5,): HandStrength.FIVE_OF_KIND,
}


@dataclass(frozen=True)
class Hand:
    """Five cards, their ranks, the bid and the hand's type."""

    cards: str
    ranks: tuple[int, ...]
    bid: int
    strength: HandStrength

    @classmethod
    def parse(cls, line: str, jokers: bool = False) -> Hand:
        """Read 'CARDS BID'; with jokers, 'J' is the weakest wild card."""
        cards_text, sep, bid_text = line.strip().partition(" ")
        if not sep:
            raise ValueError(f"invalid hand line: {line!r}")
        cards = cards_text.strip()
        order = _JOKER_ORDER if jokers else _ORDER
        unknown = [card for card in cards if card not in order]
        if unknown:
            raise ValueError(f"unknown card: {unknown[0]!r}")
        if len(cards) != 5:
            raise ValueError(f"a hand holds five cards, got {cards!r}")
        if not _UINT.fullmatch(bid_text):
            raise ValueError(f"bid is not a number: {bid_text!r}")

        counts = Counter(cards)
        wild = counts.pop("J", 0) if jokers else 0
        tally = sorted(counts.values(), reverse=True)
        if tally:
            tally[0] += wild
        else:
            tally = [wild]

        return cls(
            cards=cards,
            ranks=tuple(order.index(card) for card in cards),
            bid=int(bid_text),
            strength=_PATTERNS[tuple(tally)],
        )

    @property
    def sort_key(self) -> tuple[HandStrength, tuple[int, ...]]:
        return self.strength, self.ranks


def _winnings(text: str, jokers: bool) -> int:
    hands = [Hand.parse(line, jokers) for line in text.strip().splitlines()]
    hands.sort(key=lambda hand: hand.sort_key)
    return sum(rank * hand.bid for rank, hand in enumerate(hands, start=1))


def part1(text: str) -> int:
    """Total winnings with 'J' as the jack."""
    return _winnings(text, jokers=False)


def part2(text: str) -> int:
    """Total winnings with 'J' as a joker."""
    return _winnings(text, jokers=True)