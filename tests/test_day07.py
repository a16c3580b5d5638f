import pytest

from aoc2023.day07 import Hand, HandStrength, part1, part2

EXAMPLE = """32T3K 765
    T55J5 684
    KK677 28
    KTJJT 220
    QQQJA 483"""


def test_part1_example():
    assert part1(EXAMPLE) == 6440


def test_part2_example():
    assert part2(EXAMPLE) == 5905


@pytest.mark.parametrize(
    "line, strength",
    [
        ("23456 1", HandStrength.HIGH_CARD),
        ("32T3K 1", HandStrength.PAIR),
        ("KK677 1", HandStrength.TWO_PAIRS),
        ("T55J5 1", HandStrength.THREE_OF_KIND),
        ("33322 1", HandStrength.FULL_HOUSE),
        ("AAAA2 1", HandStrength.FOUR_OF_KIND),
        ("JJJJJ 1", HandStrength.FIVE_OF_KIND),
    ],
)
def test_strength_without_jokers(line, strength):
    assert Hand.parse(line).strength is strength


@pytest.mark.parametrize(
    "line, strength",
    [
        ("T55J5 1", HandStrength.FOUR_OF_KIND),
        ("KTJJT 1", HandStrength.FOUR_OF_KIND),
        ("QQQJA 1", HandStrength.FOUR_OF_KIND),
        ("JJJJJ 1", HandStrength.FIVE_OF_KIND),
        ("2345J 1", HandStrength.PAIR),
    ],
)
def test_strength_with_jokers(line, strength):
    assert Hand.parse(line, jokers=True).strength is strength


def test_joker_is_weakest_card():
    hand = Hand.parse("J2AKQ 7", jokers=True)
    assert hand.ranks[0] == 0
    assert hand.bid == 7
    assert Hand.parse("J2AKQ 7").ranks[0] > hand.ranks[1]


def test_unknown_card_raises():
    with pytest.raises(ValueError):
        Hand.parse("1234X 5")


def test_wrong_card_count_raises():
    with pytest.raises(ValueError):
        Hand.parse("2345 5")


def test_bad_bid_raises():
    with pytest.raises(ValueError):
        Hand.parse("23456 abc")