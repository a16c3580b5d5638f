import pytest

from aoc2023.day12 import count_arrangements, part1, part2, unfold

EXAMPLE = """???.### 1,1,3
.??..??...?##. 1,1,3
?#?#?#?#?#?#?#? 1,3,1,6
????.#...#... 4,1,1
????.######..#####. 1,6,5
?###???????? 3,2,1"""


def test_part1_example():
    assert part1(EXAMPLE) == 21


def test_part2_example():
    assert part2(EXAMPLE) == 525152


@pytest.mark.parametrize(
    ("record", "groups", "expected"),
    [
        ("???.###", [1, 1, 3], 1),
        (".??..??...?##.", [1, 1, 3], 4),
        ("?#?#?#?#?#?#?#?", [1, 3, 1, 6], 1),
        ("????.#...#...", [4, 1, 1], 1),
        ("????.######..#####.", [1, 6, 5], 4),
        ("?###????????", [3, 2, 1], 10),
    ],
)
def test_count_arrangements(record, groups, expected):
    assert count_arrangements(record, groups) == expected


def test_count_with_no_groups():
    assert count_arrangements("??.", []) == 1
    assert count_arrangements("?#.", []) == 0


def test_unfold_shape():
    assert unfold(".#", [1], 5) == (".#?.#?.#?.#?.#", [1, 1, 1, 1, 1])


def test_unfolded_counts():
    assert count_arrangements(*unfold(".??..??...?##.", [1, 1, 3])) == 16384
    assert count_arrangements(*unfold("???.###", [1, 1, 3])) == 1


def test_unfold_rejects_zero():
    with pytest.raises(ValueError):
        unfold("?", [1], 0)


def test_bad_groups_rejected():
    with pytest.raises(ValueError):
        part1("??? a,b")