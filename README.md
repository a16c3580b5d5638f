# aoc2023

Solutions to the 2023 Advent of Code puzzles for days 1 to 7 and 9 to 16.
Each day lives in its own module (`aoc2023.day01`, `aoc2023.day02`, and so
on) and has a `part1` and a `part2` function. Both take the puzzle input as
text and return the answer as an integer.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Using the solutions

```python
from aoc2023 import day01, day15

example = """1abc2
pqr3stu8vwx
a1b2c3d4e5f
treb7uchet"""

print(day01.part1(example))   # 142
print(day15.part1("HASH"))    # 52
```

To solve your own puzzle input, read the file and pass its text:

```python
from pathlib import Path
from aoc2023 import day05

text = Path("day05_input.txt").read_text()
print(day05.part1(text), day05.part2(text))
```

Two days take an extra argument for a value the puzzle fixes. The default
is the puzzle's own value:

```python
from aoc2023 import day11, day14

day11.part2(text, 1_000_000)      # how many lines each empty row or column becomes
day14.part2(text, 1_000_000_000)  # number of spin cycles
```

Some days also expose their building blocks, for example
`day06.simulate_race` and `day06.count_ways`, `day09.extrapolate_next` and
`day09.extrapolate_previous`, `day10.trace_loop`,
`day12.count_arrangements` and `day12.unfold`, `day13.Mirror`,
`day14.Reflector`, `day15.hash_label` and `day16.energized`.

Malformed input raises `ValueError`.

## What the package does not do

- Day 8 is not solved. There is no module for it.
- There is no command-line program. The solutions are run from Python, as
  shown above. The package does not find, read or download puzzle inputs.