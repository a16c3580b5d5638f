"""Day 14: tilt the reflector dish and weigh its rounded rocks."""

from __future__ import annotations

from dataclasses import dataclass

_DEFAULT_CYCLES = 1_000_000_000

_ROUND = "O"
_EMPTY = "."


@dataclass
class Reflector:
    """The dish as rows of cells: 'O' rolls, '#' stays, '.' is empty."""

    rows: list[list[str]]

    @classmethod
    def parse(cls, text: str) -> Reflector:
        return cls([list(line.strip()) for line in text.strip().splitlines()])

    def __str__(self) -> str:
        return "\n".join("".join(row) for row in self.rows)

    def snapshot(self) -> tuple[str, ...]:
        """The current layout, hashable."""
        return tuple("".join(row) for row in self.rows)

    def tilt_north(self) -> None:
        """Roll every round rock as far north as it goes."""
        rows = self.rows
        for row, line in enumerate(rows):
            for col, cell in enumerate(line):
                if cell != _ROUND:
                    continue
                target = row
                while target > 0 and rows[target - 1][col] == _EMPTY:
                    target -= 1
                if target != row:
                    rows[row][col] = _EMPTY
                    rows[target][col] = _ROUND

    def _tilt_west(self) -> None:
        for line in self.rows:
            for col, cell in enumerate(line):
                if cell != _ROUND:
                    continue
                target = col
                while target > 0 and line[target - 1] == _EMPTY:
                    target -= 1
                if target != col:
                    line[col] = _EMPTY
                    line[target] = _ROUND

    def _tilt_south(self) -> None:
        rows = self.rows
        last = len(rows) - 1
        for row in reversed(range(len(rows))):
            for col, cell in enumerate(rows[row]):
                if cell != _ROUND:
                    continue
                target = row
                while target < last and rows[target + 1][col] == _EMPTY:
                    target += 1
                if target != row:
                    rows[row][col] = _EMPTY
                    rows[target][col] = _ROUND

    def _tilt_east(self) -> None:
        for line in self.rows:
            last = len(line) - 1
            for col in reversed(range(len(line))):
                if line[col] != _ROUND:
                    continue
                target = col
                while target < last and line[target + 1] == _EMPTY:
                    target += 1
                if target != col:
                    line[col] = _EMPTY
                    line[target] = _ROUND

    def cycle(self) -> None:
        """Tilt north, west, south and east, in that order."""
        self.tilt_north()
        self._tilt_west()
        self._tilt_south()
        self._tilt_east()

    def load(self) -> int:
        """Total load on the north support beams."""
        height = len(self.rows)
        return sum(
            (height - index) * line.count(_ROUND)
            for index, line in enumerate(self.rows)
        )


def part1(text: str) -> int:
    """Load after a single tilt to the north."""
    reflector = Reflector.parse(text)
    reflector.tilt_north()
    return reflector.load()


def part2(text: str, cycles: int = _DEFAULT_CYCLES) -> int:
    """Load after the given number of spin cycles."""
    reflector = Reflector.parse(text)
    seen: dict[tuple[str, ...], int] = {}
    history: list[tuple[str, ...]] = []

    state = reflector.snapshot()
    seen[state] = 0
    history.append(state)
    while True:
        reflector.cycle()
        state = reflector.snapshot()
        if state in seen:
            start, end = seen[state], len(history)
            break
        seen[state] = len(history)
        history.append(state)

    if cycles < start:
        raise ValueError(f"cycle count {cycles} is below the loop start {start}")
    remainder = (cycles - start) % (end - start)
    final = Reflector([list(line) for line in history[start + remainder]])
    return final.load()