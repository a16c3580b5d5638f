"""Day 3: part numbers and gear ratios in an engine schematic."""

_DIGITS = frozenset("0123456789")
_SYMBOLS = frozenset("@#$%&*/-+=")


def _grid(text: str) -> list[list[str]]:
    return [list(line) for line in text.splitlines()]


def _touches_symbol(grid: list[list[str]], row: int, col: int, length: int) -> bool:
    width = len(grid[row])
    col = col or width
    rows = range(max(row - 1, 0), min(len(grid), row + 2))
    cols = range(max(col - length - 1, 0), min(width, col + 1))
    return any(grid[r][c] in _SYMBOLS for r in rows for c in cols)


def part1(text: str) -> int:
    """Sum of all numbers adjacent to a symbol."""
    grid = _grid(text)
    total = 0
    buffer = ""
    for row, line in enumerate(grid):
        for col, char in enumerate(line):
            if char in _DIGITS:
                buffer += char
            elif buffer:
                if _touches_symbol(grid, row, col, len(buffer)):
                    total += int(buffer)
                buffer = ""
    return total


def _full_number(line: list[str], pos: int) -> int:
    right = pos
    while right < len(line) and line[right] in _DIGITS:
        right += 1
    digits = "".join(line[pos:right])
    left = max(pos - 1, 0)
    while line[left] in _DIGITS:
        digits = line[left] + digits
        if left == 0:
            break
        left -= 1
    return int(digits)


def _numbers_around(grid: list[list[str]], row: int, col: int) -> list[int]:
    width = len(grid[row])
    col = col or width
    col_start = max(col - 1, 0)
    col_end = min(width, col + 2)
    numbers = []
    for r in range(max(row - 1, 0), min(len(grid), row + 2)):
        line = grid[r]
        for c in range(col_start, col_end):
            if line[c] in _DIGITS and (
                c == len(line) - 1 or c == col_end - 1 or line[c + 1] not in _DIGITS
            ):
                numbers.append(_full_number(line, c))
    return numbers


def part2(text: str) -> int:
    """Sum of the products of numbers around '*' that touch exactly two."""
    grid = _grid(text)
    total = 0
    for row, line in enumerate(grid):
        for col, char in enumerate(line):
            if char == "*":
                numbers = _numbers_around(grid, row, col)
                if len(numbers) == 2:
                    total += numbers[0] * numbers[1]
    return total