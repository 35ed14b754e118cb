"""Find XMAS words and crossed MAS shapes in a letter grid."""

_XMAS_DIRECTIONS = [
    (0, 1),
    (0, -1),
    (1, 1),
    (1, -1),
    (-1, 1),
    (-1, -1),
    (1, 0),
    (-1, 0),
]

_X_DIRECTIONS = [
    ((-1, -1), (1, 1)),
    ((-1, 1), (1, -1)),
    ((1, 1), (-1, -1)),
    ((1, -1), (-1, 1)),
]


def position_map(text):
    """Map (x, y) positions to letters; x is the column, y the row."""
    return {
        (x, y): char
        for y, line in enumerate(text.splitlines())
        for x, char in enumerate(line)
    }


def _spells(positions, start, step, word):
    x, y = start
    dx, dy = step
    return all(
        positions.get((x + dx * k, y + dy * k)) == letter
        for k, letter in enumerate(word, start=1)
    )


def part1(text):
    """Count XMAS occurrences in all eight directions."""
    positions = position_map(text)
    return sum(
        _spells(positions, pos, step, "MAS")
        for pos, char in positions.items()
        if char == "X"
        for step in _XMAS_DIRECTIONS
    )


def part2(text):
    """Count A cells that sit at the centre of two diagonal MAS words."""
    positions = position_map(text)
    count = 0
    for (x, y), char in positions.items():
        if char != "A":
            continue
        matches = sum(
            positions.get((x + m[0], y + m[1])) == "M"
            and positions.get((x + s[0], y + s[1])) == "S"
            for m, s in _X_DIRECTIONS
        )
        if matches == 2:
            count += 1
    return count