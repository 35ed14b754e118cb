"""Simulate a robot pushing boxes around a warehouse."""

_DIRECTIONS = {"^": (0, -1), "v": (0, 1), ">": (1, 0), "<": (-1, 0)}
_WIDEN = {".": "..", "#": "##", "O": "[]", "@": "@."}


def direction_of(symbol):
    """The (x, y) step for a move symbol."""
    try:
        return _DIRECTIONS[symbol]
    except KeyError:
        raise ValueError(f"unknown direction {symbol!r}") from None


def _split(text):
    if "\n\n" not in text:
        raise ValueError("expected a map and moves separated by a blank line")
    grid, moves = text.split("\n\n", 1)
    return grid.splitlines(), [direction_of(c) for c in moves.replace("\n", "")]


def _robot(grid):
    start = (0, 0)
    for y, row in enumerate(grid):
        for x, char in enumerate(row):
            if char == "@":
                start = (x, y)
    return start


def part1(text):
    """Sum of box GPS coordinates after all moves."""
    lines, moves = _split(text)
    grid = {(x, y): c for y, line in enumerate(lines) for x, c in enumerate(line)}
    current = _robot(lines)
    for dx, dy in moves:
        nxt = (current[0] + dx, current[1] + dy)
        while grid.get(nxt) == "O":
            nxt = (nxt[0] + dx, nxt[1] + dy)
        if grid.get(nxt) != ".":
            continue
        while nxt != current:
            previous = (nxt[0] - dx, nxt[1] - dy)
            grid[nxt] = grid[previous]
            nxt = previous
        grid[current] = "."
        current = (current[0] + dx, current[1] + dy)
    return sum(100 * y + x for (x, y), c in grid.items() if c == "O")


def _pushed(grid, position, direction):
    dx, dy = direction
    stack = [position]
    visited = {position}
    while stack:
        x, y = stack.pop()
        nxt = (x + dx, y + dy)
        if nxt in visited:
            continue
        char = grid[nxt[1]][nxt[0]]
        if char == ".":
            continue
        if char not in "[]":
            return None
        stack.append(nxt)
        visited.add(nxt)
        if dy != 0:
            partner = (nxt[0] - 1 if char == "]" else nxt[0] + 1, nxt[1])
            stack.append(partner)
            visited.add(partner)
    return visited


def part2(text):
    """Sum of wide-box GPS coordinates after all moves on the widened map."""
    lines, moves = _split(text)
    try:
        grid = [list("".join(_WIDEN[c] for c in line)) for line in lines]
    except KeyError as error:
        raise ValueError(f"unknown map character {error.args[0]!r}") from None
    current = _robot(grid)
    for dx, dy in moves:
        moved = _pushed(grid, current, (dx, dy))
        if moved is None:
            continue
        saved = {(x, y): grid[y][x] for x, y in moved}
        for x, y in moved:
            grid[y][x] = "."
        for (x, y), char in saved.items():
            grid[y + dy][x + dx] = char
        current = (current[0] + dx, current[1] + dy)
    return sum(100 * y + x for y, row in enumerate(grid)
               for x, c in enumerate(row) if c == "[")