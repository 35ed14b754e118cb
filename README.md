# puzzledays

Solvers for a series of daily programming puzzles: list distances, report
safety, word searches, page ordering, guard patrols, bridge equations,
antennas, disk compaction, trail maps, stones, garden regions, claw
machines, robots, warehouses, reindeer mazes, a small three-bit computer,
falling bytes, towel patterns and race-track cheats.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

Each day is a module: `puzzledays.day01`, `puzzledays.day02` and
`puzzledays.day04` through `puzzledays.day20`. From `day02` on, every
module has `part1` and `part2` functions that take the puzzle input as text
and return the answer:

```python
from puzzledays import day02

reports = "7 6 4 2 1\n1 2 7 8 9\n9 7 6 2 1\n1 3 2 4 5\n8 6 4 4 1\n1 3 6 7 9"
print(day02.part1(reports))  # 2
print(day02.part2(reports))  # 4
```

`day01` works on the two parsed lists instead:

```python
from puzzledays import day01

left, right = day01.parse_location_lists("3 4\n4 3\n2 5\n1 3\n3 9\n3 3")
print(day01.distance_score(left, right))    # 11
print(day01.similarity_score(left, right))  # 31
```

Some days take more than the input text:

- `day13.part2(text, offset)` moves every prize by `offset`, which defaults
  to 10000000000000.
- `day14.part1(text, width, height)` and `day14.part2(text, width, height)`
  take the size of the room, 101 by 103 unless given.
- `day18.part1(text, size, simulate_count)` and
  `day18.part2(text, size, simulate_count)` take the size of the memory
  space and how many bytes have fallen.
- `day20.part1(text, threshold)` and `day20.part2(text, threshold)` take
  the least number of picoseconds a cheat must save to be counted.

`day17.part1` returns the program's output as comma-separated text, and
`day17.part2` returns the register A value, or `None` when there is none.
`day18.part2` returns the blocking byte as `"x,y"`.

Helpers used along the way are public too, for instance
`day11.count_after_blinks(stones, blinks)`, `day17.parse_computer(text)`,
`day19.count_ways(design, towels)` and `day20.parse_racetrack(text)`.

Malformed input raises `ValueError`.

## What it does not do

There is no command-line program: the package is used from Python only, and
reading an input file is left to the caller. It has no solver for the third
puzzle of the series (instruction scanning).