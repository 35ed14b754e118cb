from collections import Counter

import pytest

from puzzledays.day09 import (
    SPACE,
    Chunk,
    checksum,
    compact,
    expand,
    file_chunks,
    move_chunks,
    part1,
    part2,
)

EXAMPLE = "2333133121414131402"


def _blocks(pattern):
    return [int(c) if c.isdigit() else SPACE for c in pattern]


def test_expand_input():
    answer = [0, 0, -1, -1, -1, 1, 1, 1, 1, -1, -1, -1, -1, -1, 2]
    assert expand("23451") == answer


def test_compact():
    blocks = [0, 0, -1, -1, -1, 1, 1, 1, 1, -1, -1, -1, -1, -1, 2]
    assert compact(blocks) == _blocks("0021111........")


def test_compact_keeps_files():
    blocks = expand(EXAMPLE)
    compacted = compact(blocks)
    assert len(compacted) == len(blocks)
    files = Counter(v for v in blocks if v != SPACE)
    assert Counter(v for v in compacted if v != SPACE) == files
    first_space = compacted.index(SPACE)
    assert all(v == SPACE for v in compacted[first_space:])


def test_checksum_stops_at_space():
    assert checksum(_blocks("0021111........")) == checksum(_blocks("0021111"))


def test_expand_rejects_non_digits():
    with pytest.raises(ValueError):
        expand("12a4")


def test_file_chunks_highest_id_first():
    chunks = file_chunks("12345")
    assert chunks == [
        Chunk(file_id=2, count=5, index=10),
        Chunk(file_id=1, count=3, index=3),
        Chunk(file_id=0, count=1, index=0),
    ]


def test_move_chunks_only_moves_left():
    chunks = {c.file_id: c for c in file_chunks(EXAMPLE)}
    for moved in move_chunks(EXAMPLE, list(chunks.values())):
        original = chunks[moved.file_id]
        assert moved.index < original.index
        assert moved.count == original.count


def test_part1_example():
    assert part1(EXAMPLE) == 1928


def test_part2_example():
    assert part2(EXAMPLE) == 2858


def test_nothing_to_move_keeps_checksum():
    assert part1("10") == part2("10") == 0
    assert move_chunks("10", file_chunks("10")) == []