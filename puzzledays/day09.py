"""Compact a disk map block by block or file by file and checksum it."""

from dataclasses import dataclass, replace

SPACE = -1


@dataclass(frozen=True)
class Chunk:
    """A whole file: its id, block count and first block index."""

    file_id: int
    count: int
    index: int


def _digits(text):
    stripped = text.strip()
    if not stripped.isdigit():
        raise ValueError("a disk map must consist of digits only")
    return [int(char) for char in stripped]


def expand(text):
    """Expand a disk map into blocks: file ids, with SPACE for free blocks."""
    blocks = []
    for idx, amount in enumerate(_digits(text)):
        value = idx // 2 if idx % 2 == 0 else SPACE
        blocks.extend([value] * amount)
    return blocks


def compact(blocks):
    """Move file blocks from the end into the leftmost free blocks."""
    empty = [idx for idx, value in enumerate(blocks) if value == SPACE]
    filled = [idx for idx, value in enumerate(blocks) if value != SPACE]
    plan = dict(zip(empty, reversed(filled)))
    return [
        blocks[plan.get(idx, idx)] if idx < len(filled) else SPACE
        for idx in range(len(blocks))
    ]


def checksum(blocks):
    """Sum of position times file id up to the first free block."""
    total = 0
    for idx, value in enumerate(blocks):
        if value == SPACE:
            break
        total += idx * value
    return total


def file_chunks(text):
    """The files of a disk map, from the highest file id down."""
    digits = _digits(text)
    position = sum(digits)
    chunks = []
    for idx, amount in reversed(list(enumerate(digits))):
        position -= amount
        if idx % 2 == 0:
            chunks.append(Chunk(file_id=idx // 2, count=amount, index=position))
    return chunks


def _free_spans(digits):
    spans = []
    position = 0
    for idx, amount in enumerate(digits):
        if idx % 2:
            spans.append([position, amount])
        position += amount
    return spans


def move_chunks(text, chunks):
    """Move each file once into the leftmost free span that fits before it."""
    spans = _free_spans(_digits(text))
    moved = []
    for chunk in chunks:
        span = next(
            (s for s in spans if chunk.count <= s[1] and s[0] < chunk.index),
            None,
        )
        if span is None:
            continue
        moved.append(replace(chunk, index=span[0]))
        span[0] += chunk.count
        span[1] -= chunk.count
    return moved


def _chunk_checksum(chunk):
    return sum(idx * chunk.file_id for idx in range(chunk.index, chunk.index + chunk.count))


def part1(text):
    return checksum(compact(expand(text)))


def part2(text):
    chunks = file_chunks(text)
    moved = move_chunks(text, chunks)
    moved_ids = {chunk.file_id for chunk in moved}
    static = sum(_chunk_checksum(c) for c in chunks if c.file_id not in moved_ids)
    return static + sum(_chunk_checksum(c) for c in moved)