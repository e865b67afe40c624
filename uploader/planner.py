"""Chunk boundary planning for a byte range."""

from typing import Iterator

from uploader.models import ChunkBounds


def plan_chunks(start: int, end: int, chunk_size: int) -> Iterator[ChunkBounds]:
    """
    Lazily partition [start, end) into contiguous chunks.

    Every chunk is chunk_size bytes long except possibly the last one,
    which is clipped to end. Yields nothing when start == end.

    Args:
        start: First byte offset of the range
        end: Offset one past the last byte of the range
        chunk_size: Maximum chunk length in bytes (> 0)

    Yields:
        ChunkBounds in ascending order
    """
    cursor = start
    while cursor < end:
        boundary = min(cursor + chunk_size, end)
        yield ChunkBounds(start=cursor, end=boundary)
        cursor += chunk_size


def count_chunks(start: int, end: int, chunk_size: int) -> int:
    """Number of chunks plan_chunks will yield for the same arguments."""
    if end <= start:
        return 0
    return -(-(end - start) // chunk_size)


def format_content_range(bounds: ChunkBounds, total: int) -> str:
    """
    Build the Content-Range header value for a chunk.

    The end offset is exclusive and total is the configured range end,
    not the size of the file.
    """
    return f"bytes {bounds.start}-{bounds.end}/{total}"
