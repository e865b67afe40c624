"""Reads planned chunks out of a seekable input source."""

import io
import os
from typing import BinaryIO

from common.logging_config import get_logger
from uploader.exceptions import SourceIoError
from uploader.models import ChunkBounds

logger = get_logger(__name__)


def seek_to_start(source: BinaryIO, offset: int) -> None:
    """
    Position the source at an absolute offset before the first chunk.

    Raises:
        SourceIoError: If the seek fails
    """
    try:
        source.seek(offset, io.SEEK_SET)
    except (OSError, ValueError) as e:
        raise SourceIoError(f"Error reading file: {e}") from e
    logger.debug(f"Source positioned at offset {offset}")


def read_chunk(source: BinaryIO, bounds: ChunkBounds) -> tuple[bytes, int]:
    """
    Read one chunk from the current source position.

    The returned payload is always bounds.length bytes; when the source
    ends early the missing tail is zero-filled.

    Args:
        source: Source already positioned at bounds.start
        bounds: Planned chunk

    Returns:
        Tuple of (payload, bytes_read)

    Raises:
        SourceIoError: If the read fails
    """
    try:
        data = source.read(bounds.length) or b''
    except (OSError, ValueError) as e:
        raise SourceIoError(f"Error reading file: {e}") from e

    n = len(data)
    if n < bounds.length:
        data += bytes(bounds.length - n)
    return data, n


def source_length(source: BinaryIO) -> int:
    """
    Total length of the source in bytes.

    Uses the file descriptor when there is one, otherwise seeks to the end
    and restores the previous position.

    Raises:
        SourceIoError: If the length cannot be determined
    """
    try:
        try:
            return os.fstat(source.fileno()).st_size
        except (AttributeError, io.UnsupportedOperation):
            position = source.tell()
            size = source.seek(0, io.SEEK_END)
            source.seek(position, io.SEEK_SET)
            return size
    except (OSError, ValueError) as e:
        raise SourceIoError(f"Error reading file: {e}") from e
