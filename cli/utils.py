"""Utility functions for CLI output."""

import sys
from typing import Optional, TextIO

from cli.constants import GREEN, RESET
from uploader.models import ChunkResult


class ProgressPrinter:
    """Chunk callback that displays upload progress on one terminal line."""

    def __init__(self, total_bytes: int, total_chunks: int, filename: str, stream: Optional[TextIO] = None):
        """
        Initialize the progress printer.

        Args:
            total_bytes: Length of the range being uploaded
            total_chunks: Number of planned chunks
            filename: Display name for the file
            stream: Where to write progress (current sys.stdout when None)
        """
        self.total_bytes = total_bytes
        self.total_chunks = total_chunks
        self.filename = filename
        self._stream = stream
        self._uploaded = 0
        self._chunks = 0
        self._started = False

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def __call__(self, result: ChunkResult) -> None:
        """Record an accepted chunk and redraw the progress line."""
        self._started = True
        self._chunks += 1
        self._uploaded += result.bytes_read
        progress = (self._uploaded / self.total_bytes) * 100 if self.total_bytes else 100.0
        self.stream.write(
            f"\rUploading {self.filename}: chunk {self._chunks}/{self.total_chunks} "
            f"{format_file_size(self._uploaded)} / {format_file_size(self.total_bytes)} "
            f"({GREEN}{progress:.1f}%{RESET})"
        )
        self.stream.flush()

    def finish(self) -> None:
        """Finalize progress display with newline."""
        if self._started:
            self.stream.write('\n')
            self.stream.flush()


def format_file_size(size_bytes: int) -> str:
    """
    Format file size in bytes to human-readable format with appropriate unit.

    Uses binary units (1024-based) and automatically selects the most
    appropriate unit (B, KiB, MiB, GiB, TiB).

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted string with size and unit (e.g., "1.50 MiB", "512 B")
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"

    units = ['KiB', 'MiB', 'GiB', 'TiB']
    size = size_bytes / 1024.0

    for unit in units:
        if size < 1024.0:
            return f"{size:.2f} {unit}"
        size /= 1024.0

    return f"{size:.2f} PiB"
