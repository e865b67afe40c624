"""Command request data types for CLI."""

from dataclasses import dataclass
from typing import Literal, Optional


@dataclass(frozen=True)
class UploadCommand:
    """Upload a file (or a byte range of it) in chunks."""

    file_path: str
    url: Optional[str] = None
    file_range: Optional[tuple[int, int]] = None
    chunk_size: Optional[int] = None
    method: Optional[str] = None
    print_file_bytes: bool = False
    show_progress: bool = False
    debug: bool = False
    command: Literal["upload"] = "upload"


@dataclass(frozen=True)
class HelpCommand:
    """Show usage text."""

    command: Literal["help"] = "help"


@dataclass(frozen=True)
class VersionCommand:
    """Show program version."""

    command: Literal["version"] = "version"


CommandRequest = UploadCommand | HelpCommand | VersionCommand
