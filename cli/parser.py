"""Command-line argument parser."""

from typing import Optional

from cli.models import CommandRequest, HelpCommand, UploadCommand, VersionCommand
from uploader.models import HttpMethod


class ParseError(Exception):
    """Raised when command-line parsing fails."""

    pass


class ValidationError(Exception):
    """Raised when parsed options do not describe a valid upload."""

    pass


def parse_args(argv: list[str]) -> CommandRequest:
    """Parse command-line arguments into a CommandRequest object.

    Arguments are processed left to right; a help or version flag returns
    immediately and ignores anything after it.

    Args:
        argv: Arguments without the program name

    Returns:
        UploadCommand, HelpCommand or VersionCommand

    Raises:
        ParseError: If an argument is unknown, malformed or missing its value
    """
    file_path: Optional[str] = None
    url: Optional[str] = None
    file_range: Optional[tuple[int, int]] = None
    chunk_size: Optional[int] = None
    method: Optional[str] = None
    print_file_bytes = False
    show_progress = False
    debug = False

    i = 0
    while i < len(argv):
        arg = argv[i]

        if arg in ("-h", "--help"):
            return HelpCommand()
        elif arg in ("-v", "--version"):
            return VersionCommand()
        elif arg in ("-f", "--file"):
            file_path = _take_value(argv, i, "Missing file path after argument")
            i += 1
        elif arg in ("-r", "--file-range"):
            file_range = _parse_range(_take_value(argv, i, "Missing byte range after argument"))
            i += 1
        elif arg in ("-c", "--chunk"):
            chunk_size = _parse_chunk_size(_take_value(argv, i, "Missing chunk size with arg"))
            i += 1
        elif arg in ("-u", "--url"):
            url = _take_value(argv, i, "Missing URL with")
            i += 1
        elif arg in ("-m", "--method"):
            method = _parse_method(_take_value(argv, i, "Missing HTTP method after argument"))
            i += 1
        elif arg in ("-fb", "--file-bytes"):
            print_file_bytes = True
        elif arg in ("-p", "--progress"):
            show_progress = True
        elif arg == "--debug":
            debug = True
        else:
            raise ParseError(f"Unknown argument '{arg}', use '-h' or '--help' for help")
        i += 1

    if file_path is None:
        raise ParseError("No file was given, use '-f' or '--file' to specify a file")

    return UploadCommand(
        file_path=file_path,
        url=url,
        file_range=file_range,
        chunk_size=chunk_size,
        method=method,
        print_file_bytes=print_file_bytes,
        show_progress=show_progress,
        debug=debug,
    )


def _take_value(argv: list[str], i: int, message: str) -> str:
    """Return the value following argv[i]."""
    if i + 1 >= len(argv):
        raise ParseError(f"{message} '{argv[i]}'")
    return argv[i + 1]


def _parse_range(value: str) -> tuple[int, int]:
    """Parse 'START-END' into a pair of byte offsets."""
    parts = value.split("-")
    if len(parts) != 2:
        raise ParseError(f"Invalid byte range of {value}")

    start_text, end_text = parts
    if not start_text.isdecimal():
        raise ParseError(f"Invalid start range of '{value}'")
    if not end_text.isdecimal():
        raise ParseError(f"Invalid end range of '{value}'")

    start, end = int(start_text), int(end_text)
    if start > end:
        raise ParseError(f"Invalid byte range of {value}: start is after end")
    return start, end


def _parse_chunk_size(value: str) -> int:
    if not value.isdecimal() or int(value) == 0:
        raise ParseError(f"Invalid chunk size '{value}', expected a positive number of bytes")
    return int(value)


def _parse_method(value: str) -> str:
    try:
        return HttpMethod.parse(value).value
    except ValueError as e:
        raise ParseError(str(e))
