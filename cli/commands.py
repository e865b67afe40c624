"""Command handler functions for CLI operations."""

import os
from typing import BinaryIO, Optional

from common.logging_config import get_logger
from cli.config import Config, default_config_path
from cli.models import UploadCommand
from cli.parser import ValidationError
from cli.utils import ProgressPrinter
from uploader.driver import ChunkUploader
from uploader.models import HttpMethod, TransferOutcome, UploadRequest
from uploader.planner import count_chunks
from uploader.reader import source_length

logger = get_logger(__name__)


def resolve_range(cmd: UploadCommand, file_size: int) -> tuple[int, int]:
    """
    Byte range to upload: the requested one, or the whole file.

    Raises:
        ValidationError: If the range ends past the end of the file
    """
    range_start, range_end = cmd.file_range if cmd.file_range is not None else (0, file_size)
    if range_end > file_size:
        raise ValidationError(
            f"Byte range of {range_end} is larger than the file's size of {file_size}"
        )
    return range_start, range_end


def build_upload_request(cmd: UploadCommand, config: Config, source: BinaryIO, file_size: int) -> UploadRequest:
    """
    Combine command-line options with configured defaults into an UploadRequest.

    Args:
        cmd: Parsed upload command
        config: Configuration providing defaults
        source: Open binary handle of the file to upload
        file_size: Total size of the file in bytes

    Returns:
        Validated UploadRequest

    Raises:
        ValidationError: If the range exceeds the file, a setting is invalid
            or the URL is missing
    """
    range_start, range_end = resolve_range(cmd, file_size)

    chunk_size = cmd.chunk_size if cmd.chunk_size is not None else config.get_chunk_size()
    if chunk_size <= 0:
        raise ValidationError(f"Invalid chunk size {chunk_size}, expected a positive number of bytes")

    try:
        method = HttpMethod.parse(cmd.method or config.get_method())
    except ValueError as e:
        raise ValidationError(str(e))

    url = cmd.url or config.get_default_url()
    if not url:
        raise ValidationError("No URL was given, use '-u' or '--url' to specify a URL")

    return UploadRequest(
        source=source,
        range_start=range_start,
        range_end=range_end,
        chunk_size=chunk_size,
        destination_url=url,
        http_method=method,
    )


def handle_upload(
    cmd: UploadCommand,
    config: Optional[Config] = None,
    uploader: Optional[ChunkUploader] = None,
) -> TransferOutcome:
    """
    Handle the upload command.

    Args:
        cmd: UploadCommand with file path and upload options
        config: Optional Config for dependency injection (testing)
        uploader: Optional ChunkUploader for dependency injection (testing)

    Returns:
        Outcome of the upload run

    Raises:
        ValidationError: If the file cannot be opened or options are invalid
    """
    if config is None:
        config = Config(default_config_path())

    if not os.path.exists(cmd.file_path):
        raise ValidationError(f"File '{cmd.file_path}' does not exist")
    if not os.path.isfile(cmd.file_path):
        raise ValidationError(f"'{cmd.file_path}' is not a file")

    try:
        source = open(cmd.file_path, 'rb')
    except OSError as e:
        raise ValidationError(f"Error opening file: {e}")

    with source:
        file_size = source_length(source)
        resolve_range(cmd, file_size)

        if cmd.print_file_bytes:
            print(f"File size: {file_size} bytes")

        request = build_upload_request(cmd, config, source, file_size)

        progress = None
        if cmd.show_progress:
            progress = ProgressPrinter(
                total_bytes=request.range_length,
                total_chunks=count_chunks(request.range_start, request.range_end, request.chunk_size),
                filename=os.path.basename(cmd.file_path),
            )

        logger.info(f"Executing upload command: file={cmd.file_path} size={file_size}")
        if uploader is None:
            with ChunkUploader(timeout=config.get_timeout()) as owned:
                outcome = owned.upload(request, on_chunk=progress)
        else:
            outcome = uploader.upload(request, on_chunk=progress)

        if progress is not None:
            progress.finish()

    logger.debug(f"Upload command completed [success={outcome.success}]")
    return outcome
