"""CLI entry point."""

import os
import sys
from typing import Optional

from common.constants import VERSION
from common.logging_config import setup_logging
from cli.commands import handle_upload
from cli.constants import HELP_TEXT
from cli.models import HelpCommand, UploadCommand, VersionCommand
from cli.parser import ParseError, ValidationError, parse_args
from uploader.exceptions import UploadError


def main(argv: Optional[list[str]] = None) -> int:
    """
    Entry point for CLI.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:])

    Returns:
        Process exit status (0 on success, 1 on failure)
    """
    if argv is None:
        argv = sys.argv[1:]

    try:
        cmd = parse_args(argv)
    except ParseError as e:
        print(f"Error: {e}")
        return 1

    if isinstance(cmd, HelpCommand):
        print(HELP_TEXT)
        return 0
    if isinstance(cmd, VersionCommand):
        print(VERSION)
        return 0

    log_level = 'DEBUG' if cmd.debug else os.getenv('LOG_LEVEL', 'WARNING')
    logger = setup_logging('cli', log_level=log_level)
    setup_logging('uploader', log_level=log_level)

    if cmd.debug:
        logger.info("Debug logging enabled")

    return _run_upload(cmd, logger)


def _run_upload(cmd: UploadCommand, logger) -> int:
    try:
        outcome = handle_upload(cmd)
    except (ValidationError, UploadError) as e:
        print(f"Error: {e}")
        return 1
    except Exception as e:
        logger.error(f"CLI error: {e}", exc_info=True)
        raise

    print(outcome.message)
    return 0 if outcome.success else 1


if __name__ == "__main__":
    sys.exit(main())
