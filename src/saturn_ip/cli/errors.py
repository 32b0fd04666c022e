"""
Unified CLI Error Handling
==========================

Provides consistent error handling and exit codes for the satip commands.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click


class ExitCode(IntEnum):
    """Standard exit codes for the CLI."""
    SUCCESS = 0
    VALIDATION_ERROR = 1  # Image too small or a System ID field is invalid
    INVALID_ARGS = 2      # Invalid arguments or missing files
    INTERNAL_ERROR = 3    # Unexpected internal error


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Unified exception handler for the CLI.

    Formats the error message, optionally prints a traceback in verbose
    mode, and exits with the matching exit code.

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    from saturn_ip.errors import SaturnIPError

    if isinstance(error, SaturnIPError):
        click.echo(str(error), err=True)
        sys.exit(ExitCode.VALIDATION_ERROR)

    elif isinstance(error, click.BadParameter):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    elif isinstance(error, (FileNotFoundError, PermissionError, IsADirectoryError)):
        click.echo(f"Failed to open file: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
