"""
CLI Error Handling
==================

Provides consistent error handling and exit codes for the mfl command.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

from mfl.errors import SourceError


class ExitCode(IntEnum):
    """Standard exit codes for the mfl command."""
    SUCCESS = 0
    SOURCE_ERROR = 1     # Source file cannot be opened
    INVALID_ARGS = 2     # Invalid arguments
    INTERNAL_ERROR = 3   # Unexpected internal error


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Unified exception handler for the mfl command.

    Formats the error message appropriately, optionally prints traceback
    in verbose mode, and exits with the correct exit code.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    if isinstance(error, SourceError):
        # Already formatted with "error:" prefix
        click.echo(str(error), err=True)
        sys.exit(ExitCode.SOURCE_ERROR)

    elif isinstance(error, click.BadParameter):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    else:
        # Unexpected internal error
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
