"""
CLI Error Handling
==================

Consistent error output and exit codes for the command-line tool.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

from cscan.errors import ConfigurationError, CScanError


class ExitCode(IntEnum):
    """Exit codes for the cscan command."""
    SUCCESS = 0
    SCAN_ERRORS = 1      # Scan finished but reported lexical errors
    INVALID_ARGS = 2     # Invalid arguments, configuration or missing files
    INTERNAL_ERROR = 3   # Unexpected internal error


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Report an exception raised while running a command and exit.

    Args:
        error: The exception that was raised
        verbose: If True, print the traceback for internal errors

    Raises:
        SystemExit: Always, with the matching ExitCode
    """
    if isinstance(error, ConfigurationError):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    elif isinstance(error, CScanError):
        # Diagnostics are already formatted with an "error:" prefix
        click.echo(str(error), err=True)
        sys.exit(ExitCode.SCAN_ERRORS)

    elif isinstance(error, (FileNotFoundError, PermissionError, UnicodeDecodeError)):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
