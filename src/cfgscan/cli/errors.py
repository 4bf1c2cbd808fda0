"""
Unified CLI Error Handling
==========================

Maps exceptions raised while running a CLI tool to a message on stderr
and an exit code:

| Exception                                   | Exit code      |
|---------------------------------------------|----------------|
| ScanError (e.g. unterminated string)        | BUILD_ERROR    |
| ConfigError (bad CFGSCAN_* value or -k)     | INVALID_ARGS   |
| click.BadParameter, unreadable input        | INVALID_ARGS   |
| anything else                               | INTERNAL_ERROR |
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

from cfgscan.errors import ConfigError, ScanError


class ExitCode(IntEnum):
    """Standard exit codes for CLI tools."""
    SUCCESS = 0
    BUILD_ERROR = 1      # Scan error, or unknown tokens in strict mode
    INVALID_ARGS = 2     # Bad arguments, configuration or input file
    INTERNAL_ERROR = 3   # Unexpected internal error


# Problems with what the user handed the tool rather than with its content
INPUT_ERRORS = (click.BadParameter, FileNotFoundError, PermissionError, UnicodeDecodeError)


def handle_cli_exception(
    error: Exception,
    verbose: bool = False,
    error_type: str | None = None
) -> NoReturn:
    """
    Report `error` on stderr and exit with the matching exit code.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors
        error_type: Prefix for configuration errors (e.g., "Configuration")

    Raises:
        SystemExit: Always
    """
    if isinstance(error, ScanError):
        # Already formatted as "file:line:col: error: ..." with context
        click.echo(str(error), err=True)
        sys.exit(ExitCode.BUILD_ERROR)

    if isinstance(error, ConfigError):
        prefix = f"{error_type} error: " if error_type else "Error: "
        click.echo(f"{prefix}{error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    if isinstance(error, INPUT_ERRORS):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    click.echo(f"Internal error: {error}", err=True)
    if verbose:
        traceback.print_exc()
    sys.exit(ExitCode.INTERNAL_ERROR)
