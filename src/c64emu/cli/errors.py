"""
Shared CLI Helpers
==================

Exit codes, logging setup, number parsing and the exception-to-exit-code
mapping used by c64asm, c64run and c64disasm.
"""

import logging
import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

from c64emu.emulator.config import parse_number
from c64emu.errors import C64Error


class ExitCode(IntEnum):
    """Process exit status shared by every c64emu command."""
    SUCCESS = 0
    BUILD_ERROR = 1      # C64Error from the assembler or emulator
    INVALID_ARGS = 2     # Bad option value or unreadable file
    INTERNAL_ERROR = 3   # Anything else


def configure_logging(verbose: bool) -> None:
    """Send c64emu log records to stderr; DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def parse_address(text: str, what: str = "address", limit: int = 0xFFFF) -> int:
    """
    Parse an option value given as decimal, 0x-hex or $-hex.

    Raises:
        click.BadParameter: If the text is not a number in 0..limit
    """
    try:
        value = parse_number(text)
    except ValueError:
        raise click.BadParameter(f"invalid {what} '{text}'")

    if not 0 <= value <= limit:
        raise click.BadParameter(f"{what} must be 0-{limit} (0x0-0x{limit:X})")
    return value


def handle_cli_exception(
    error: Exception,
    verbose: bool = False,
    error_type: str | None = None
) -> NoReturn:
    """
    Report an exception raised inside a c64emu command and exit.

    Assembler and emulator errors exit with BUILD_ERROR, bad option values
    and unreadable files with INVALID_ARGS, anything else with
    INTERNAL_ERROR (plus a traceback when verbose).

    Raises:
        SystemExit: Always
    """
    if isinstance(error, C64Error):
        label = f"{error_type} error" if error_type else "Error"
        click.echo(f"{label}: {error}", err=True)
        sys.exit(ExitCode.BUILD_ERROR)

    if isinstance(error, click.BadParameter):
        click.echo("Error: " + error.format_message(), err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    if isinstance(error, (FileNotFoundError, PermissionError, IsADirectoryError)):
        click.echo(f"Error: cannot access {error.filename}: {error.strerror}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    click.echo(f"Internal error: {type(error).__name__}: {error}", err=True)
    if verbose:
        traceback.print_exc()
    sys.exit(ExitCode.INTERNAL_ERROR)
