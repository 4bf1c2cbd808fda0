"""
cfglex - Token Lister Command-Line Interface
===========================================

This module implements the command-line driver for the scanner. It reads
notation source and prints one line per token, ending with the EOF token.

Usage Examples
--------------
Scan a file:
    $ cfglex settings.cfg

Scan standard input:
    $ cat settings.cfg | cfglex -

Scan an inline string:
    $ cfglex -c 'x = 10;'

Scan the built-in sample:
    $ cfglex --demo

Treat unknown characters as errors:
    $ cfglex --strict settings.cfg

Output Format
-------------
    Token: 0, Type: IDENTIFIER, Text: 'x', Line: 1, Column: 1

Exit Codes
----------
0 - Success
1 - Scan error (unterminated string) or unknown tokens with --strict
2 - Invalid arguments, configuration or unreadable input
3 - Internal error
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from cfgscan import __version__
from cfgscan.cli.errors import ExitCode, handle_cli_exception
from cfgscan.scanner import Scanner, ScannerOptions, TokenKind

logger = logging.getLogger(__name__)

# Sample input scanned by --demo
DEMO_SOURCE = "#var:struct MyStruct { int x; int y; x = 10; y = 20; } subclusive:#"


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def read_input(input_file: Optional[Path], source: Optional[str], demo: bool) -> tuple[str, str]:
    """
    Resolve the text to scan and the name to report it under.

    Exactly one of input_file, source and demo must be given.

    Raises:
        click.BadParameter: If no input or more than one input is given
    """
    given = sum((input_file is not None, source is not None, demo))
    if given != 1:
        raise click.BadParameter(
            "give exactly one of INPUT_FILE, --source or --demo"
        )

    if demo:
        return DEMO_SOURCE, "<demo>"
    if source is not None:
        return source, "<source>"
    if str(input_file) == "-":
        return click.get_text_stream("stdin").read(), "<stdin>"
    return input_file.read_text(encoding="utf-8"), str(input_file)


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    required=False,
    type=click.Path(exists=True, dir_okay=False, allow_dash=True, path_type=Path),
)
@click.option(
    "-c", "--source",
    type=str,
    default=None,
    help="Scan this text instead of a file",
)
@click.option(
    "--demo",
    is_flag=True,
    help="Scan the built-in sample input",
)
@click.option(
    "-k", "--keyword",
    multiple=True,
    help="Treat an extra identifier as a keyword (can be repeated)",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Fail with exit code 1 if any character could not be classified",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output (debug logging and a summary)",
)
@click.version_option(version=__version__, prog_name="cfglex")
def main(
    input_file: Optional[Path],
    source: Optional[str],
    demo: bool,
    keyword: tuple[str, ...],
    strict: bool,
    verbose: bool,
) -> None:
    """
    Print the token stream of configuration notation source.

    INPUT_FILE is the file to scan; use - for standard input.

    \b
    Examples:
        cfglex settings.cfg          # Scan a file
        cfglex -c 'x = 10;'          # Scan a string
        cfglex -k struct --demo      # Add a keyword
        cfglex --strict app.cfg      # Reject unknown characters

    Scanner vocabulary can also be set with the CFGSCAN_KEYWORDS,
    CFGSCAN_SENTINELS and CFGSCAN_DIRECTIVE_PREFIX environment variables.
    """
    setup_logging(verbose)

    try:
        text, filename = read_input(input_file, source, demo)

        options = ScannerOptions.from_env().with_keywords(keyword)
        logger.debug(
            f"Sentinels: {sorted(options.sentinels)}, "
            f"directive prefix: {options.directive_prefix!r}"
        )
        if verbose:
            click.echo(f"Scanning {filename} ({len(text)} characters)", err=True)
            click.echo(f"Keywords: {', '.join(sorted(options.keywords))}", err=True)

        scanner = Scanner(text, filename, options)
        count = 0
        unknown = []
        for token in scanner.tokenize_all():
            click.echo(token.format())
            count += 1
            if token.kind is TokenKind.UNKNOWN:
                unknown.append(token)

        if verbose:
            click.echo(f"Scanned {count} tokens, {len(unknown)} unknown", err=True)

        if strict and unknown:
            for token in unknown:
                click.echo(f"{token.location}: error: {token.diagnostic}", err=True)
            sys.exit(ExitCode.BUILD_ERROR)

    except Exception as e:
        handle_cli_exception(e, verbose=verbose, error_type="Configuration")


if __name__ == "__main__":
    main()
