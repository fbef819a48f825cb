"""
mfl - MFL Lexer Command-Line Interface
======================================

This module implements the ``mfl`` command. It feeds source text to the
scanner and prints the resulting tokens, one per line.

Usage Examples
--------------
Interactive mode (each line is scanned independently):
    $ mfl
    mfl> val x := 12.5
    VAL
    ID(x)
    ASSIGN
    REAL(12.5)
    mfl> .quit

File mode:
    $ mfl --file program.mfl

Verbose mode (debug logging on stderr):
    $ mfl -v -f program.mfl

Exit Codes
----------
0 - Success
1 - Source file cannot be opened
2 - Invalid arguments
3 - Internal error
"""

import logging
from pathlib import Path
from typing import Optional

import click

from mfl import __version__
from mfl.cli.config import DriverConfig
from mfl.cli.errors import handle_cli_exception
from mfl.lexer import Scanner


logger = logging.getLogger(__name__)


LICENSE_TEXT = """\
Copyright (C) 2021 -- 2023 Zachary Kissel
This program comes with ABSOLUTELY NO WARRANTY.
This is free software, and you are welcome to redistribute it
under certain conditions."""

BANNER = "MFL interactive mode. Enter {quit} to exit."


# =============================================================================
# Driver Functions
# =============================================================================

def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def print_tokens(scanner: Scanner) -> int:
    """
    Print every token of a scanner except the terminating EOF.

    Returns:
        Number of tokens printed
    """
    count = 0
    for token in scanner:
        click.echo(str(token))
        count += 1
    return count


def scan_file(path: Path) -> int:
    """
    Scan a file and print its tokens.

    Raises:
        SourceNotFoundError: If the file cannot be opened
    """
    with Scanner.from_file(path) as scanner:
        count = print_tokens(scanner)
        logger.info(f"{path}: {count} tokens, {scanner.line_number} lines")
    return count


def run_interactive(config: DriverConfig) -> None:
    """
    Read lines from standard input and print the tokens of each.

    Every line gets a fresh scanner. Blank lines are ignored; the quit
    command or end of input leaves the loop.
    """
    if config.show_license:
        click.echo(LICENSE_TEXT)
        click.echo()
    click.echo(BANNER.format(quit=config.quit_command))

    stdin = click.get_text_stream("stdin")
    while True:
        click.echo(config.prompt, nl=False)
        line = stdin.readline()
        if not line:
            # End of input (Ctrl-D)
            click.echo()
            break

        line = line.strip()
        if line == config.quit_command:
            break
        if not line:
            continue

        with Scanner.from_string(line) as scanner:
            print_tokens(scanner)


# =============================================================================
# CLI Definition
# =============================================================================

@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "-f", "--file",
    "file",
    type=click.Path(path_type=Path),
    default=None,
    help="Scan the file and print its tokens",
)
@click.option(
    "--license/--no-license",
    "show_license",
    default=True,
    help="Show the license banner in interactive mode (default: show)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Enable debug logging",
)
@click.version_option(version=__version__, prog_name="mfl")
def main(file: Optional[Path], show_license: bool, verbose: bool) -> None:
    """
    Print the tokens of MFL source code.

    Without --file, starts interactive mode: each line typed at the
    prompt is scanned on its own and its tokens are printed.

    \b
    Examples:
        mfl                         # Interactive mode
        mfl -f program.mfl          # Scan a file
        mfl -v -f program.mfl       # With debug logging
    """
    config = DriverConfig.from_options(
        file=file,
        verbose=verbose,
        show_license=show_license,
    )
    setup_logging(config.verbose)

    try:
        if config.interactive:
            run_interactive(config)
        else:
            scan_file(config.file)
    except Exception as e:
        handle_cli_exception(e, verbose=config.verbose)


if __name__ == "__main__":
    main()
