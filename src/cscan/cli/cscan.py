"""
cscan - Scanner Command-Line Interface
======================================

Reads a source file, scans it and prints the token listing. Lexical
errors go to stderr and make the command exit with status 1.

Usage Examples
--------------
Token listing:
    $ cscan main.c

JSON output for other tools:
    $ cscan --format json main.c

Append an EOF token and use the historical block comment rule:
    $ cscan --eof --block-comments legacy main.c

Verbose mode:
    $ cscan -v main.c
"""

import logging
from pathlib import Path
from typing import Optional

import click

from cscan import __version__
from cscan.cli.errors import handle_cli_exception
from cscan.config import BlockCommentMode, ScannerOptions, parse_block_comment_mode
from cscan.formatting import format_json, format_tokens
from cscan.scanner import Scanner


logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(name)s: %(message)s" if verbose else "%(message)s",
        force=True,
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-f", "--format", "output_format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    help="Output format (default: text)",
)
@click.option(
    "--eof/--no-eof",
    default=None,
    help="Append an EOF token (default: off, or CSCAN_EMIT_EOF)",
)
@click.option(
    "--block-comments",
    type=click.Choice([mode.value for mode in BlockCommentMode], case_sensitive=False),
    default=None,
    help="Block comment termination rule (default: pair, or CSCAN_BLOCK_COMMENTS)",
)
@click.option(
    "--whitespace-tabs",
    is_flag=True,
    help="Also skip tabs and carriage returns between tokens",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="cscan")
def main(
    input_file: Path,
    output_format: str,
    eof: Optional[bool],
    block_comments: Optional[str],
    whitespace_tabs: bool,
    verbose: bool,
) -> None:
    """
    Scan a C-like source file and print its tokens.

    INPUT_FILE is the source file to scan.

    \b
    Exit status:
        0  no lexical errors
        1  lexical errors were reported
        2  invalid arguments or unreadable file
        3  internal error
    """
    setup_logging(verbose)

    try:
        options = ScannerOptions.from_env()
        if eof is not None:
            options.emit_eof = eof
        if block_comments is not None:
            options.block_comment_mode = parse_block_comment_mode(block_comments)
        if whitespace_tabs:
            options.whitespace = options.whitespace + "\t\r"

        logger.debug(f"Options: {options}")

        # Decode without newline translation so '\r' and offsets match the file
        source = input_file.read_bytes().decode("utf-8")
        result = Scanner(source, str(input_file), options).tokenize()

        if output_format.lower() == "json":
            click.echo(format_json(result.tokens, result.diagnostics, result.filename))
        elif result.tokens:
            click.echo(format_tokens(result.tokens))

        result.raise_if_errors()

    except SystemExit:
        raise
    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
