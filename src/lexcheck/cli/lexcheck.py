"""
lexcheck - Command-Line Interface
=================================

This module implements the command-line interface for the analyzer. It
reads one source file (or standard input), prints the analysis report and
exits with a status that reflects the result.

Usage Examples
--------------
Analyze a file:
    $ lexcheck main.c

Read from standard input:
    $ cat main.c | lexcheck -

Write the report to a file:
    $ lexcheck main.c -o main.report

Fail when syntax diagnostics are found (for scripts and CI):
    $ lexcheck --strict main.c

Exit Codes
----------
0 - Report produced (and no diagnostics, with --strict)
1 - Lexical error, or diagnostics found with --strict
2 - Invalid arguments or unreadable input
3 - Internal error
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from lexcheck import __version__
from lexcheck.cli.errors import ExitCode, handle_cli_exception
from lexcheck.report import Analyzer

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, allow_dash=True, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the report to this file (default: stdout)",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Exit with status 1 when syntax diagnostics are found",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="lexcheck")
def main(
    input_file: Path,
    output: Optional[Path],
    strict: bool,
    verbose: bool,
) -> None:
    """
    Analyze C-like source code.

    INPUT_FILE is the source file to analyze, or - for standard input.

    The report lists every token with its category, a summary of
    constants, identifiers and comments, and the syntax check results:
    unbalanced or mismatched ( and { delimiters, and lines that may be
    missing a semicolon.

    With --verbose, a lexical error is reported with its file, column
    and source line instead of the one-line report.

    \b
    Examples:
        lexcheck main.c              # Print the report
        lexcheck main.c -o out.txt   # Write the report to a file
        lexcheck --strict main.c     # Fail on syntax diagnostics
    """
    setup_logging(verbose)

    try:
        analyzer = Analyzer()
        if str(input_file) == "-":
            source = click.get_text_stream("stdin").read()
            report = analyzer.analyze_source(source, "<stdin>")
        else:
            logger.debug("Analyzing %s", input_file)
            report = analyzer.analyze_file(str(input_file))

        if not report.success and verbose:
            # The located form replaces the one-line report
            click.echo(report.error.describe(), err=True)
            sys.exit(ExitCode.BUILD_ERROR)

        text = report.render()
        if output is not None:
            output.write_text(text + "\n", encoding="utf-8")
            logger.debug("Wrote %d bytes to %s", len(text) + 1, output)
        else:
            click.echo(text)

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)

    if not report.success:
        sys.exit(ExitCode.BUILD_ERROR)

    if strict and report.diagnostics:
        click.echo(f"{len(report.diagnostics)} syntax diagnostic(s) found", err=True)
        sys.exit(ExitCode.BUILD_ERROR)


if __name__ == "__main__":
    main()
