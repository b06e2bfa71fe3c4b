#!/usr/bin/env python3
"""
Command-line entry point for splitjoin.

    splitjoin [OPTIONS] SPLIT_CHAR RANGE_STR [INPUT_TEXT]

Splits every input line on SPLIT_CHAR, keeps the fields selected by the
Python-style half-open RANGE_STR (``start:end``, negative indices count from
the end) and prints them rejoined with SPLIT_CHAR. Lines come from
INPUT_TEXT when given, otherwise from standard input.

Options are only recognised before SPLIT_CHAR; everything from SPLIT_CHAR on
is taken verbatim, so ranges and input text may start with '-'. Use '--' to
pass a SPLIT_CHAR that itself starts with '-' followed by more characters.

Input that is not valid UTF-8 passes through byte for byte: both standard
streams use the 'surrogateescape' error handler, matching how Python
decodes command-line arguments.
"""

import warnings
from collections.abc import Iterator
from typing import TextIO

import click
from loguru import logger
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from splitjoin.core.config import LOG_LEVELS, SplitJoinSettings
from splitjoin.core.errors import ArgumentCountError, SplitJoinError
from splitjoin.core.line_processor import (
    LineProcessor,
    ProcessingStats,
    RangeErrorPolicy,
)
from splitjoin.core.logging import configure_logging

MIN_ARGS = 2
MAX_ARGS = 3
STREAM_ERRORS = "surrogateescape"

# Diagnostics only; processed lines go to stdout through click.echo.
console = Console(stderr=True)


def iter_text_lines(text: str) -> Iterator[str]:
    """Yield the '\\n'-separated lines of ``text``; a final '\\n' adds no line."""
    if not text:
        return
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    yield from lines


def iter_stream_lines(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield line.removesuffix("\n")


def display_stats(stats: ProcessingStats) -> None:
    """Display processing counters in a rich table on stderr."""
    table = Table(title="splitjoin")

    table.add_column("Lines read", justify="right", style="cyan")
    table.add_column("Lines written", justify="right", style="green")
    table.add_column("Lines skipped", justify="right", style="yellow")
    table.add_row(
        str(stats.lines_read), str(stats.lines_written), str(stats.lines_skipped)
    )

    console.print(table)


def settings_errors(error: ValidationError) -> list[str]:
    """One ``Error: ...`` line per invalid setting, named by its variable."""
    messages = []
    for detail in error.errors():
        loc = detail.get("loc") or ("settings",)
        name = SplitJoinSettings.env_name(str(loc[0]))
        messages.append(f"Error: invalid value for {name}: {detail['msg']}")
    return messages


@click.command(
    context_settings={
        "allow_interspersed_args": False,
        "help_option_names": ["-h", "--help"],
    }
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.option(
    "--strict/--lenient",
    default=None,
    help="Reject (default) or warn about range specs with more than one ':'.",
)
@click.option(
    "--on-range-error",
    type=click.Choice([policy.value for policy in RangeErrorPolicy]),
    default=None,
    help="What to do with a line that has too few fields for the range.",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Diagnostics level on stderr.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option("--stats", is_flag=True, help="Print line counters to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    args: tuple[str, ...],
    strict: bool | None,
    on_range_error: str | None,
    log_level: str | None,
    verbose: bool,
    stats: bool,
) -> None:
    """
    Python-style slicing of delimited fields.

    Options must come before SPLIT_CHAR.

    \b
    Examples:
      splitjoin , 1: 'a,b,c'       ->  b,c
      splitjoin / :-1 /usr/lib/x   ->  /usr/lib
      ls | splitjoin . -1:         ->  file extensions
    """
    stdout = click.get_text_stream("stdout", errors=STREAM_ERRORS)

    def echo(text: str) -> None:
        # color=True keeps escape sequences in the data intact
        click.echo(text, file=stdout, color=True)

    try:
        settings = SplitJoinSettings()
    except ValidationError as e:
        for message in settings_errors(e):
            echo(message)
        ctx.exit(1)

    if strict is not None:
        settings.strict_range = strict
    if on_range_error is not None:
        settings.on_range_error = RangeErrorPolicy(on_range_error)
    if log_level is not None:
        settings.log_level = log_level.upper()
    if verbose:
        settings.log_level = "DEBUG"

    configure_logging(settings.log_level)
    logger.debug("Settings: {}", settings)

    try:
        if not MIN_ARGS <= len(args) <= MAX_ARGS:
            raise ArgumentCountError(len(args))

        split_char, range_str = args[0], args[1]
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            processor = LineProcessor.from_text(
                split_char[:1],
                range_str,
                strict=settings.strict_range,
                on_range_error=settings.on_range_error,
            )
        for warning in caught:
            echo(f"Error: {warning.message}")

        if len(args) == MAX_ARGS:
            lines = iter_text_lines(args[2])
        else:
            lines = iter_stream_lines(
                click.get_text_stream("stdin", errors=STREAM_ERRORS)
            )

        for output in processor.process_lines(lines):
            echo(output)
    except SplitJoinError as e:
        logger.debug("Aborting: {!r}", e)
        echo(e.message)
        ctx.exit(1)

    logger.info(
        "Processed {} line(s): {} written, {} skipped",
        processor.stats.lines_read,
        processor.stats.lines_written,
        processor.stats.lines_skipped,
    )
    if stats:
        display_stats(processor.stats)


def main() -> None:
    """Main CLI entry point."""
    cli()


if __name__ == "__main__":
    main()
