"""
Per-line split/slice/join pipeline.

``process`` is the pure single-line composition. ``LineProcessor`` runs the
same pipeline over a stream of lines and applies a ``RangeErrorPolicy`` to
lines whose field count cannot satisfy the range.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import StrEnum

from loguru import logger

from splitjoin.core.errors import RangeBoundsError
from splitjoin.core.joiner import join_interval
from splitjoin.core.range_normalizer import RangeSpec, parse_range_spec
from splitjoin.core.splitter import check_delimiter, split
from splitjoin.datastructures.type_aliases import Delimiter, Line, RangeText


def process(
    line: Line,
    delimiter: Delimiter,
    range_spec: RangeText | RangeSpec,
) -> str:
    """
    Split ``line``, select the fields named by ``range_spec`` and rejoin them.

        >>> process("a,b,c", ",", "-2:-1")
        'b'

    Errors from parsing or resolving the range propagate unchanged.
    """
    if not isinstance(range_spec, RangeSpec):
        range_spec = parse_range_spec(range_spec)
    fields = split(line, delimiter)
    return join_interval(fields, delimiter, range_spec.resolve(len(fields)))


class RangeErrorPolicy(StrEnum):
    """What to do with a line whose field count cannot satisfy the range."""

    ABORT = "abort"  # Propagate the error
    SKIP = "skip"  # Produce no output for the line
    BLANK = "blank"  # Produce an empty output line


@dataclass(slots=True)
class ProcessingStats:
    lines_read: int = 0
    lines_written: int = 0
    lines_skipped: int = 0


@dataclass(slots=True)
class LineProcessor:
    """Applies one delimiter and range to every line of an input stream."""

    delimiter: Delimiter
    range_spec: RangeSpec
    on_range_error: RangeErrorPolicy = RangeErrorPolicy.ABORT
    stats: ProcessingStats = field(default_factory=ProcessingStats)

    def __post_init__(self) -> None:
        check_delimiter(self.delimiter)

    @classmethod
    def from_text(
        cls,
        delimiter: Delimiter,
        range_text: RangeText,
        *,
        strict: bool = True,
        on_range_error: RangeErrorPolicy = RangeErrorPolicy.ABORT,
    ) -> LineProcessor:
        return cls(
            delimiter=check_delimiter(delimiter),
            range_spec=parse_range_spec(range_text, strict=strict),
            on_range_error=on_range_error,
        )

    def process_line(self, line: Line, line_number: int = 0) -> str | None:
        """
        Process one line; ``None`` means the line produces no output.

        Raises:
            RangeBoundsError: Under ``ABORT``, with ``line_number`` and
                ``range_text`` filled in.
        """
        self.stats.lines_read += 1
        try:
            result = process(line, self.delimiter, self.range_spec)
        except RangeBoundsError as e:
            e.line_number = line_number or self.stats.lines_read
            e.range_text = str(self.range_spec)
            if self.on_range_error is RangeErrorPolicy.ABORT:
                raise
            logger.warning("{} (on_range_error={})", e, self.on_range_error)
            if self.on_range_error is RangeErrorPolicy.SKIP:
                self.stats.lines_skipped += 1
                return None
            result = ""

        self.stats.lines_written += 1
        return result

    def process_lines(self, lines: Iterable[Line]) -> Iterator[str]:
        """Lazily process ``lines`` in order, dropping lines with no output."""
        for line_number, line in enumerate(lines, start=1):
            result = self.process_line(line, line_number)
            if result is not None:
                yield result
