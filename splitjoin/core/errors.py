"""
Error taxonomy for splitjoin.

Every error carries the values needed to describe it and exposes the
user-facing text through ``message``. The CLI prints ``message`` verbatim
and exits with status 1.
"""

from __future__ import annotations

from splitjoin.datastructures.type_aliases import (
    FieldCount,
    FieldIndex,
    LineNumber,
    RangeText,
)

RANGE_ARG_NAME = "range_str"
DELIMITER_ARG_NAME = "split_char"


class SplitJoinError(Exception):
    """Base exception for all splitjoin errors."""

    @property
    def message(self) -> str:
        return f"Error: {self}"


class ArgumentCountError(SplitJoinError):
    """Raised when the command line holds neither 2 nor 3 positional arguments."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"2 args required, 1 optional: recieved {count}")


class InvalidDelimiterError(SplitJoinError, ValueError):
    """Raised when a field delimiter is not exactly one character."""

    def __init__(self, delimiter: str) -> None:
        self.delimiter = delimiter
        if delimiter:
            reason = f"expected a single character, got {delimiter!r}"
        else:
            reason = "empty string"
        super().__init__(f"invalid value for {DELIMITER_ARG_NAME}: {reason}")


class RangeSpecError(SplitJoinError, ValueError):
    """Base class for problems with a range specification."""


class MissingDelimiterError(RangeSpecError):
    """Raised when a range specification contains no ':'."""

    def __init__(self, text: RangeText) -> None:
        self.text = text
        super().__init__(
            f"invalid value for {RANGE_ARG_NAME}: delimiter (':') not found"
        )


class MultipleDelimiterError(RangeSpecError):
    """Raised in strict mode when a range specification contains several ':'."""

    def __init__(self, text: RangeText) -> None:
        self.text = text
        super().__init__(
            f"invalid value for {RANGE_ARG_NAME}: "
            "more than one occurence of delimiter (':')"
        )


class RangeParseError(RangeSpecError):
    """Raised when a non-empty range endpoint is not a decimal integer."""

    def __init__(self, text: RangeText, part: str) -> None:
        self.text = text
        self.part = part
        super().__init__(
            f"invalid value for {RANGE_ARG_NAME}: {part!r} is not a decimal integer"
        )


class RangeBoundsError(RangeSpecError):
    """
    Raised when a range endpoint falls outside ``[-field_count, field_count]``.

    ``range_text`` and ``line_number`` are filled in by the line processor so
    the report can point at the offending input line.
    """

    def __init__(self, value: FieldIndex, field_count: FieldCount) -> None:
        self.value = value
        self.field_count = field_count
        self.range_text: RangeText | None = None
        self.line_number: LineNumber | None = None
        super().__init__(value, field_count)

    def __str__(self) -> str:
        fields = "field" if self.field_count == 1 else "fields"
        if self.line_number is None or self.range_text is None:
            return (
                f"index {self.value} {self.direction} for {self.field_count} {fields}"
            )
        return (
            f"line {self.line_number}: range {self.range_text} out of bounds "
            f"for {self.field_count} {fields}"
        )

    @property
    def direction(self) -> str:
        return "out of bounds"


class RangeUnderflowError(RangeBoundsError):
    """Raised when an endpoint is below ``-field_count``."""

    @property
    def direction(self) -> str:
        return "underflows"


class RangeOverflowError(RangeBoundsError):
    """Raised when an endpoint is above ``field_count``."""

    @property
    def direction(self) -> str:
        return "overflows"


class MultipleDelimiterWarning(UserWarning):
    """Emitted in lenient mode when a range specification contains several ':'."""
