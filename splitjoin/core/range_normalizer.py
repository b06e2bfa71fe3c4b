"""
Range specification parsing and normalization.

A range specification is the textual ``start:end`` form of a Python slice
without a step. Either side may be empty. Parsing happens once per
invocation and yields a ``RangeSpec``; resolving a ``RangeSpec`` against the
field count of one line yields a concrete half-open ``Interval``.

Resolution rules for an endpoint ``v`` against ``n`` fields:

- ``v < -n``: underflow error
- ``-n <= v < 0``: ``n + v``
- ``0 <= v <= n``: ``v``
- ``v > n``: overflow error

Unlike Python slicing, out-of-range endpoints are errors rather than being
clamped. An interval with ``lo >= hi`` is a valid, empty selection.

Examples:
    >>> normalize(":", 3)
    Interval(lo=0, hi=3)
    >>> normalize("-2:-1", 3)
    Interval(lo=1, hi=2)
"""

from __future__ import annotations

import re
import warnings
from dataclasses import dataclass

from loguru import logger

from splitjoin.core.errors import (
    MissingDelimiterError,
    MultipleDelimiterError,
    MultipleDelimiterWarning,
    RangeOverflowError,
    RangeParseError,
    RangeUnderflowError,
)
from splitjoin.datastructures.type_aliases import (
    FieldCount,
    FieldIndex,
    RangeText,
    ResolvedIndex,
)

RANGE_SEPARATOR = ":"

_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")
_ASCII_WHITESPACE = " \t\n\r\f\v"


@dataclass(frozen=True, slots=True)
class Interval:
    """Half-open interval ``[lo, hi)`` over a field sequence."""

    lo: ResolvedIndex
    hi: ResolvedIndex

    def __post_init__(self) -> None:
        if self.lo < 0 or self.hi < 0:
            raise ValueError(f"Interval bounds must be non-negative, got {self}")

    @property
    def is_empty(self) -> bool:
        return self.lo >= self.hi

    def __len__(self) -> int:
        return max(0, self.hi - self.lo)

    def as_slice(self) -> slice:
        return slice(self.lo, self.hi)


@dataclass(frozen=True, slots=True)
class RangeSpec:
    """
    Parsed range specification.

    ``None`` stands for an omitted endpoint: the start of the sequence for
    ``start`` and the end of the sequence for ``end``.
    """

    start: FieldIndex | None = None
    end: FieldIndex | None = None

    def resolve(self, field_count: FieldCount) -> Interval:
        """
        Resolve both endpoints against ``field_count``.

        Raises:
            RangeUnderflowError: An endpoint is below ``-field_count``.
            RangeOverflowError: An endpoint is above ``field_count``.
        """
        lo = 0 if self.start is None else resolve_index(self.start, field_count)
        hi = (
            field_count
            if self.end is None
            else resolve_index(self.end, field_count)
        )
        return Interval(lo=lo, hi=hi)

    def __str__(self) -> str:
        start = "" if self.start is None else str(self.start)
        end = "" if self.end is None else str(self.end)
        return f"{start}{RANGE_SEPARATOR}{end}"


def resolve_index(value: FieldIndex, field_count: FieldCount) -> ResolvedIndex:
    """Map a possibly negative endpoint onto ``[0, field_count]``."""
    if value < -field_count:
        raise RangeUnderflowError(value, field_count)
    if value < 0:
        return field_count + value
    if value > field_count:
        raise RangeOverflowError(value, field_count)
    return value


def _parse_endpoint(text: RangeText, part: str) -> FieldIndex | None:
    stripped = part.strip(_ASCII_WHITESPACE)
    if not stripped:
        return None
    if _DECIMAL_RE.fullmatch(stripped) is None:
        raise RangeParseError(text, part)
    return int(stripped)


def parse_range_spec(text: RangeText, *, strict: bool = True) -> RangeSpec:
    """
    Parse ``start:end`` into a ``RangeSpec``.

    Args:
        text: The range specification.
        strict: Reject specifications with more than one ':'. When False, a
            ``MultipleDelimiterWarning`` is issued and the first two parts
            are used.

    Raises:
        MissingDelimiterError: ``text`` contains no ':'.
        MultipleDelimiterError: ``text`` contains several ':' in strict mode.
        RangeParseError: A non-empty endpoint is not a decimal integer.
    """
    parts = text.split(RANGE_SEPARATOR)
    if len(parts) < 2:
        raise MissingDelimiterError(text)
    if len(parts) > 2:
        if strict:
            raise MultipleDelimiterError(text)
        logger.warning(
            "Range {!r} has {} separators, using the first two parts",
            text,
            len(parts) - 1,
        )
        warnings.warn(
            str(MultipleDelimiterError(text)),
            MultipleDelimiterWarning,
            stacklevel=2,
        )

    spec = RangeSpec(
        start=_parse_endpoint(text, parts[0]),
        end=_parse_endpoint(text, parts[1]),
    )
    logger.debug("Parsed range {!r} as {}", text, spec)
    return spec


def normalize(
    range_spec: RangeText | RangeSpec,
    field_count: FieldCount,
    *,
    strict: bool = True,
) -> Interval:
    """Parse (if needed) and resolve a range specification in one step."""
    if not isinstance(range_spec, RangeSpec):
        range_spec = parse_range_spec(range_spec, strict=strict)
    return range_spec.resolve(field_count)
