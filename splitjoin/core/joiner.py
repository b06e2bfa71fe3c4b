"""Rejoining a contiguous slice of fields."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import overload

from splitjoin.core.range_normalizer import Interval
from splitjoin.core.splitter import check_delimiter
from splitjoin.datastructures.type_aliases import Delimiter, Field, ResolvedIndex


@overload
def join(
    fields: Sequence[Field],
    delimiter: Delimiter,
    lo: ResolvedIndex,
    hi: ResolvedIndex,
) -> str: ...


@overload
def join[T](
    fields: Sequence[T],
    delimiter: Delimiter,
    lo: ResolvedIndex,
    hi: ResolvedIndex,
    encoder: Callable[[T], Field],
) -> str: ...


def join[T](
    fields: Sequence[Field] | Sequence[T],
    delimiter: Delimiter,
    lo: ResolvedIndex,
    hi: ResolvedIndex,
    encoder: Callable[[T], Field] | None = None,
) -> str:
    """
    Join ``fields[lo:hi]`` with ``delimiter`` between consecutive fields.

    No delimiter is added before the first or after the last selected field.
    An empty selection (``lo >= hi``) joins to the empty string.

    Raises:
        ValueError: ``lo`` is negative or ``hi`` exceeds ``len(fields)``.
        InvalidDelimiterError: ``delimiter`` is not exactly one character.
    """
    check_delimiter(delimiter)
    if lo < 0 or hi > len(fields):
        raise ValueError(
            f"Interval [{lo}, {hi}) does not fit {len(fields)} fields"
        )
    if lo >= hi:
        return ""

    selected = fields[lo:hi]
    if encoder is None:
        return delimiter.join(selected)  # type: ignore[arg-type]
    return delimiter.join(encoder(field) for field in selected)  # type: ignore[arg-type]


def join_interval(
    fields: Sequence[Field], delimiter: Delimiter, interval: Interval
) -> str:
    return join(fields, delimiter, interval.lo, interval.hi)
