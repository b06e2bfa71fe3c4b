"""Field splitting on a single delimiter character."""

from __future__ import annotations

from collections.abc import Callable
from typing import overload

from splitjoin.core.errors import InvalidDelimiterError
from splitjoin.datastructures.type_aliases import Delimiter, Field, Line


def check_delimiter(delimiter: Delimiter) -> Delimiter:
    """Return ``delimiter`` unchanged, or raise if it is not one character."""
    if len(delimiter) != 1:
        raise InvalidDelimiterError(delimiter)
    return delimiter


@overload
def split(line: Line, delimiter: Delimiter) -> list[Field]: ...


@overload
def split[T](
    line: Line, delimiter: Delimiter, decoder: Callable[[Field], T]
) -> list[T]: ...


def split[T](
    line: Line,
    delimiter: Delimiter,
    decoder: Callable[[Field], T] | None = None,
) -> list[Field] | list[T]:
    """
    Split ``line`` at every occurrence of ``delimiter``.

    The text after the last delimiter always forms the final field, even when
    it is empty, so ``N`` delimiters always produce ``N + 1`` fields:

        >>> split("a,,b", ",")
        ['a', '', 'b']
        >>> split("", ",")
        ['']

    Args:
        line: The text to split.
        delimiter: A single character.
        decoder: Optional conversion applied to every field.

    Raises:
        InvalidDelimiterError: ``delimiter`` is not exactly one character.
    """
    check_delimiter(delimiter)
    fields = line.split(delimiter)
    if decoder is None:
        return fields
    return [decoder(field) for field in fields]
