"""Shared datastructures and type aliases for splitjoin."""

from __future__ import annotations

from .type_aliases import (
    Delimiter,
    Field,
    FieldCount,
    FieldIndex,
    Line,
    LineNumber,
    RangeText,
    ResolvedIndex,
)

__all__ = [
    "Delimiter",
    "Field",
    "FieldCount",
    "FieldIndex",
    "Line",
    "LineNumber",
    "RangeText",
    "ResolvedIndex",
]
