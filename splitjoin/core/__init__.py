"""
splitjoin core module.

Pure split, range normalization and join operations plus the per-line
pipeline that composes them.
"""

from .errors import (
    ArgumentCountError,
    InvalidDelimiterError,
    MissingDelimiterError,
    MultipleDelimiterError,
    MultipleDelimiterWarning,
    RangeBoundsError,
    RangeOverflowError,
    RangeParseError,
    RangeSpecError,
    RangeUnderflowError,
    SplitJoinError,
)
from .joiner import join, join_interval
from .line_processor import (
    LineProcessor,
    ProcessingStats,
    RangeErrorPolicy,
    process,
)
from .range_normalizer import (
    Interval,
    RangeSpec,
    normalize,
    parse_range_spec,
    resolve_index,
)
from .splitter import check_delimiter, split

__all__ = [
    "ArgumentCountError",
    "InvalidDelimiterError",
    "Interval",
    "LineProcessor",
    "MissingDelimiterError",
    "MultipleDelimiterError",
    "MultipleDelimiterWarning",
    "ProcessingStats",
    "RangeBoundsError",
    "RangeErrorPolicy",
    "RangeOverflowError",
    "RangeParseError",
    "RangeSpec",
    "RangeSpecError",
    "RangeUnderflowError",
    "SplitJoinError",
    "check_delimiter",
    "join",
    "join_interval",
    "normalize",
    "parse_range_spec",
    "process",
    "resolve_index",
    "split",
]
