"""
splitjoin - Python-style slicing of delimited fields

Splits each line on a single delimiter character, keeps a half-open range of
fields (``start:end``, negative indices counted from the end) and rejoins
them with the same delimiter.

```python
from splitjoin import process

process("/usr/lib/libfoo.so", "/", ":-1")  # "/usr/lib"
process("archive.tar.gz", ".", "1:")       # "tar.gz"
```
"""

from .core import (
    Interval,
    LineProcessor,
    RangeErrorPolicy,
    RangeSpec,
    SplitJoinError,
    join,
    normalize,
    parse_range_spec,
    process,
    split,
)
from .core.config import SplitJoinSettings

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    "Interval",
    "LineProcessor",
    "RangeErrorPolicy",
    "RangeSpec",
    "SplitJoinError",
    "SplitJoinSettings",
    "join",
    "normalize",
    "parse_range_spec",
    "process",
    "split",
]
