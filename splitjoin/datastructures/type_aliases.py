"""
Semantic type aliases for splitjoin.

These aliases keep signatures self-documenting: a field index and a field
count are both plain ints, but they mean different things.
"""

# Line and field types
type Line = str
type Field = str
type Delimiter = str  # Exactly one character
type RangeText = str  # Textual range specification, e.g. "1:-1"

# Index types
type FieldIndex = int  # Possibly negative index supplied by the user
type ResolvedIndex = int  # Non-negative index into a field sequence
type FieldCount = int
type LineNumber = int  # 1-based position of a line in the input
