"""Generic two-element pair with JSON and database-value adapters."""

from typed_pair.domain import (
    Pair,
    PairDecodeError,
    PairEncodeError,
    PairError,
    UnsupportedSourceTypeError,
)

__all__ = [
    "Pair",
    "PairDecodeError",
    "PairEncodeError",
    "PairError",
    "UnsupportedSourceTypeError",
]
