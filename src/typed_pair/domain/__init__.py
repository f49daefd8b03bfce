"""Pair domain module.

Contains the Pair value type and its error taxonomy. This layer is
framework-agnostic: it depends on pydantic only.
"""

from typed_pair.domain.exceptions import (
    PairDecodeError,
    PairEncodeError,
    PairError,
    UnsupportedSourceTypeError,
)
from typed_pair.domain.pair import Pair

__all__ = [
    "Pair",
    "PairDecodeError",
    "PairEncodeError",
    "PairError",
    "UnsupportedSourceTypeError",
]
