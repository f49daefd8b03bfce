"""SQLAlchemy integration for pair columns."""

from typed_pair.infrastructure.database.observability import (
    DefaultPairColumnProbe,
    PairColumnProbe,
)
from typed_pair.infrastructure.database.types import PairType

__all__ = [
    "DefaultPairColumnProbe",
    "PairColumnProbe",
    "PairType",
]
