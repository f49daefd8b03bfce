"""Domain exceptions for the pair value type.

Every failure is raised synchronously to the immediate caller. Nothing in
the domain layer logs, retries or swallows these errors.
"""

from __future__ import annotations

from typing import Any


class PairError(Exception):
    """Base exception for pair conversions."""

    pass


class PairEncodeError(PairError):
    """Raised when a field value cannot be serialized to the wire format.

    The serializer's own error is chained as ``__cause__``.
    """

    pass


class PairDecodeError(PairError):
    """Raised when input does not decode into the expected pair.

    Covers invalid JSON, a payload that is not a ``{"key", "value"}`` object,
    and field values that do not match their static types.
    """

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.errors = errors or []


class UnsupportedSourceTypeError(PairError, TypeError):
    """Raised when a database source is neither null, bytes nor text."""

    def __init__(self, source_type: type):
        super().__init__(
            f"pair: unexpected source data type: {source_type.__name__}"
        )
        self.source_type = source_type
