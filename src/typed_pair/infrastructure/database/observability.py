"""Domain probes for pair column observability.

Probes capture domain-significant events of the column adapter without
cluttering the conversion code with logging concerns.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class PairColumnProbe(Protocol):
    """Domain probe for pair column conversions."""

    def pair_bound(self, pair_type: str, size: int) -> None:
        """Record that a pair was converted to its stored representation."""
        ...

    def pair_bind_failed(self, pair_type: str, error: Exception) -> None:
        """Record that a pair could not be converted for storage."""
        ...

    def pair_loaded(self, pair_type: str, source_type: str) -> None:
        """Record that a stored value was loaded into a pair."""
        ...

    def null_loaded(self, pair_type: str) -> None:
        """Record that a NULL column value was loaded."""
        ...

    def pair_load_failed(self, pair_type: str, error: Exception) -> None:
        """Record that a stored value could not be loaded into a pair."""
        ...


class DefaultPairColumnProbe:
    """Default implementation of PairColumnProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger(component="pair_column")

    def pair_bound(self, pair_type: str, size: int) -> None:
        """Record that a pair was converted to its stored representation."""
        self._logger.debug("pair_bound", pair_type=pair_type, size=size)

    def pair_bind_failed(self, pair_type: str, error: Exception) -> None:
        """Record that a pair could not be converted for storage."""
        self._logger.error(
            "pair_bind_failed",
            pair_type=pair_type,
            error=str(error),
            error_type=type(error).__name__,
        )

    def pair_loaded(self, pair_type: str, source_type: str) -> None:
        """Record that a stored value was loaded into a pair."""
        self._logger.debug(
            "pair_loaded",
            pair_type=pair_type,
            source_type=source_type,
        )

    def null_loaded(self, pair_type: str) -> None:
        """Record that a NULL column value was loaded."""
        self._logger.debug("pair_null_loaded", pair_type=pair_type)

    def pair_load_failed(self, pair_type: str, error: Exception) -> None:
        """Record that a stored value could not be loaded into a pair."""
        self._logger.error(
            "pair_load_failed",
            pair_type=pair_type,
            error=str(error),
            error_type=type(error).__name__,
        )
