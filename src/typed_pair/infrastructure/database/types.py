"""SQLAlchemy column type for pairs.

``PairType`` stores a pair as its JSON bytes and loads it back through the
pair's database-value adapter, so any column declared with it reads and
writes ``Pair`` objects directly::

    class Setting(Base):
        __tablename__ = "settings"

        id: Mapped[int] = mapped_column(primary_key=True)
        entry: Mapped[Pair[str, int] | None] = mapped_column(PairType(Pair[str, int]))
"""

from __future__ import annotations

from typing import Any

from sqlalchemy.engine import Dialect
from sqlalchemy.types import LargeBinary, TypeDecorator

from typed_pair.domain import Pair, PairError, UnsupportedSourceTypeError
from typed_pair.infrastructure.database.observability import (
    DefaultPairColumnProbe,
    PairColumnProbe,
)
from typed_pair.infrastructure.settings import get_settings


class PairType(TypeDecorator[Pair]):
    """Stores ``Pair`` values as JSON in a binary column.

    Args:
        pair_class: Parametrization used to decode stored values,
            e.g. ``Pair[int, str]``. Defaults to the untyped ``Pair``.
        strict: Reject lax coercions on load. None defers to
            ``PairSettings.strict_decoding``.
        probe: Observability probe; defaults to the structlog probe.
    """

    impl = LargeBinary
    cache_ok = True

    def __init__(
        self,
        pair_class: type[Pair] = Pair,
        *,
        strict: bool | None = None,
        probe: PairColumnProbe | None = None,
    ):
        super().__init__()
        self.pair_class = pair_class
        self.strict = strict
        self.probe = probe or DefaultPairColumnProbe()

    @property
    def python_type(self) -> type[Pair]:
        return Pair

    def _resolve_strict(self) -> bool:
        if self.strict is not None:
            return self.strict
        return get_settings().strict_decoding

    def process_bind_param(self, value: Any, dialect: Dialect) -> bytes | None:
        if value is None:
            return None
        pair_type = self.pair_class.__name__
        try:
            if not isinstance(value, Pair):
                raise UnsupportedSourceTypeError(type(value))
            stored = value.to_db_value()
        except PairError as exc:
            self.probe.pair_bind_failed(pair_type, exc)
            raise
        self.probe.pair_bound(pair_type, len(stored))
        return stored

    def process_result_value(self, value: Any, dialect: Dialect) -> Pair | None:
        pair_type = self.pair_class.__name__
        if value is None:
            self.probe.null_loaded(pair_type)
            return None
        try:
            pair = self.pair_class.from_db_source(value, strict=self._resolve_strict())
        except PairError as exc:
            self.probe.pair_load_failed(pair_type, exc)
            raise
        self.probe.pair_loaded(pair_type, type(value).__name__)
        return pair
