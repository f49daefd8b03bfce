"""The Pair value type.

A pair holds two independently typed values and knows how to convert itself
to and from the JSON wire format ``{"key": <first>, "value": <second>}``.
The same wire format backs the database-value adapter (``to_db_value`` /
``scan``), so a pair stored through a column can be read back by any JSON
consumer.

``Pair`` is a pydantic generic model. A parametrization such as
``Pair[int, str]`` is a concrete class whose field types drive decoding;
a bare ``Pair`` treats both fields as ``Any``.
"""

from __future__ import annotations

import json
import math
from typing import Any, Generic, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    ValidationError,
    field_serializer,
)

from typed_pair.domain.exceptions import (
    PairDecodeError,
    PairEncodeError,
    UnsupportedSourceTypeError,
)

F = TypeVar("F")
S = TypeVar("S")

JsonInput = bytes | bytearray | str


class Pair(BaseModel, Generic[F, S]):
    """Two values of (possibly) different types.

    Use :meth:`of` to build a pair from values already in hand. The keyword
    constructor (``Pair[int, str](key=1, value="a")``) validates its input
    against the parametrization the same way :meth:`decode` does.

    Attributes:
        first: First element, serialized under ``"key"``
        second: Second element, serialized under ``"value"``
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    first: F = Field(alias="key")
    second: S = Field(alias="value")

    @classmethod
    def of(cls, first: F, second: S) -> Pair[F, S]:
        """Create a pair holding the given values as-is.

        Never fails: values are stored without validation or copying.
        """
        return cls.model_construct(first=first, second=second)

    @field_serializer("first", "second", mode="wrap")
    def serialize_finite(
        self,
        value: Any,
        handler: SerializerFunctionWrapHandler,
        info: SerializationInfo,
    ) -> Any:
        # JSON has no NaN or infinity; pydantic would silently emit null.
        if info.mode_is_json():
            _reject_non_finite(value)
        return handler(value)

    def __str__(self) -> str:
        """Render ``(first, second)`` in debug form.

        Strings are double-quoted at any depth, including inside lists,
        tuples and dicts. Other values render through ``repr()``.
        """
        return f"({_debug_repr(self.first)}, {_debug_repr(self.second)})"

    def encode(self) -> bytes:
        """Serialize the pair to compact JSON bytes.

        Returns:
            UTF-8 JSON with ``key`` before ``value``

        Raises:
            PairEncodeError: If either field cannot be serialized, holds a
                NaN or infinite float (at any depth) or is cyclic
        """
        try:
            return self.model_dump_json(by_alias=True).encode("utf-8")
        except ValueError as exc:
            raise PairEncodeError(f"pair: cannot encode: {exc}") from exc

    @classmethod
    def decode(cls, data: JsonInput, *, strict: bool = True) -> Pair[F, S]:
        """Parse a pair from its JSON wire format.

        Both ``key`` and ``value`` are required; their order does not matter
        and unknown keys are ignored.

        Args:
            data: JSON text as bytes or str
            strict: Reject lax coercions such as ``"42"`` for an int field

        Returns:
            A new pair of this class's parametrization

        Raises:
            PairDecodeError: If the input is not valid JSON, is not a
                key/value object, or a value does not match its field type
        """
        try:
            return cls.model_validate_json(data, strict=strict)
        except ValidationError as exc:
            raise PairDecodeError(
                f"pair: cannot decode: {exc}",
                errors=exc.errors(include_url=False),
            ) from exc

    def load_json(self, data: JsonInput, *, strict: bool = True) -> None:
        """Replace both fields with values decoded from ``data``.

        Fields are assigned only after the whole payload decoded, so a
        failure leaves the pair exactly as it was.
        """
        decoded = type(self).decode(data, strict=strict)
        self.first = decoded.first
        self.second = decoded.second

    def to_db_value(self) -> bytes:
        """Return the storable representation of the pair (its JSON bytes)."""
        return self.encode()

    def scan(self, src: object, *, strict: bool = True) -> None:
        """Populate the pair from a value read out of a database.

        ``None`` leaves the pair untouched. Bytes and text are decoded as
        JSON and replace both fields atomically.

        Raises:
            UnsupportedSourceTypeError: If ``src`` is any other type
            PairDecodeError: If the stored JSON does not decode
        """
        if src is None:
            return
        self.load_json(_source_text(src), strict=strict)

    @classmethod
    def from_db_source(cls, src: object, *, strict: bool = True) -> Pair[F, S] | None:
        """Build a new pair from a database value, or None for SQL NULL."""
        if src is None:
            return None
        return cls.decode(_source_text(src), strict=strict)


def _reject_non_finite(value: Any, seen: set[int] | None = None) -> None:
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"unsupported float value: {value!r}")
        return
    if isinstance(value, dict):
        children = [*value.keys(), *value.values()]
    elif isinstance(value, (list, tuple, set, frozenset)):
        children = list(value)
    else:
        return
    if seen is None:
        seen = set()
    # Cycles are left for the serializer to report.
    if id(value) in seen:
        return
    seen.add(id(value))
    for child in children:
        _reject_non_finite(child, seen)


def _debug_repr(value: Any, seen: frozenset[int] = frozenset()) -> str:
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if type(value) not in (list, tuple, dict):
        return repr(value)
    if id(value) in seen:
        return {list: "[...]", tuple: "(...)", dict: "{...}"}[type(value)]
    seen = seen | {id(value)}
    if isinstance(value, dict):
        items = ", ".join(
            f"{_debug_repr(k, seen)}: {_debug_repr(v, seen)}" for k, v in value.items()
        )
        return "{" + items + "}"
    parts = [_debug_repr(item, seen) for item in value]
    if isinstance(value, tuple):
        if len(parts) == 1:
            return f"({parts[0]},)"
        return "(" + ", ".join(parts) + ")"
    return "[" + ", ".join(parts) + "]"


def _source_text(src: object) -> JsonInput:
    if isinstance(src, memoryview):
        return src.tobytes()
    if isinstance(src, (bytes, bytearray, str)):
        return src
    raise UnsupportedSourceTypeError(type(src))
