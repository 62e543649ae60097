"""Decoding of the server's response envelopes.

A successful response is a JSON object carrying ``success``/``status``
flags, optional pagination counters and one payload field whose name
varies per endpoint (``channels``, ``members``, ``messages``, ...).
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

from chat_client.application.exceptions import (
    MalformedEnvelopeError,
    MalformedMetadataFieldError,
    PayloadDecodeError,
)

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")

_IGNORED_FIELDS = frozenset({"status", "success"})
_METADATA_FIELDS = frozenset({"total", "offset", "count"})


@dataclass(frozen=True, slots=True)
class Envelope(Generic[T]):
    result: T | None
    total: int | None = None
    offset: int | None = None
    count: int | None = None


@dataclass(frozen=True, slots=True)
class MultiEnvelope(Generic[U, R]):
    update: U
    remove: R


@lru_cache(maxsize=None)
def _adapter(payload_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(payload_type)


def decode(raw: bytes | str, payload_type: type[T]) -> Envelope[T]:
    """Decode ``raw`` into an :class:`Envelope` whose payload is ``payload_type``.

    Fields are consumed in document order, so when the server repeats a
    counter or sends more than one array/object field the last one wins.
    """
    result: T | None = None
    metadata: dict[str, int | None] = {}
    for name, value in _load_pairs(raw):
        if name in _IGNORED_FIELDS:
            continue
        if name in _METADATA_FIELDS:
            metadata[name] = _read_long(name, value)
        elif isinstance(value, (list, dict)):
            result = _validate(payload_type, value)
    return Envelope(result=result, **metadata)


def decode_multi(
    raw: bytes | str, update_type: type[U], remove_type: type[R],
) -> MultiEnvelope[U, R]:
    """Decode an ``{"update": [...], "remove": [...]}`` response."""
    body = dict(_load_pairs(raw))
    update = _validate(update_type, body.get("update") or [])
    remove = _validate(remove_type, body.get("remove") or [])
    return MultiEnvelope(update=update, remove=remove)


def decode_object(raw: bytes | str, payload_type: type[T]) -> T:
    """Decode a response whose top-level object is the payload itself."""
    return _validate(payload_type, dict(_load_pairs(raw)))


def encode_envelope(envelope: Envelope[Any]) -> bytes:
    """Envelopes are read-only; this writes nothing."""
    return b""


def _load_pairs(raw: bytes | str) -> list[tuple[str, Any]]:
    """Return the top-level (name, value) pairs in document order, repeats included."""
    objects: list[list[tuple[str, Any]]] = []

    def _collect(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
        objects.append(pairs)
        return dict(pairs)

    try:
        body = json.loads(raw, object_pairs_hook=_collect)
    except ValueError as exc:
        raise MalformedEnvelopeError(f"Response is not valid JSON: {exc}") from exc
    if not isinstance(body, dict):
        raise MalformedEnvelopeError(
            f"Expected a JSON object, got {type(body).__name__}"
        )
    # Nested objects complete first, so the top level is the last one collected.
    return objects[-1]


def _read_long(name: str, value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise MalformedMetadataFieldError(name, value)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            pass
    raise MalformedMetadataFieldError(name, value)


def _validate(payload_type: type[T], value: Any) -> T:
    try:
        return _adapter(payload_type).validate_python(value)
    except ValidationError as exc:
        raise PayloadDecodeError(str(exc)) from exc
