"""Sanitization — normalize arbitrary input into the JSON value model.

Every value entering a Store goes through sanitize(). The result is built from
fresh containers only, so nothing stored shares identity with caller objects.

Normalization follows JSON encoding semantics:
- NaN and +/-Infinity become None
- dict members with unsupported values (callables, arbitrary objects) are dropped
- list items with unsupported values become None
- tuples become lists, non-str keys are converted the way json.dumps does
- a cyclic back-reference is treated as unsupported
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Union

JSONValue = Union[dict[str, "JSONValue"], list["JSONValue"], str, int, float, bool, None]

_DROP = object()


def sanitize(value: object) -> JSONValue:
    """Return a deep, JSON-safe copy of value."""
    result = _normalize(value, set())
    return None if result is _DROP else result


def is_json_value(value: object) -> bool:
    """True when sanitize() would return value without losing anything."""
    return sanitize(value) == value


def _normalize(value: object, ancestors: set[int]) -> object:
    if value is None:
        return None
    if isinstance(value, bool):
        return bool(value)
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        return float(value) if math.isfinite(value) else None
    if isinstance(value, str):
        return str(value)
    if isinstance(value, Mapping):
        return _container(value, ancestors, _normalize_mapping)
    if isinstance(value, (list, tuple)):
        return _container(value, ancestors, _normalize_sequence)
    return _DROP


def _container(value, ancestors: set[int], normalize) -> object:
    marker = id(value)
    if marker in ancestors:
        return _DROP
    ancestors.add(marker)
    try:
        return normalize(value, ancestors)
    finally:
        ancestors.discard(marker)


def _normalize_mapping(value: Mapping, ancestors: set[int]) -> dict[str, JSONValue]:
    result: dict[str, JSONValue] = {}
    for key, item in value.items():
        name = _key(key)
        if name is None:
            continue
        normalized = _normalize(item, ancestors)
        if normalized is not _DROP:
            result[name] = normalized
    return result


def _normalize_sequence(value, ancestors: set[int]) -> list[JSONValue]:
    result: list[JSONValue] = []
    for item in value:
        normalized = _normalize(item, ancestors)
        result.append(None if normalized is _DROP else normalized)
    return result


def _key(key: object) -> str | None:
    """Convert a mapping key to its JSON text, or None when it cannot be one."""
    if isinstance(key, str):
        return str(key)
    if key is None:
        return "null"
    if isinstance(key, bool):
        return "true" if key else "false"
    if isinstance(key, int):
        return str(int(key))
    if isinstance(key, float):
        if math.isnan(key):
            return "NaN"
        if math.isinf(key):
            return "Infinity" if key > 0 else "-Infinity"
        return repr(float(key))
    return None
