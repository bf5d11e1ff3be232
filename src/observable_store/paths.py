"""Dot-path addressing — "namespace.sub.field" style keys.

Segments index dicts by key and lists by non-negative integer position.
"""

from __future__ import annotations

from observable_store.exceptions import InvalidPath

MISSING = object()


def split(key: str) -> list[str]:
    """Split a dot-path into its segments. Raises InvalidPath when malformed."""
    if not isinstance(key, str) or not key:
        raise InvalidPath(f"Invalid path: {key!r}")
    segments = key.split(".")
    if any(segment == "" for segment in segments):
        raise InvalidPath(f"Invalid path: {key!r}")
    return segments


def index_of(segment: str) -> int | None:
    if segment.isascii() and segment.isdigit() and (segment == "0" or not segment.startswith("0")):
        return int(segment)
    return None


def resolve(node: object, segments: list[str]) -> object:
    """Walk segments down from node. Returns MISSING when the path does not exist."""
    for segment in segments:
        if isinstance(node, dict):
            node = node.get(segment, MISSING)
        elif isinstance(node, list):
            index = index_of(segment)
            if index is None or index >= len(node):
                return MISSING
            node = node[index]
        else:
            return MISSING
        if node is MISSING:
            return MISSING
    return node


def assign(node: object, segments: list[str], value: object) -> object:
    """Deep-set value at segments below node and return the (possibly new) node.

    Containers on the way are updated in place. Missing or scalar steps are
    replaced by a list when the next segment is an index, a dict otherwise.
    Lists are padded with None up to the target index. A non-index segment on
    an existing list leaves the list unchanged.
    """
    if not segments:
        return value
    head, rest = segments[0], segments[1:]
    index = index_of(head)

    if isinstance(node, list) and index is not None:
        if index >= len(node):
            node.extend([None] * (index + 1 - len(node)))
        node[index] = assign(node[index], rest, value)
        return node
    if isinstance(node, list):
        return node

    if not isinstance(node, dict):
        if index is not None:
            node = [None] * index + [assign(MISSING, rest, value)]
            return node
        node = {}
    node[head] = assign(node.get(head, MISSING), rest, value)
    return node
