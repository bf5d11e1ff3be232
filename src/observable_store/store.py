"""Store — namespaced observable key-value container.

A Store holds one JSON value per namespace. Namespaces are declared by init()
and are the unit of subscription: every update()/set() touching a namespace
synchronously fires all of its observers with the namespace's full value.

Usage:
    store = Store()
    store.init({"user": {"name": "Ada"}})

    observer_id = store.subscribe("user", lambda data: print(data["name"]))
    store.update("user", {"name": "Grace"})    # prints "Grace"
    store.set("user.name", "Alan")             # prints "Alan"
    store.unsubscribe("user", observer_id)

Notifications are not batched. A mutation issued from inside an observer runs
its own complete fire cycle before returning, so observers always end up
holding the latest value.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Callable

from observable_store import paths
from observable_store._anchor import StoreState, new_observer_id
from observable_store.exceptions import (
    InvalidInitialization,
    InvalidMerge,
    NamespaceNotFound,
)
from observable_store.sanitize import JSONValue, sanitize

logger = logging.getLogger("observable_store.store")

Observer = Callable[[JSONValue], None]


class Store:
    """Namespaced observable store engine."""

    __slots__ = ("_state",)

    def __init__(self, log: bool = False) -> None:
        self._state = StoreState(log=log)

    @property
    def namespaces(self) -> tuple[str, ...]:
        return tuple(self._state.storage)

    @property
    def log(self) -> bool:
        return self._state.log

    def init(self, data: Mapping[str, object] | None = None, log: bool = False) -> None:
        """Replace all namespaces with data. Existing observers are discarded.

        log turns the storage trace on or off for every later mutation.
        """
        if not isinstance(data, Mapping) or not data:
            raise InvalidInitialization("Store.init() requires a non-empty mapping of namespaces")
        storage: dict[str, JSONValue] = {}
        for namespace, value in data.items():
            if not isinstance(namespace, str) or not namespace or "." in namespace:
                raise InvalidInitialization(f"Invalid namespace name: {namespace!r}")
            storage[namespace] = sanitize(value)
        self._state.reset(storage, bool(log))
        self._trace()

    def update(self, namespace: str, data: object, merge: bool = True) -> None:
        """Merge data into a namespace (or replace it when merge is False), then fire."""
        storage = self._state.storage
        if namespace not in storage:
            raise NamespaceNotFound(namespace)
        incoming = sanitize(data)
        if merge:
            current = storage[namespace]
            if not isinstance(current, dict):
                raise InvalidMerge(namespace, f"Cannot merge into non-dict namespace {namespace!r}")
            if not isinstance(incoming, dict):
                raise InvalidMerge(namespace, f"Cannot merge non-dict data into {namespace!r}")
            storage[namespace] = {**current, **incoming}
        else:
            storage[namespace] = incoming
        self._trace()
        self.fire(namespace)

    def set(self, key: str, value: object) -> None:
        """Deep-set value at a dot-path, then fire the path's namespace."""
        segments = paths.split(key)
        namespace, rest = segments[0], segments[1:]
        storage = self._state.storage
        if namespace not in storage:
            raise NamespaceNotFound(namespace)
        storage[namespace] = paths.assign(storage[namespace], rest, sanitize(value))
        self._trace()
        self.fire(namespace)

    def get(self, key: str | None = None) -> JSONValue:
        """Read a dot-path. Returns None when it does not resolve.

        dicts and lists come back as shallow copies: the top level is safe to
        mutate, nested containers are still shared with the store. With no key,
        returns a shallow copy of the whole storage.
        """
        if key is None:
            return dict(self._state.storage)
        if not isinstance(key, str) or not key:
            return None
        value = paths.resolve(self._state.storage, key.split("."))
        if value is paths.MISSING:
            return None
        if isinstance(value, dict):
            return dict(value)
        if isinstance(value, list):
            return list(value)
        return value

    def subscribe(self, namespace: str, fn: Observer) -> str:
        """Register fn for notifications on namespace. Returns the observer id."""
        observers = self._state.observers.get(namespace)
        if observers is None:
            raise NamespaceNotFound(namespace)
        if not callable(fn):
            raise TypeError(f"Observer must be callable, got {type(fn).__name__}")
        observer_id = new_observer_id(namespace, observers)
        observers[observer_id] = fn
        logger.debug("Subscribed %s", observer_id)
        return observer_id

    def unsubscribe(self, namespace: str, observer_id: str) -> None:
        """Remove a registration. Unknown ids and namespaces are ignored."""
        observers = self._state.observers.get(namespace)
        if observers is not None and observers.pop(observer_id, None) is not None:
            logger.debug("Unsubscribed %s", observer_id)

    def observer_count(self, namespace: str) -> int:
        return len(self._state.observers.get(namespace, ()))

    def fire(self, namespace: str) -> None:
        """Call every observer of namespace with its current value.

        Iterates a snapshot of the registry. Observers removed while firing are
        skipped, and each call receives a deep copy of the value at call time.
        """
        for observer_id, fn in list(self._state.observers.get(namespace, {}).items()):
            if observer_id not in self._state.observers.get(namespace, {}):
                continue
            fn(copy.deepcopy(self._state.storage[namespace]))

    def _trace(self) -> None:
        if self._state.log:
            logger.info("Store %s", self._state.storage)

    def __repr__(self) -> str:
        return f"Store(namespaces={list(self._state.storage)!r})"
