"""Observer bindings — keep a render callback in sync with one namespace.

A binding is the consumer side of the Store contract: it reads the namespace
once on activation, subscribes for every later change, and unsubscribes on
deactivation. What "render" means is up to the caller (a widget refresh, a
template, a print).

Usage:
    def render(props):
        label.update(f"{props['greeting']}, {props['name']}")

    with ObserverBinding(store, "user", render, {"greeting": "Hello"}):
        store.update("user", {"name": "Grace"})   # render called again
"""

from __future__ import annotations

import logging
from typing import Callable

from observable_store.exceptions import NamespaceNotFound
from observable_store.sanitize import JSONValue
from observable_store.store import Store

logger = logging.getLogger("observable_store.binding")

Render = Callable[[dict], None]


class ObserverBinding:
    """Subscribe a render callback to a namespace for the binding's active lifetime."""

    def __init__(
        self,
        store: Store,
        namespace: str,
        render: Render,
        inputs: dict | None = None,
    ) -> None:
        if not callable(render):
            raise TypeError(f"render must be callable, got {type(render).__name__}")
        if namespace not in store.namespaces:
            raise NamespaceNotFound(namespace)
        self._store = store
        self._namespace = namespace
        self._render = render
        self._inputs = dict(inputs) if inputs else {}
        self._observer_id: str | None = None

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def observer_id(self) -> str | None:
        return self._observer_id

    @property
    def active(self) -> bool:
        return self._observer_id is not None

    def props(self, data: JSONValue) -> dict:
        """Merge namespace data over the binding's other inputs."""
        if isinstance(data, dict):
            return {**self._inputs, **data}
        return {**self._inputs, self._namespace: data}

    def activate(self) -> ObserverBinding:
        if self._observer_id is not None:
            return self
        # Subscribe before the first render so updates issued by render are seen.
        self._observer_id = self._store.subscribe(self._namespace, self._on_change)
        logger.debug("Bound %s", self._observer_id)
        try:
            self._render(self.props(self._store.get(self._namespace)))
        except Exception:
            self.deactivate()
            raise
        return self

    def deactivate(self) -> None:
        if self._observer_id is None:
            return
        observer_id, self._observer_id = self._observer_id, None
        self._store.unsubscribe(self._namespace, observer_id)
        logger.debug("Unbound %s", observer_id)

    def _on_change(self, data: JSONValue) -> None:
        self._render(self.props(data))

    def __enter__(self) -> ObserverBinding:
        return self.activate()

    def __exit__(self, *exc_info) -> None:
        self.deactivate()

    def __repr__(self) -> str:
        state = "active" if self.active else "inactive"
        return f"ObserverBinding({self._namespace!r}, {state})"


def with_store(store: Store, namespace: str, render: Render, **inputs) -> ObserverBinding:
    """Create and activate a binding of render to namespace.

    Call .deactivate() on the result to stop updates.
    """
    return ObserverBinding(store, namespace, render, inputs).activate()
