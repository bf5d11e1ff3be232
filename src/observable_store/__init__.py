"""observable_store: namespaced, observable in-memory state for UI components."""

from importlib.metadata import version as _version

__version__ = _version("observable-store")

from observable_store.config import default_log
from observable_store.exceptions import (
    StoreError,
    InvalidInitialization,
    NamespaceNotFound,
    InvalidMerge,
    InvalidPath,
)
from observable_store.sanitize import sanitize, is_json_value
from observable_store.store import Store
from observable_store.binding import ObserverBinding
from observable_store.binding import with_store as _with_store
# textual NOT auto-imported — opt-in only

# Application-level convenience instance. Create your own Store for isolation.
default_store = Store(log=default_log())

init = default_store.init
update = default_store.update
set = default_store.set
get = default_store.get
subscribe = default_store.subscribe
unsubscribe = default_store.unsubscribe


def with_store(namespace, render, **inputs) -> ObserverBinding:
    """Bind render to a namespace of the default store."""
    return _with_store(default_store, namespace, render, **inputs)


__all__ = [
    "Store",
    "ObserverBinding",
    "StoreError",
    "InvalidInitialization",
    "NamespaceNotFound",
    "InvalidMerge",
    "InvalidPath",
    "sanitize",
    "is_json_value",
    "default_store",
    "init",
    "update",
    "set",
    "get",
    "subscribe",
    "unsubscribe",
    "with_store",
]
