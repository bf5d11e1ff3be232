"""State anchor — plain Python structures that hold one engine's state.

Store instances keep all mutable data in a StoreState so the behavior in
store.py stays stateless apart from this one attribute.
"""

from __future__ import annotations

import secrets
from typing import Callable


class StoreState:
    __slots__ = ("storage", "observers", "log")

    def __init__(self, log: bool = False) -> None:
        self.storage: dict[str, object] = {}
        self.observers: dict[str, dict[str, Callable]] = {}  # ns -> {id: fn}
        self.log = log

    def reset(self, storage: dict[str, object], log: bool) -> None:
        """Replace storage and give every namespace a fresh, empty observer set."""
        self.storage = storage
        self.observers = {namespace: {} for namespace in storage}
        self.log = log


def new_observer_id(namespace: str, taken) -> str:
    while True:
        observer_id = f"{namespace}_{secrets.token_hex(6)}"
        if observer_id not in taken:
            return observer_id
