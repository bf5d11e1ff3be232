"""Exception hierarchy for observable_store."""

from __future__ import annotations


class StoreError(Exception):
    """Base exception for all observable_store errors."""


class InvalidInitialization(StoreError, ValueError):
    """init() called without usable namespace data."""


class NamespaceNotFound(StoreError, LookupError):
    """The namespace was never declared by init()."""

    def __init__(self, namespace: str) -> None:
        self.namespace = namespace
        super().__init__(f"Namespace not found: {namespace!r}")


class InvalidMerge(StoreError, TypeError):
    """Merge update where the namespace value or the patch is not a dict."""

    def __init__(self, namespace: str, message: str) -> None:
        self.namespace = namespace
        super().__init__(message)


class InvalidPath(StoreError, ValueError):
    """Malformed dot-path."""
