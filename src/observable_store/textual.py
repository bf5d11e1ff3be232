"""Textual integration for observable_store. Opt-in — requires textual.

Binds a namespace to widget-updating code. Guard, NoMatches handling and
thread marshaling live here so render callbacks stay plain functions.
"""

import logging
import threading
from contextlib import contextmanager

from textual.css.query import NoMatches

from observable_store.binding import ObserverBinding

logger = logging.getLogger("observable_store.textual")

# id(app) of every app inside pause(); bound renders for those apps are dropped.
_paused_apps: set[int] = set()


@contextmanager
def pause(app):
    """Drop store notifications to this app's bindings while the block runs.

    Use around widget replacement so renders never query a half-built tree.
    """
    key = id(app)
    _paused_apps.add(key)
    try:
        yield
    finally:
        _paused_apps.discard(key)


def is_safe(app) -> bool:
    """True when a binding may render into app: it is running and not paused."""
    return app.is_running and id(app) not in _paused_apps


def bind(app, store, namespace, render, **inputs) -> ObserverBinding:
    """Bind render to namespace, safely bridged to Textual widgets.

    Skips renders while the app is paused or not running, swallows NoMatches
    from widget queries, and marshals calls from other threads through
    app.call_from_thread. Returns the active binding; deactivate() it on unmount.

    Usage:
        class Header(Static):
            def on_mount(self):
                self._binding = bind(self.app, store, "user", self._render_user)

            def on_unmount(self):
                self._binding.deactivate()

            def _render_user(self, props):
                self.update(props["name"])
    """
    _main = threading.get_ident()

    def _guarded(props):
        if not is_safe(app):
            logger.debug("Skipped render of %r: app not ready", namespace)
            return
        if threading.get_ident() != _main:
            app.call_from_thread(_safe, props)
        else:
            _safe(props)

    def _safe(props):
        try:
            render(props)
        except NoMatches:
            logger.debug("Render of %r found no widget", namespace)

    return ObserverBinding(store, namespace, _guarded, inputs).activate()
