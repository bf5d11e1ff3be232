"""Tests for observable_store.textual — Textual integration layer."""

import threading

import pytest
from textual.css.query import NoMatches

from observable_store import Store
from observable_store import textual as stx


class _MockApp:
    """Minimal mock matching the Textual App interface stx needs."""

    def __init__(self, *, is_running=True):
        self.is_running = is_running
        self._call_from_thread_log = []

    def call_from_thread(self, fn, *args):
        self._call_from_thread_log.append((fn, args))
        fn(*args)


@pytest.fixture
def store():
    s = Store()
    s.init({"ns": {"foo": "bar"}})
    return s


class TestBind:
    def test_skips_when_not_running(self, store):
        app = _MockApp(is_running=False)
        renders = []
        stx.bind(app, store, "ns", renders.append)
        store.update("ns", {"foo": "baz"})
        assert renders == []

    def test_skips_during_pause(self, store):
        app = _MockApp()
        renders = []
        stx.bind(app, store, "ns", renders.append)
        with stx.pause(app):
            store.update("ns", {"foo": "baz"})
        assert renders == [{"foo": "bar"}]

    def test_renders_when_safe(self, store):
        app = _MockApp()
        renders = []
        stx.bind(app, store, "ns", renders.append, title="t")
        store.update("ns", {"foo": "baz"})
        assert renders == [{"title": "t", "foo": "bar"}, {"title": "t", "foo": "baz"}]

    def test_catches_nomatch(self, store):
        """NoMatches from widget queries are silently swallowed."""
        app = _MockApp()

        def _raise_nomatch(props):
            raise NoMatches("StatusFooter")

        # Should not raise
        b = stx.bind(app, store, "ns", _raise_nomatch)
        store.update("ns", {"foo": "baz"})
        b.deactivate()

    def test_propagates_real_errors(self, store):
        """Non-NoMatches exceptions propagate normally."""
        app = _MockApp()
        calls = []

        def _raise_after_first(props):
            calls.append(props)
            if len(calls) > 1:
                raise ValueError("boom")

        stx.bind(app, store, "ns", _raise_after_first)
        with pytest.raises(ValueError, match="boom"):
            store.update("ns", {"foo": "baz"})

    def test_marshals_from_background_thread(self, store):
        app = _MockApp()
        renders = []
        stx.bind(app, store, "ns", renders.append)
        t = threading.Thread(target=lambda: store.update("ns", {"foo": "thread"}))
        t.start()
        t.join()
        assert renders[-1] == {"foo": "thread"}
        assert len(app._call_from_thread_log) == 1

    def test_main_thread_is_direct(self, store):
        app = _MockApp()
        stx.bind(app, store, "ns", lambda props: None)
        store.update("ns", {"foo": "baz"})
        assert app._call_from_thread_log == []

    def test_deactivate_stops_renders(self, store):
        app = _MockApp()
        renders = []
        b = stx.bind(app, store, "ns", renders.append)
        b.deactivate()
        store.update("ns", {"foo": "baz"})
        assert renders == [{"foo": "bar"}]


class TestPause:
    def test_is_safe(self):
        app = _MockApp()
        assert stx.is_safe(app)
        with stx.pause(app):
            assert not stx.is_safe(app)
        assert stx.is_safe(app)

    def test_pause_is_per_app(self):
        a, b = _MockApp(), _MockApp()
        with stx.pause(a):
            assert stx.is_safe(b)

    def test_not_running_is_unsafe(self):
        assert not stx.is_safe(_MockApp(is_running=False))
