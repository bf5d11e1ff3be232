"""Tests for the package-level default store and configuration."""

import pytest

import observable_store
from observable_store import config


@pytest.fixture(autouse=True)
def fresh_default_store():
    observable_store.init({"ns": {"foo": "bar"}}, False)
    yield


class TestDefaultStore:
    def test_wrappers_share_one_instance(self):
        log = []
        observer_id = observable_store.subscribe("ns", log.append)
        observable_store.update("ns", {"foo": "baz"})
        observable_store.set("ns.count", 1)
        observable_store.unsubscribe("ns", observer_id)
        observable_store.update("ns", {"foo": "after"})
        assert log == [{"foo": "baz"}, {"foo": "baz", "count": 1}]
        assert observable_store.get("ns.foo") == "after"
        assert observable_store.default_store.get("ns.count") == 1

    def test_with_store(self):
        renders = []
        b = observable_store.with_store("ns", renders.append, title="t")
        observable_store.update("ns", {"foo": "baz"})
        b.deactivate()
        assert renders == [{"title": "t", "foo": "bar"}, {"title": "t", "foo": "baz"}]

    def test_independent_instances(self):
        other = observable_store.Store()
        other.init({"ns": {"foo": "other"}})
        assert observable_store.get("ns.foo") == "bar"
        assert other.get("ns.foo") == "other"

    def test_version(self):
        assert isinstance(observable_store.__version__, str)


class TestConfig:
    @pytest.mark.parametrize("raw", ["1", "true", "YES", " on "])
    def test_truthy(self, monkeypatch, raw):
        monkeypatch.setenv(config.LOG_ENV_VAR, raw)
        assert config.default_log() is True

    @pytest.mark.parametrize("raw", ["0", "false", "No", "off", "maybe"])
    def test_falsy_or_unknown(self, monkeypatch, raw):
        monkeypatch.setenv(config.LOG_ENV_VAR, raw)
        assert config.default_log() is False

    def test_unset(self, monkeypatch):
        monkeypatch.delenv(config.LOG_ENV_VAR, raising=False)
        assert config.default_log() is False
