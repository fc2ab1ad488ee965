from typing import Any

import pytest

from kv_namespace.backends import registry
from kv_namespace.backends.in_memory import InMemoryAsyncBackend
from kv_namespace.backends.mapping import MappingBackend
from kv_namespace.backends.redis import RedisBackend


class _PluginBackend(InMemoryAsyncBackend):
    pass


class _FakeEntryPoint:
    def __init__(self, name: str, target: Any) -> None:
        self.name = name
        self._target = target

    def load(self) -> Any:
        return self._target


def test_available_backends_lists_builtins() -> None:
    assert {"memory", "mapping", "redis", "postgres", "nats"} <= set(registry.available_backends())


def test_create_backend_builds_memory_backend() -> None:
    assert isinstance(registry.create_backend("memory"), InMemoryAsyncBackend)


def test_create_backend_passes_kwargs() -> None:
    data: dict[str, Any] = {}
    backend = registry.create_backend("mapping", mapping=data)
    assert isinstance(backend, MappingBackend)
    assert backend.mapping is data

    redis_backend = registry.create_backend("redis", client=object(), namespace="ns:")
    assert isinstance(redis_backend, RedisBackend)


def test_create_backend_unknown_name_lists_available() -> None:
    with pytest.raises(ValueError, match="backend 'dynamo' not found. Available: .*memory"):
        _ = registry.create_backend("dynamo")


def test_entry_point_plugins_are_discovered(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_entry_points(group: str) -> list[_FakeEntryPoint]:
        assert group == registry.ENTRY_POINT_GROUP
        return [_FakeEntryPoint("plugin", _PluginBackend), _FakeEntryPoint("memory", object)]

    monkeypatch.setattr(registry, "entry_points", fake_entry_points)

    assert isinstance(registry.create_backend("plugin"), _PluginBackend)
    assert registry.discover_backends()["memory"] is InMemoryAsyncBackend
