"""Backend lookup by name.

Built-in backends are always available. Third-party packages may add more
by registering a ``Backend`` subclass under the ``kv_namespace.backends``
entry-point group.
"""

from __future__ import annotations

from importlib.metadata import entry_points
from typing import Any

from .in_memory import InMemoryAsyncBackend
from .mapping import MappingBackend
from .nats import NatsBackend
from .postgres import PostgresBackend
from .protocol import Backend
from .redis import RedisBackend


ENTRY_POINT_GROUP = "kv_namespace.backends"

BUILTIN_BACKENDS: dict[str, type[Backend]] = {
    "memory": InMemoryAsyncBackend,
    "mapping": MappingBackend,
    "redis": RedisBackend,
    "postgres": PostgresBackend,
    "nats": NatsBackend,
}


def discover_backends() -> dict[str, Any]:
    """Return built-in backends merged with entry-point plugins."""
    backends: dict[str, Any] = dict(BUILTIN_BACKENDS)
    for ep in entry_points(group=ENTRY_POINT_GROUP):
        if ep.name not in backends:
            backends[ep.name] = ep.load()
    return backends


def available_backends() -> list[str]:
    """Return the sorted names accepted by ``create_backend``."""
    return sorted(discover_backends())


def create_backend(name: str, **kwargs: Any) -> Backend:
    """Instantiate the backend registered as ``name``.

    Raises
    ------
    ValueError
        If no backend is registered under ``name``.
    """
    backends = discover_backends()
    if name not in backends:
        available = ", ".join(sorted(backends)) or "(none)"
        msg = f"backend '{name}' not found. Available: {available}"
        raise ValueError(msg)
    return backends[name](**kwargs)
