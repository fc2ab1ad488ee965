"""Backend contracts and implementations."""

from .in_memory import InMemoryAsyncBackend
from .mapping import MappingBackend
from .nats import NatsBackend
from .postgres import PostgresBackend
from .protocol import Backend
from .redis import RedisBackend
from .registry import available_backends, create_backend


__all__ = [
    "Backend",
    "InMemoryAsyncBackend",
    "MappingBackend",
    "NatsBackend",
    "PostgresBackend",
    "RedisBackend",
    "available_backends",
    "create_backend",
]
