"""Backend interface definitions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from kv_namespace.records import Record


class Backend(ABC):
    """Async record storage consumed by ``KVNamespace``."""

    @abstractmethod
    async def get(self, key: str) -> Record | None:
        """Return the record for key, or None when key does not exist."""

    @abstractmethod
    async def set(self, key: str, record: Record) -> None:
        """Insert or replace the record for key."""

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Delete key if present."""

    @abstractmethod
    def entries(self) -> AsyncIterator[tuple[str, Record]]:
        """Yield every stored ``(key, record)`` pair in no particular order."""

    @abstractmethod
    async def close(self) -> None:
        """Close any backend resources."""
