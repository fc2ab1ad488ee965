"""In-memory backend implementation."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from typing_extensions import override

from .protocol import Backend


if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from kv_namespace.records import Record


class InMemoryAsyncBackend(Backend):
    """Simple in-memory backend for local development and tests."""

    def __init__(self) -> None:
        super().__init__()
        self._store: dict[str, Record] = {}
        self._lock = asyncio.Lock()

    @override
    async def get(self, key: str) -> Record | None:
        """Return the record for key, or None when key does not exist."""
        async with self._lock:
            return self._store.get(key)

    @override
    async def set(self, key: str, record: Record) -> None:
        """Insert or replace the record for key."""
        async with self._lock:
            self._store[key] = record

    @override
    async def delete(self, key: str) -> None:
        """Delete key if present."""
        async with self._lock:
            _ = self._store.pop(key, None)

    @override
    async def entries(self) -> AsyncIterator[tuple[str, Record]]:
        """Yield a copy of the stored pairs taken under the lock."""
        async with self._lock:
            snapshot = list(self._store.items())
        for item in snapshot:
            yield item

    @override
    async def close(self) -> None:
        """Release backend resources."""
        return

    def __len__(self) -> int:
        return len(self._store)
