"""Backend adapter over a plain synchronous mapping."""

from __future__ import annotations

from typing import TYPE_CHECKING

from typing_extensions import override

from .protocol import Backend


if TYPE_CHECKING:
    from collections.abc import AsyncIterator, MutableMapping

    from kv_namespace.records import Record


class MappingBackend(Backend):
    """Expose any ``MutableMapping[str, Record]`` through the async backend API.

    The mapping is used by reference, so callers that keep a handle on it see
    every write. Operations run inline without suspending.
    """

    def __init__(self, mapping: MutableMapping[str, Record] | None = None) -> None:
        super().__init__()
        self._mapping: MutableMapping[str, Record] = {} if mapping is None else mapping

    @property
    def mapping(self) -> MutableMapping[str, Record]:
        return self._mapping

    @override
    async def get(self, key: str) -> Record | None:
        """Return the record for key, or None when key does not exist."""
        return self._mapping.get(key)

    @override
    async def set(self, key: str, record: Record) -> None:
        """Insert or replace the record for key."""
        self._mapping[key] = record

    @override
    async def delete(self, key: str) -> None:
        """Delete key if present."""
        _ = self._mapping.pop(key, None)

    @override
    async def entries(self) -> AsyncIterator[tuple[str, Record]]:
        """Yield a copy of the mapping's items."""
        for item in list(self._mapping.items()):
            yield item

    @override
    async def close(self) -> None:
        """Release backend resources."""
        return
