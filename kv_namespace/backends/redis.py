"""Redis-compatible backend implementation."""

from __future__ import annotations

import logging
import re
from inspect import isawaitable
from typing import TYPE_CHECKING, Any

from typing_extensions import override


try:
    import redis.asyncio as redis_async
except ImportError:  # pragma: no cover - exercised when dependency is absent
    redis_async = None

from kv_namespace.exceptions import BackendUnavailableError
from kv_namespace.records import dump_record, load_record

from .protocol import Backend


if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from kv_namespace.records import Record


logger = logging.getLogger(__name__)

_GLOB_SPECIAL = re.compile(r"([*?\[\]\\])")
_NAMESPACE_SEPARATOR = ":"


def _escape_glob(text: str) -> str:
    return _GLOB_SPECIAL.sub(r"\\\1", text)


def _validate_namespace(namespace: str) -> None:
    if not namespace:
        return
    if not namespace.endswith(_NAMESPACE_SEPARATOR) or _NAMESPACE_SEPARATOR in namespace[:-1]:
        msg = f"namespace must be a single segment ending with '{_NAMESPACE_SEPARATOR}', got {namespace!r}"
        raise ValueError(msg)


def _normalize_string(value: str | bytes | None) -> str | None:
    if value is None:
        return None
    if isinstance(value, bytes):
        return value.decode()
    return value


class RedisBackend(Backend):
    """Redis-compatible async backend using ``redis.asyncio`` client APIs.

    Records are stored as JSON documents under ``namespace + key`` so several
    namespaces can share one database. A namespace is one segment ending with
    ``:`` (for example ``tenant1:``), so no namespace is a prefix of another.
    The empty namespace sees every key in the database.
    """

    def __init__(
        self,
        url: str = "redis://localhost:6379/0",
        *,
        client: Any | None = None,
        namespace: str = "",
    ) -> None:
        """Create a backend from URL or an injected async client.

        Parameters
        ----------
        url
            Redis connection URL used when ``client`` is not provided.
        client
            Optional injected client with ``get/set/delete/scan_iter/aclose`` API.
        namespace
            Prefix prepended to every stored key and stripped when listing.
            Must be empty or a single segment ending with ``:``.
        """
        super().__init__()
        _validate_namespace(namespace)
        self._url = url
        self._namespace = namespace
        if client is not None:
            self._client = client
            return

        if redis_async is None:
            msg = "redis dependency is required for RedisBackend; install with `pip install kv-namespace[redis]`"
            raise BackendUnavailableError(msg)

        logger.info("connecting redis backend to %s", url)
        self._client = redis_async.from_url(url, decode_responses=True)

    def _storage_key(self, key: str) -> str:
        return f"{self._namespace}{key}"

    @override
    async def get(self, key: str) -> Record | None:
        """Return the record for key, or None when key does not exist."""
        raw = _normalize_string(await self._client.get(self._storage_key(key)))
        if raw is None:
            return None
        return load_record(raw)

    @override
    async def set(self, key: str, record: Record) -> None:
        """Insert or replace the record for key."""
        await self._client.set(self._storage_key(key), dump_record(record))

    @override
    async def delete(self, key: str) -> None:
        """Delete key if present."""
        await self._client.delete(self._storage_key(key))

    @override
    async def entries(self) -> AsyncIterator[tuple[str, Record]]:
        """Scan every key under the namespace and yield its record."""
        async for storage_key in self._client.scan_iter(match=f"{_escape_glob(self._namespace)}*"):
            normalized = _normalize_string(storage_key)
            if normalized is None or not normalized.startswith(self._namespace):
                continue
            raw = _normalize_string(await self._client.get(normalized))
            # deleted between scan and fetch
            if raw is None:
                continue
            yield normalized.removeprefix(self._namespace), load_record(raw)

    @override
    async def close(self) -> None:
        """Release backend resources."""
        close_method = getattr(self._client, "aclose", None)
        if close_method is None:
            close_method = getattr(self._client, "close", None)
        if close_method is None:
            return

        maybe_awaitable = close_method()
        if isawaitable(maybe_awaitable):
            await maybe_awaitable
