"""NATS JetStream KV backend implementation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from typing_extensions import override


try:
    import nats as nats_module
except ImportError:  # pragma: no cover - exercised when dependency is absent
    nats_module = None

from kv_namespace.exceptions import BackendUnavailableError
from kv_namespace.records import dump_record, load_record

from .protocol import Backend


if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from kv_namespace.records import Record


logger = logging.getLogger(__name__)

_NOT_FOUND_ERROR_NAMES = {"BucketNotFoundError", "KeyNotFoundError", "KeyDeletedError", "NoKeysError"}


def _is_not_found_error(error: Exception) -> bool:
    return error.__class__.__name__ in _NOT_FOUND_ERROR_NAMES


class NatsBackend(Backend):
    """NATS JetStream KV backend.

    The backend uses an existing KV bucket by default.
    Set ``create_bucket=True`` to allow creating it when missing.
    """

    def __init__(
        self,
        url: str = "nats://localhost:4222",
        bucket: str = "kv_namespace",
        *,
        client: Any | None = None,
        create_bucket: bool = False,
    ) -> None:
        """Create a backend using a NATS URL or injected client.

        Parameters
        ----------
        url
            NATS server URL used when ``client`` is not provided.
        bucket
            JetStream KV bucket name.
        client
            Optional injected connected NATS client with ``jetstream`` API.
        create_bucket
            When True, creates bucket if missing. Defaults to False.
        """
        super().__init__()
        self._url = url
        self._bucket_name = bucket
        self._client = client
        self._create_bucket = create_bucket
        self._kv: Any | None = None

    async def _ensure_kv(self) -> Any:
        if self._kv is not None:
            return self._kv

        if self._client is None:
            if nats_module is None:
                msg = "nats-py dependency is required for NatsBackend; install with `pip install kv-namespace[nats]`"
                raise BackendUnavailableError(msg)
            connect = getattr(nats_module, "connect", None)
            if connect is None:
                msg = "nats.connect is unavailable in installed nats-py package"
                raise BackendUnavailableError(msg)
            logger.info("connecting nats backend to %s", self._url)
            self._client = await connect(servers=[self._url])

        jetstream = self._client.jetstream()

        try:
            self._kv = await jetstream.key_value(self._bucket_name)
        except Exception as error:
            if _is_not_found_error(error) and self._create_bucket:
                logger.info("creating jetstream KV bucket %s", self._bucket_name)
                self._kv = await jetstream.create_key_value(bucket=self._bucket_name)
            else:
                msg = (
                    f"jetstream KV bucket '{self._bucket_name}' is not available; "
                    "create it first or initialize with create_bucket=True"
                )
                raise BackendUnavailableError(msg) from error

        return self._kv

    async def _fetch(self, kv: Any, key: str) -> Record | None:
        try:
            entry = await kv.get(key)
        except Exception as error:
            if _is_not_found_error(error):
                return None
            raise
        if entry.value is None:
            return None
        return load_record(entry.value)

    @override
    async def get(self, key: str) -> Record | None:
        """Return the record for key, or None when key does not exist."""
        kv = await self._ensure_kv()
        return await self._fetch(kv, key)

    @override
    async def set(self, key: str, record: Record) -> None:
        """Insert or replace the record for key."""
        kv = await self._ensure_kv()
        await kv.put(key, dump_record(record).encode())

    @override
    async def delete(self, key: str) -> None:
        """Delete key if present."""
        kv = await self._ensure_kv()
        try:
            await kv.delete(key)
        except Exception as error:
            if not _is_not_found_error(error):
                raise

    @override
    async def entries(self) -> AsyncIterator[tuple[str, Record]]:
        """Yield every live key in the bucket with its record."""
        kv = await self._ensure_kv()
        try:
            keys = await kv.keys()
        except Exception as error:
            if _is_not_found_error(error):
                return
            raise

        for key in keys or []:
            record = await self._fetch(kv, key)
            if record is not None:
                yield key, record

    @override
    async def close(self) -> None:
        """Close NATS client resources."""
        if self._client is None:
            return
        await self._client.close()
