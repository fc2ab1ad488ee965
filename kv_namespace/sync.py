"""Blocking facade over ``KVNamespace`` for synchronous callers."""

from __future__ import annotations

import asyncio
import threading
from typing import TYPE_CHECKING, Any, Self, TypeVar

from .namespace import KVNamespace


if TYPE_CHECKING:
    from collections.abc import Coroutine, Mapping, MutableMapping
    from concurrent.futures import Future
    from types import TracebackType

    from .backends import Backend
    from .listing import ListResult
    from .namespace import GetArgument, ValueWithMetadata
    from .options import ListOptions, PutOptions
    from .records import Record


_T = TypeVar("_T")


class _AsyncLoopBridge:
    """Bridge sync calls to async backend operations on a dedicated loop."""

    def __init__(self) -> None:
        super().__init__()
        self._loop_ready = threading.Event()
        self._loop: asyncio.AbstractEventLoop | None = None
        self._thread = threading.Thread(target=self._run, name="kv-namespace-sync-bridge", daemon=True)
        self._thread.start()
        _ = self._loop_ready.wait()

    def _run(self) -> None:
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        self._loop = loop
        self._loop_ready.set()
        loop.run_forever()
        loop.close()

    @property
    def is_running(self) -> bool:
        return self._loop is not None and self._thread.is_alive()

    def run(self, coroutine: Coroutine[Any, Any, _T]) -> _T:
        if self._loop is None:
            coroutine.close()
            msg = "sync bridge event loop not initialized"
            raise RuntimeError(msg)
        future: Future[_T] = asyncio.run_coroutine_threadsafe(coroutine, self._loop)
        return future.result()

    def close(self) -> None:
        if self._loop is None:
            return
        _ = self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join(timeout=5)
        self._loop = None


class SyncKVNamespace:
    """Blocking API with the same operations as ``KVNamespace``.

    Calls run on a private event loop thread, so the facade also works from
    code that is already inside a running event loop.
    """

    def __init__(self, backend: Backend | MutableMapping[str, Record] | KVNamespace) -> None:
        super().__init__()
        self._namespace = backend if isinstance(backend, KVNamespace) else KVNamespace(backend)
        self._bridge = _AsyncLoopBridge()

    @property
    def namespace(self) -> KVNamespace:
        return self._namespace

    def get(self, key: str, type_or_options: GetArgument = None) -> Any:
        """Return the decoded value for ``key``, or None when it is absent."""
        return self._bridge.run(self._namespace.get(key, type_or_options))

    def get_with_metadata(self, key: str, type_or_options: GetArgument = None) -> ValueWithMetadata:
        """Return value and metadata for ``key``; both are None when it is absent."""
        return self._bridge.run(self._namespace.get_with_metadata(key, type_or_options))

    def put(self, key: str, value: str, options: PutOptions | Mapping[str, Any] | None = None) -> None:
        """Store ``value`` under ``key``."""
        self._bridge.run(self._namespace.put(key, value, options))

    def delete(self, key: str) -> None:
        """Delete ``key`` if present."""
        self._bridge.run(self._namespace.delete(key))

    def list(self, options: ListOptions | Mapping[str, Any] | None = None) -> ListResult:
        """Return one page of keys."""
        return self._bridge.run(self._namespace.list(options))

    def close(self) -> None:
        """Close backend and bridge resources."""
        if not self._bridge.is_running:
            return
        try:
            self._bridge.run(self._namespace.close())
        finally:
            self._bridge.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()
