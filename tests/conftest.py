from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest
import pytest_asyncio

from kv_namespace.backends.in_memory import InMemoryAsyncBackend
from kv_namespace.log import ROOT_LOGGER_NAME
from kv_namespace.namespace import KVNamespace


if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Awaitable, Callable, Generator

    from kv_namespace.backends import Backend
    from kv_namespace.records import Record


@pytest.fixture
def entries_of() -> Callable[[Backend], Awaitable[dict[str, Record]]]:
    """Return a helper draining ``backend.entries()`` into a dict."""

    async def collect(backend: Backend) -> dict[str, Record]:
        return {key: record async for key, record in backend.entries()}

    return collect


@pytest_asyncio.fixture
async def kv() -> AsyncIterator[KVNamespace]:
    namespace = KVNamespace(InMemoryAsyncBackend())
    try:
        yield namespace
    finally:
        await namespace.close()


@pytest.fixture
def restore_package_logger() -> Generator[None]:
    """Undo handler and level changes made by ``configure_logging``."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    try:
        yield
    finally:
        logger.handlers[:] = handlers
        logger.setLevel(level)
