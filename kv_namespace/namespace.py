"""Async facade emulating a hosted key-value namespace over a pluggable backend."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, MutableMapping
from typing import TYPE_CHECKING, Any, NamedTuple, Self

from .backends import Backend, MappingBackend
from .exceptions import DecodeFailureError, UnsupportedDecodeTypeError, UnsupportedOptionError, UnsupportedValueTypeError
from .listing import paginate
from .options import (
    SUPPORTED_VALUE_TYPES,
    GetOptions,
    ListOptions,
    PutOptions,
    ValueType,
    coerce_get_options,
    coerce_list_options,
    coerce_put_options,
)
from .records import Record


if TYPE_CHECKING:
    from types import TracebackType

    from .listing import ListResult


logger = logging.getLogger(__name__)

GetArgument = str | ValueType | GetOptions | Mapping[str, Any] | None


class ValueWithMetadata(NamedTuple):
    """Result of ``get_with_metadata``; both fields are None for a missing key."""

    value: Any
    metadata: Any


def _reject_constant(token: str) -> Any:
    msg = f"non-standard JSON constant: {token}"
    raise ValueError(msg)


def _decode(key: str, value: str, value_type: ValueType) -> Any:
    if value_type is ValueType.TEXT:
        return value
    try:
        return json.loads(value, parse_constant=_reject_constant)
    except ValueError as error:
        msg = f"value for key {key!r} is not valid JSON"
        raise DecodeFailureError(msg) from error


def _resolve_get_options(type_or_options: GetArgument) -> GetOptions:
    options = coerce_get_options(type_or_options)
    if options.type not in SUPPORTED_VALUE_TYPES:
        logger.debug("rejected read with unsupported type %s", options.type)
        msg = f"type not supported: {options.type}"
        raise UnsupportedDecodeTypeError(msg)
    return options


class KVNamespace:
    """Key-value namespace with string values, metadata and paginated listing.

    The namespace keeps no state of its own; every call goes to the backend.
    A plain ``MutableMapping`` may be passed instead of a ``Backend`` and is
    used in place.

    Examples
    --------
    ::

        kv = KVNamespace({})
        await kv.put("fruit:apple", '{"color": "green"}', {"metadata": {"tag": 1}})
        await kv.get("fruit:apple", "json")  # {"color": "green"}
    """

    def __init__(self, backend: Backend | MutableMapping[str, Record]) -> None:
        super().__init__()
        if isinstance(backend, Backend):
            self._backend = backend
        elif isinstance(backend, MutableMapping):
            self._backend = MappingBackend(backend)
        else:
            msg = f"backend must be a Backend or MutableMapping, got {type(backend).__name__}"
            raise TypeError(msg)

    @property
    def backend(self) -> Backend:
        return self._backend

    async def get(self, key: str, type_or_options: GetArgument = None) -> Any:
        """Return the decoded value for ``key``, or None when it is absent.

        Parameters
        ----------
        key
            Key to read.
        type_or_options
            ``"text"`` (default) or ``"json"``, a ``GetOptions``, or a dict with
            ``type`` and ``cacheTtl``. ``"arrayBuffer"`` and ``"stream"`` are
            rejected with ``UnsupportedDecodeTypeError`` once the key is found;
            a missing key always reads as None.
        """
        record = await self._backend.get(key)
        logger.debug("get %r hit=%s", key, record is not None)
        if record is None:
            return None
        options = _resolve_get_options(type_or_options)
        return _decode(key, record.value, options.type)

    async def get_with_metadata(self, key: str, type_or_options: GetArgument = None) -> ValueWithMetadata:
        """Return value and metadata for ``key``; both are None when it is absent."""
        record = await self._backend.get(key)
        logger.debug("get_with_metadata %r hit=%s", key, record is not None)
        if record is None:
            return ValueWithMetadata(None, None)
        options = _resolve_get_options(type_or_options)
        return ValueWithMetadata(_decode(key, record.value, options.type), record.metadata)

    async def put(self, key: str, value: str, options: PutOptions | Mapping[str, Any] | None = None) -> None:
        """Store ``value`` under ``key``, replacing any previous value and metadata.

        Raises
        ------
        UnsupportedValueTypeError
            If ``value`` is not a ``str``.
        UnsupportedOptionError
            If an expiration option is set; expiry is never emulated.
        """
        if not isinstance(value, str):
            logger.debug("rejected put of %r with value type %s", key, type(value).__name__)
            msg = f"value type not supported: {type(value).__name__}"
            raise UnsupportedValueTypeError(msg)

        put_options = coerce_put_options(options)
        if put_options.expiration is not None or put_options.expiration_ttl is not None:
            logger.debug("rejected put of %r with expiration", key)
            msg = "expiration and TTL not supported"
            raise UnsupportedOptionError(msg)

        await self._backend.set(key, Record(value=value, metadata=put_options.metadata))
        logger.debug("put %r (%d chars)", key, len(value))

    async def delete(self, key: str) -> None:
        """Delete ``key``; deleting an absent key is not an error."""
        await self._backend.delete(key)
        logger.debug("delete %r", key)

    async def list(self, options: ListOptions | Mapping[str, Any] | None = None) -> ListResult:
        """Return one page of keys, sorted, optionally restricted to a prefix.

        Values are not included. When ``list_complete`` is False, pass the
        returned ``cursor`` back in ``options`` to fetch the next page.
        """
        list_options = coerce_list_options(options)
        entries = [item async for item in self._backend.entries()]
        result = paginate(entries, list_options)
        logger.debug(
            "list prefix=%r limit=%d cursor=%r returned=%d complete=%s",
            list_options.prefix,
            list_options.limit,
            list_options.cursor,
            len(result.keys),
            result.list_complete,
        )
        return result

    async def close(self) -> None:
        """Close the backend."""
        await self._backend.close()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        await self.close()
