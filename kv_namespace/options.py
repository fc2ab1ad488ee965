"""Option structures accepted by namespace operations.

Each operation takes one options structure with named fields and defaults.
Plain dicts using either the camelCase names of the hosted service
(``cacheTtl``, ``expirationTtl``) or the snake_case field names are accepted
and converted here.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from .exceptions import (
    InvalidListOptionError,
    KVNamespaceError,
    UnsupportedDecodeTypeError,
    UnsupportedOptionError,
)


DEFAULT_LIST_LIMIT = 1000


class ValueType(StrEnum):
    """Decode modes a read may request."""

    TEXT = "text"
    JSON = "json"
    ARRAY_BUFFER = "arrayBuffer"
    STREAM = "stream"


SUPPORTED_VALUE_TYPES = frozenset({ValueType.TEXT, ValueType.JSON})


@dataclass(frozen=True, slots=True)
class GetOptions:
    """Options for ``get`` and ``get_with_metadata``.

    ``cache_ttl`` is accepted for compatibility and has no effect.
    """

    type: ValueType = ValueType.TEXT
    cache_ttl: float | None = None


@dataclass(frozen=True, slots=True)
class PutOptions:
    """Options for ``put``. Expiration fields are always rejected."""

    metadata: Any | None = None
    expiration: float | str | None = None
    expiration_ttl: float | str | None = None


@dataclass(frozen=True, slots=True)
class ListOptions:
    """Options for ``list``."""

    prefix: str = ""
    limit: int = DEFAULT_LIST_LIMIT
    cursor: str | None = None


_GET_ALIASES = {"type": "type", "cacheTtl": "cache_ttl", "cache_ttl": "cache_ttl"}
_PUT_ALIASES = {
    "metadata": "metadata",
    "expiration": "expiration",
    "expirationTtl": "expiration_ttl",
    "expiration_ttl": "expiration_ttl",
}
_LIST_FIELDS = frozenset({"prefix", "limit", "cursor"})


def _rename(
    options: Mapping[str, Any],
    aliases: dict[str, str],
    error: type[KVNamespaceError],
) -> dict[str, Any]:
    unknown = sorted(set(options) - set(aliases))
    if unknown:
        msg = f"unsupported option(s): {', '.join(unknown)}"
        raise error(msg)
    return {aliases[name]: value for name, value in options.items()}


def parse_value_type(value: str | ValueType | None) -> ValueType:
    """Return the decode mode for ``value``, defaulting to text."""
    if value is None:
        return ValueType.TEXT
    try:
        return ValueType(value)
    except ValueError as error:
        msg = f"type not supported: {value}"
        raise UnsupportedDecodeTypeError(msg) from error


def coerce_get_options(type_or_options: str | ValueType | GetOptions | Mapping[str, Any] | None) -> GetOptions:
    """Normalize the accepted ``get`` call shapes into ``GetOptions``."""
    if type_or_options is None:
        return GetOptions()
    if isinstance(type_or_options, GetOptions):
        return GetOptions(type=parse_value_type(type_or_options.type), cache_ttl=type_or_options.cache_ttl)
    if isinstance(type_or_options, str):
        return GetOptions(type=parse_value_type(type_or_options))
    if isinstance(type_or_options, Mapping):
        fields = _rename(type_or_options, _GET_ALIASES, UnsupportedDecodeTypeError)
        return GetOptions(type=parse_value_type(fields.get("type")), cache_ttl=fields.get("cache_ttl"))

    msg = f"type not supported: {type_or_options!r}"
    raise UnsupportedDecodeTypeError(msg)


def coerce_put_options(options: PutOptions | Mapping[str, Any] | None) -> PutOptions:
    """Normalize ``put`` options into ``PutOptions``."""
    if options is None:
        return PutOptions()
    if isinstance(options, PutOptions):
        return options
    if isinstance(options, Mapping):
        return PutOptions(**_rename(options, _PUT_ALIASES, UnsupportedOptionError))

    msg = f"put options must be PutOptions or a mapping, got {type(options).__name__}"
    raise UnsupportedOptionError(msg)


def coerce_list_options(options: ListOptions | Mapping[str, Any] | None) -> ListOptions:
    """Normalize ``list`` options into ``ListOptions``, applying defaults."""
    if options is None:
        return ListOptions()
    if isinstance(options, Mapping):
        unknown = sorted(set(options) - _LIST_FIELDS)
        if unknown:
            msg = f"unsupported list option(s): {', '.join(unknown)}"
            raise InvalidListOptionError(msg)
        prefix = options.get("prefix")
        limit = options.get("limit")
        options = ListOptions(
            prefix=prefix or "",
            limit=DEFAULT_LIST_LIMIT if limit is None else limit,
            cursor=options.get("cursor"),
        )
    if not isinstance(options, ListOptions):
        msg = f"list options must be ListOptions or a mapping, got {type(options).__name__}"
        raise InvalidListOptionError(msg)

    if isinstance(options.limit, bool) or not isinstance(options.limit, int) or options.limit < 1:
        msg = f"limit must be a positive integer, got {options.limit!r}"
        raise InvalidListOptionError(msg)
    if not isinstance(options.prefix, str):
        msg = f"prefix must be a string, got {type(options.prefix).__name__}"
        raise InvalidListOptionError(msg)
    return options
