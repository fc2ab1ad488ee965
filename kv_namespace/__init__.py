"""kv-namespace - in-memory stand-in for a hosted key-value namespace"""

from ._version import version as __version__
from .backends import Backend, InMemoryAsyncBackend, MappingBackend, available_backends, create_backend
from .exceptions import (
    BackendUnavailableError,
    CorruptRecordError,
    DecodeFailureError,
    InvalidCursorError,
    InvalidListOptionError,
    KVNamespaceError,
    UnsupportedDecodeTypeError,
    UnsupportedOptionError,
    UnsupportedValueTypeError,
)
from .listing import ListKey, ListResult
from .namespace import KVNamespace, ValueWithMetadata
from .options import GetOptions, ListOptions, PutOptions, ValueType
from .records import Record
from .sync import SyncKVNamespace


__all__ = [
    "Backend",
    "BackendUnavailableError",
    "CorruptRecordError",
    "DecodeFailureError",
    "GetOptions",
    "InMemoryAsyncBackend",
    "InvalidCursorError",
    "InvalidListOptionError",
    "KVNamespace",
    "KVNamespaceError",
    "ListKey",
    "ListOptions",
    "ListResult",
    "MappingBackend",
    "PutOptions",
    "Record",
    "SyncKVNamespace",
    "UnsupportedDecodeTypeError",
    "UnsupportedOptionError",
    "UnsupportedValueTypeError",
    "ValueType",
    "ValueWithMetadata",
    "__version__",
    "available_backends",
    "create_backend",
]
