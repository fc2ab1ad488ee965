"""Errors raised by the namespace and its backends.

Absence of a key is never an error: reads return ``None`` instead. Every error
here also derives from the closest builtin so callers may catch either.
"""

from __future__ import annotations


class KVNamespaceError(Exception):
    """Base exception for kv-namespace."""


class UnsupportedValueTypeError(KVNamespaceError, TypeError):
    """``put`` was given a payload that is not a ``str``."""


class UnsupportedOptionError(KVNamespaceError, ValueError):
    """``put`` was given an option this store refuses to honor."""


class UnsupportedDecodeTypeError(KVNamespaceError, ValueError):
    """A read requested a decode mode other than ``text`` or ``json``, or an unknown read option."""


class DecodeFailureError(KVNamespaceError, ValueError):
    """A stored value could not be decoded as JSON."""


class InvalidListOptionError(KVNamespaceError, ValueError):
    """``list`` was given a limit or option it cannot use."""


class InvalidCursorError(InvalidListOptionError):
    """``list`` was given a cursor it did not produce."""


class CorruptRecordError(KVNamespaceError, ValueError):
    """A backend holds a document that is not an encoded record."""


class BackendUnavailableError(KVNamespaceError, RuntimeError):
    """A backend cannot reach its storage."""
