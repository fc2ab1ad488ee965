"""Stored record model and its text encoding."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from .exceptions import CorruptRecordError


@dataclass(frozen=True, slots=True)
class Record:
    """Value and metadata stored under one key."""

    value: str
    metadata: Any | None = None


def dump_record(record: Record) -> str:
    """Encode a record as a JSON object for text-only backends."""
    return json.dumps({"value": record.value, "metadata": record.metadata})


def load_record(raw: str | bytes) -> Record:
    """Decode a record previously written with ``dump_record``."""
    if isinstance(raw, bytes):
        raw = raw.decode()
    try:
        document = json.loads(raw)
    except json.JSONDecodeError as error:
        msg = "stored document is not valid JSON"
        raise CorruptRecordError(msg) from error

    if not isinstance(document, dict) or not isinstance(document.get("value"), str):
        msg = "stored document is not an encoded record"
        raise CorruptRecordError(msg)
    return Record(value=document["value"], metadata=document.get("metadata"))
