"""Prefix filtering, ordering and offset-cursor pagination for listings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .exceptions import InvalidCursorError


if TYPE_CHECKING:
    from collections.abc import Iterable

    from .options import ListOptions
    from .records import Record


@dataclass(frozen=True, slots=True)
class ListKey:
    """One listed key. Values are never part of a listing."""

    name: str
    metadata: Any | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "metadata": self.metadata}


@dataclass(frozen=True, slots=True)
class ListResult:
    """A single page of a listing.

    ``cursor`` is set only when ``list_complete`` is False; pass it back to
    ``list`` to fetch the next page.
    """

    keys: list[ListKey] = field(default_factory=list)
    list_complete: bool = True
    cursor: str | None = None

    @property
    def names(self) -> list[str]:
        return [key.name for key in self.keys]

    def to_dict(self) -> dict[str, Any]:
        """Render the page in the hosted service's response shape."""
        result: dict[str, Any] = {
            "keys": [key.to_dict() for key in self.keys],
            "list_complete": self.list_complete,
        }
        if self.cursor is not None:
            result["cursor"] = self.cursor
        return result


def encode_cursor(offset: int) -> str:
    """Encode the number of already returned keys as a cursor."""
    return str(offset)


def decode_cursor(cursor: str | None) -> int:
    """Return the offset encoded in ``cursor``; no cursor means zero."""
    if not cursor:
        return 0
    if not isinstance(cursor, str) or not cursor.isascii() or not cursor.isdigit():
        msg = f"invalid cursor: {cursor!r}"
        raise InvalidCursorError(msg)
    return int(cursor)


def paginate(entries: Iterable[tuple[str, Record]], options: ListOptions) -> ListResult:
    """Select one page of ``entries`` matching ``options``.

    The full matching set is filtered and sorted on every call, so the cursor
    is an offset into the current view rather than a position tied to a key.
    Writes between calls may shift that view.
    """
    skip = decode_cursor(options.cursor)
    matching = sorted(
        (item for item in entries if item[0].startswith(options.prefix)),
        key=lambda item: item[0],
    )

    end = skip + options.limit
    keys = [ListKey(name=name, metadata=record.metadata) for name, record in matching[skip:end]]
    complete = end >= len(matching)
    return ListResult(keys=keys, list_complete=complete, cursor=None if complete else encode_cursor(end))
