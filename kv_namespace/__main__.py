"""Interface for ``python -m kv_namespace``."""

from __future__ import annotations

import asyncio
import json
from argparse import ArgumentParser
from typing import TYPE_CHECKING

from ._version import version
from .config import load_settings, namespace_from_settings
from .log import configure_logging
from .options import DEFAULT_LIST_LIMIT, ListOptions


if TYPE_CHECKING:
    from collections.abc import Sequence

    from .config import Settings


__all__ = ["main"]


async def _list_page(settings: Settings, options: ListOptions) -> dict[str, object]:
    async with namespace_from_settings(settings) as namespace:
        result = await namespace.list(options)
    return result.to_dict()


def main(args: Sequence[str] | None = None) -> None:
    """Argument parser for the CLI."""
    parser = ArgumentParser(prog="kv_namespace")
    _ = parser.add_argument("-v", "--version", action="version", version=version)
    _ = parser.add_argument("--log-level", default=None, help="override KV_NAMESPACE_LOG_LEVEL")
    subparsers = parser.add_subparsers(dest="command")

    list_parser = subparsers.add_parser("list", help="print one page of keys from the configured backend as JSON")
    _ = list_parser.add_argument("--prefix", default="")
    _ = list_parser.add_argument("--limit", type=int, default=DEFAULT_LIST_LIMIT)
    _ = list_parser.add_argument("--cursor", default=None)

    parsed = parser.parse_args(args)
    if parsed.command is None:
        parser.print_help()
        return

    settings = load_settings()
    configure_logging(parsed.log_level or settings.log_level, settings.log_format)

    options = ListOptions(prefix=parsed.prefix, limit=parsed.limit, cursor=parsed.cursor)
    print(json.dumps(asyncio.run(_list_page(settings, options)), indent=2))  # noqa: T201


if __name__ == "__main__":
    main()
