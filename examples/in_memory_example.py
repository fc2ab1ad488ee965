"""Minimal example for KVNamespace using the in-memory backend."""

import asyncio
import json

from kv_namespace import InMemoryAsyncBackend, KVNamespace


async def main() -> None:
    """Run a basic put/get/list/delete flow on the in-memory backend."""
    async with KVNamespace(InMemoryAsyncBackend()) as kv:
        apple = {"name": "Granny Smith", "color": "green"}
        await kv.put("apple:grannysmith", json.dumps(apple), {"metadata": {"name": "Granny Smith"}})
        await kv.put("apple:fuji", json.dumps({"name": "Fuji"}))
        await kv.put("veg:carrot", "orange")

        print("json:", await kv.get("apple:grannysmith", "json"))
        print("with metadata:", await kv.get_with_metadata("apple:grannysmith"))

        cursor = None
        while True:
            page = await kv.list({"prefix": "apple:", "limit": 1, "cursor": cursor})
            print("page:", page.to_dict())
            if page.list_complete:
                break
            cursor = page.cursor

        await kv.delete("apple:fuji")
        print("after delete:", await kv.get("apple:fuji"))


if __name__ == "__main__":
    asyncio.run(main())
