"""Minimal example for SyncKVNamespace using a Redis-compatible backend."""

from kv_namespace import SyncKVNamespace
from kv_namespace.backends.redis import RedisBackend


def main() -> None:
    """Run a blocking put/get/list flow against Redis/Dragonfly."""
    backend = RedisBackend(url="redis://redis:6379/0", namespace="example:")
    with SyncKVNamespace(backend) as kv:
        kv.put("user:alice", '{"age": 30}', {"metadata": {"role": "admin"}})
        print("user:", kv.get("user:alice", {"type": "json", "cacheTtl": 60}))
        print("keys:", kv.list({"prefix": "user:"}).names)
        kv.delete("user:alice")


if __name__ == "__main__":
    main()
