import pytest

from kv_namespace.backends.mapping import MappingBackend
from kv_namespace.records import Record



@pytest.mark.asyncio
async def test_mapping_backend_writes_through_to_given_mapping() -> None:
    data: dict[str, Record] = {}
    backend = MappingBackend(data)

    await backend.set("k", Record("v", {"m": 1}))
    assert data == {"k": Record("v", {"m": 1})}
    assert backend.mapping is data


@pytest.mark.asyncio
async def test_mapping_backend_reads_existing_contents() -> None:
    backend = MappingBackend({"k": Record("v")})
    assert await backend.get("k") == Record("v")
    assert await backend.get("missing") is None


@pytest.mark.asyncio
async def test_mapping_backend_delete_is_idempotent() -> None:
    backend = MappingBackend({"k": Record("v")})
    await backend.delete("k")
    await backend.delete("k")
    assert backend.mapping == {}


@pytest.mark.asyncio
async def test_mapping_backend_defaults_to_new_dict(entries_of) -> None:
    first = MappingBackend()
    second = MappingBackend()
    await first.set("k", Record("v"))

    assert await entries_of(first) == {"k": Record("v")}
    assert await entries_of(second) == {}
