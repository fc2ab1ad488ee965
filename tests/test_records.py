import json

import pytest
from hypothesis import given
from hypothesis import strategies as st

from kv_namespace.exceptions import CorruptRecordError
from kv_namespace.records import Record, dump_record, load_record


_JSON_SCALARS = st.none() | st.booleans() | st.integers(min_value=-10_000, max_value=10_000) | st.text(max_size=30)
_JSON_VALUES = st.recursive(
    _JSON_SCALARS,
    lambda children: st.lists(children, max_size=4) | st.dictionaries(st.text(max_size=12), children, max_size=4),
    max_leaves=15,
)


def test_record_defaults_to_no_metadata() -> None:
    assert Record("v").metadata is None


def test_dump_record_is_a_json_object() -> None:
    assert json.loads(dump_record(Record("v", {"a": 1}))) == {"value": "v", "metadata": {"a": 1}}


@given(value=st.text(), metadata=_JSON_VALUES)
def test_load_record_reverses_dump_record(value: str, metadata: object) -> None:
    assert load_record(dump_record(Record(value, metadata))) == Record(value, metadata)


def test_load_record_accepts_bytes() -> None:
    assert load_record(b'{"value": "v", "metadata": null}') == Record("v")


@pytest.mark.parametrize("raw", ["not json", "[1, 2]", '{"metadata": 1}', '{"value": 3}'])
def test_load_record_rejects_foreign_documents(raw: str) -> None:
    with pytest.raises(CorruptRecordError):
        _ = load_record(raw)
