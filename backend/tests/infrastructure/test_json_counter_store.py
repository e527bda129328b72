"""JSON File Counter Store — verifies the {"count": N} file layout and error mapping.

Tests cover:
    - Missing file reads as None; UsageCounter then creates {"count": 0}
    - Missing "count" field reads as 0
    - Undecodable bytes, malformed JSON, negative counts and directories raise
      CounterReadError
    - Writes replace the file atomically and leave no temp files behind
    - Unwritable locations raise CounterWriteError
"""

import json

import pytest

from weightrange.core.errors import CounterReadError, CounterWriteError
from weightrange.infrastructure.json_counter_store import JsonFileCounterStore
from weightrange.services.usage_counter import UsageCounter


@pytest.fixture
def usage_path(tmp_path):
    return tmp_path / "usage.json"


async def test_missing_file_reads_none(usage_path):
    assert await JsonFileCounterStore(usage_path).read() is None


async def test_counter_read_initializes_file(usage_path):
    counter = UsageCounter(JsonFileCounterStore(usage_path))
    assert await counter.read() == 0
    assert json.loads(usage_path.read_text()) == {"count": 0}


async def test_reads_persisted_count(usage_path):
    usage_path.write_text('{"count": 42}')
    assert await JsonFileCounterStore(usage_path).read() == 42


async def test_missing_count_field_reads_zero(usage_path):
    usage_path.write_text("{}")
    assert await JsonFileCounterStore(usage_path).read() == 0


@pytest.mark.parametrize("content", [
    "not json", '{"count": -3}', '{"count": "many"}', '{"count": 1.5}', "",
])
async def test_malformed_record_raises_read_error(usage_path, content):
    usage_path.write_text(content)
    with pytest.raises(CounterReadError) as exc_info:
        await JsonFileCounterStore(usage_path).read()
    assert exc_info.value.context.store == "json"


@pytest.mark.parametrize("content", [b"\xff", b'{"count": \xff\xfe}'])
async def test_undecodable_bytes_raise_read_error(usage_path, content):
    usage_path.write_bytes(content)
    with pytest.raises(CounterReadError) as exc_info:
        await JsonFileCounterStore(usage_path).read()
    assert "UTF-8" in exc_info.value.message


async def test_undecodable_file_degrades_counter_to_zero(usage_path):
    usage_path.write_bytes(b'{"count": \xff\xfe}')
    counter = UsageCounter(JsonFileCounterStore(usage_path))
    assert await counter.read() == 0
    assert await counter.increment_and_read() == 0
    assert usage_path.read_bytes() == b'{"count": \xff\xfe}'


async def test_directory_path_raises_read_error(tmp_path):
    with pytest.raises(CounterReadError):
        await JsonFileCounterStore(tmp_path).read()


async def test_write_then_read(usage_path):
    store = JsonFileCounterStore(usage_path)
    await store.write(7)
    assert json.loads(usage_path.read_text()) == {"count": 7}
    assert await store.read() == 7


async def test_write_leaves_no_temp_files(usage_path):
    store = JsonFileCounterStore(usage_path)
    for n in range(3):
        await store.write(n)
    assert [p.name for p in usage_path.parent.iterdir()] == ["usage.json"]


async def test_write_creates_parent_directories(tmp_path):
    path = tmp_path / "data" / "usage.json"
    await JsonFileCounterStore(path).write(1)
    assert json.loads(path.read_text()) == {"count": 1}


async def test_write_under_a_file_raises_write_error(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    with pytest.raises(CounterWriteError):
        await JsonFileCounterStore(blocker / "usage.json").write(1)


async def test_increments_survive_new_store_instance(usage_path):
    await UsageCounter(JsonFileCounterStore(usage_path)).increment_and_read()
    counter = UsageCounter(JsonFileCounterStore(usage_path))
    assert await counter.increment_and_read() == 2


async def test_corrupt_file_is_not_overwritten_by_increment(usage_path):
    usage_path.write_text("{corrupt")
    counter = UsageCounter(JsonFileCounterStore(usage_path))
    assert await counter.increment_and_read() == 0
    assert usage_path.read_text() == "{corrupt"
