"""Unit tests for the key-value storage backends."""

import json
import os
import tempfile
from unittest.mock import AsyncMock

import pytest

from unifav.errors import CorruptStateError
from unifav.storage import (
    FileStorage,
    MemoryStorage,
    RedisStorage,
    create_storage,
)


class TestFileStorage:
    @pytest.mark.asyncio
    async def test_missing_file_reads_as_absent(self, tmp_path):
        storage = FileStorage(tmp_path / "favorites.json")
        assert await storage.get("k") is None

    @pytest.mark.asyncio
    async def test_set_then_get(self, tmp_path):
        path = tmp_path / "nested" / "favorites.json"
        storage = FileStorage(path)
        await storage.set("k", '[{"name": "A", "web_page": "a.edu"}]')
        assert await storage.get("k") == '[{"name": "A", "web_page": "a.edu"}]'
        assert json.loads(path.read_text(encoding="utf-8")) == {
            "k": '[{"name": "A", "web_page": "a.edu"}]'
        }

    @pytest.mark.asyncio
    async def test_keys_are_independent(self, tmp_path):
        storage = FileStorage(tmp_path / "store.json")
        await storage.set("a", "1")
        await storage.set("b", "2")
        await storage.delete("a")
        assert await storage.get("a") is None
        assert await storage.get("b") == "2"

    @pytest.mark.asyncio
    async def test_no_temp_file_left_behind(self, tmp_path):
        storage = FileStorage(tmp_path / "store.json")
        await storage.set("k", "v")
        assert [p.name for p in tmp_path.iterdir()] == ["store.json"]

    @pytest.mark.asyncio
    async def test_delete_missing_key_does_not_create_file(self, tmp_path):
        path = tmp_path / "store.json"
        await FileStorage(path).delete("k")
        assert not path.exists()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
    async def test_unreadable_file(self, tmp_path, content):
        path = tmp_path / "store.json"
        path.write_text(content, encoding="utf-8")
        with pytest.raises(CorruptStateError):
            await FileStorage(path).get("k")


@pytest.mark.asyncio
async def test_memory_storage():
    storage = MemoryStorage({"a": "1"})
    assert await storage.get("a") == "1"
    await storage.set("b", "2")
    await storage.delete("a")
    await storage.delete("missing")
    assert storage.data == {"b": "2"}


class TestRedisStorage:
    @pytest.mark.asyncio
    async def test_delegates_to_client(self):
        client = AsyncMock()
        client.get.return_value = "[]"
        storage = RedisStorage(client=client)

        assert await storage.get("favs") == "[]"
        await storage.set("favs", "[1]")
        await storage.delete("favs")
        await storage.aclose()

        client.get.assert_awaited_once_with("favs")
        client.set.assert_awaited_once_with("favs", "[1]")
        client.delete.assert_awaited_once_with("favs")
        client.aclose.assert_awaited_once()


class TestCreateStorage:
    def test_known_backends(self):
        assert isinstance(create_storage("file"), FileStorage)
        assert isinstance(create_storage("memory"), MemoryStorage)
        assert isinstance(create_storage("REDIS"), RedisStorage)

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            create_storage("sqlite")


class TestFileStorageWrites:
    @pytest.mark.asyncio
    async def test_non_string_value_is_corrupt(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text(json.dumps({"k": [1, 2]}), encoding="utf-8")
        with pytest.raises(CorruptStateError):
            await FileStorage(path).get("k")

    @pytest.mark.asyncio
    async def test_failed_write_keeps_old_file_and_cleans_up(self, tmp_path, monkeypatch):
        path = tmp_path / "store.json"
        storage = FileStorage(path)
        await storage.set("k", "old")

        def broken_dump(*args, **kwargs):
            raise OSError("disk full")

        monkeypatch.setattr("unifav.storage.file_storage.json.dump", broken_dump)
        with pytest.raises(OSError):
            await storage.set("k", "new")
        monkeypatch.undo()

        assert [p.name for p in tmp_path.iterdir()] == ["store.json"]
        assert await storage.get("k") == "old"

    @pytest.mark.asyncio
    async def test_temp_files_are_unique(self, tmp_path, monkeypatch):
        created = []
        real_mkstemp = tempfile.mkstemp

        def recording_mkstemp(*args, **kwargs):
            fd, name = real_mkstemp(*args, **kwargs)
            created.append(name)
            return fd, name

        monkeypatch.setattr("unifav.storage.file_storage.tempfile.mkstemp", recording_mkstemp)
        storage = FileStorage(tmp_path / "store.json")
        await storage.set("a", "1")
        await storage.set("b", "2")
        assert len(set(created)) == 2
        assert all(os.path.dirname(name) == str(tmp_path) for name in created)
