"""Integration test -- favorites persisted in a live Redis.

Requires: Redis running at REDIS_HOST:REDIS_PORT.
"""

import uuid

import pytest

from unifav.favorites.records import FavoriteRecord
from unifav.favorites.store import AddOutcome, FavoritesStore, RemoveOutcome
from unifav.storage.redis_storage import RedisStorage


@pytest.mark.integration
@pytest.mark.asyncio
async def test_favorites_round_trip():
    storage = RedisStorage()
    try:
        await storage.ping()
    except Exception:
        await storage.aclose()
        pytest.skip("Redis not available")

    key = f"test:favorites:{uuid.uuid4()}"
    store = FavoritesStore(storage, key=key)
    fav = FavoriteRecord(name="Universidade de São Paulo", web_page="http://www.usp.br/")
    try:
        assert await store.load() == []
        assert await store.add(fav) is AddOutcome.ADDED
        assert await store.add(fav) is AddOutcome.ALREADY_EXISTS
        assert await store.load() == [fav]
        assert await store.remove(fav.web_page) is RemoveOutcome.REMOVED
        assert await store.load() == []
    finally:
        await storage.delete(key)
        await storage.aclose()
