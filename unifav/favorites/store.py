"""Favorites store -- a deduplicated, persisted, insertion-ordered collection.

The whole collection lives under a single storage key as a JSON array of
``{"name", "web_page"}`` objects. ``web_page`` is the unique key. Every
mutation reads the full blob once and, only when something changed, writes
the full blob once.
"""

import asyncio
import json
from enum import Enum
from typing import List

from unifav.errors import CorruptStateError
from unifav.favorites.records import FavoriteRecord
from unifav.search.records import UniversityRecord
from unifav.storage.base import KeyValueStorage
from unifav.utils.config import settings
from unifav.utils.logger import get_logger

log = get_logger(__name__)


class AddOutcome(str, Enum):
    ADDED = "added"
    ALREADY_EXISTS = "already_exists"


class RemoveOutcome(str, Enum):
    REMOVED = "removed"
    NOT_FOUND = "not_found"


class FavoritesStore:
    """Owns the favorites collection stored in *storage* under *key*.

    Mutations run under an ``asyncio.Lock`` so overlapping calls cannot both
    pass the duplicate check against the same stale snapshot.
    """

    def __init__(self, storage: KeyValueStorage, key: str | None = None):
        self.storage = storage
        self.key = key or settings.favorites_key
        self._lock = asyncio.Lock()

    async def load(self) -> List[FavoriteRecord]:
        """Return the stored favorites; an absent key means an empty list.

        Raises ``CorruptStateError`` when the blob cannot be deserialized.
        """
        raw = await self.storage.get(self.key)
        if raw is None:
            return []
        try:
            items = json.loads(raw)
            if not isinstance(items, list):
                raise ValueError(f"expected a JSON array, got {type(items).__name__}")
            return [FavoriteRecord.from_dict(item) for item in items]
        except (ValueError, TypeError, RecursionError) as exc:
            log.error("Favorites under %s are unreadable: %s", self.key, exc)
            raise CorruptStateError(f"Saved favorites could not be read: {exc}") from exc

    async def add(self, record: FavoriteRecord) -> AddOutcome:
        async with self._lock:
            favorites = await self.load()
            if any(fav.web_page == record.web_page for fav in favorites):
                log.info("Favorite already exists: %s", record.web_page)
                return AddOutcome.ALREADY_EXISTS
            favorites.append(record)
            await self._save(favorites)
        log.info("Added favorite: %s (%s)", record.name, record.web_page)
        return AddOutcome.ADDED

    async def add_university(self, university: UniversityRecord) -> AddOutcome:
        """Favorite a search result; ``NoWebPageError`` is raised before any storage access."""
        return await self.add(FavoriteRecord.from_university(university))

    async def remove(self, web_page: str) -> RemoveOutcome:
        async with self._lock:
            favorites = await self.load()
            kept = [fav for fav in favorites if fav.web_page != web_page]
            if len(kept) == len(favorites):
                return RemoveOutcome.NOT_FOUND
            await self._save(kept)
        log.info("Removed favorite: %s", web_page)
        return RemoveOutcome.REMOVED

    async def clear(self) -> None:
        """Replace the collection (even a corrupt one) with an empty list."""
        async with self._lock:
            await self._save([])
        log.info("Cleared favorites under %s", self.key)

    async def _save(self, favorites: List[FavoriteRecord]) -> None:
        blob = json.dumps([fav.to_dict() for fav in favorites], ensure_ascii=False)
        await self.storage.set(self.key, blob)
