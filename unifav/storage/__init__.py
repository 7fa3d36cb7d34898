"""Storage module -- key-value backends for persisted blobs."""

from unifav.storage.base import KeyValueStorage
from unifav.storage.file_storage import FileStorage
from unifav.storage.memory_storage import MemoryStorage
from unifav.storage.redis_storage import RedisStorage
from unifav.utils.config import settings

__all__ = ["FileStorage", "KeyValueStorage", "MemoryStorage", "RedisStorage", "create_storage"]


def create_storage(backend: str | None = None) -> KeyValueStorage:
    """Build the backend named by *backend* (defaults to ``STORAGE_BACKEND``)."""
    name = (backend or settings.storage_backend).lower()
    if name == "file":
        return FileStorage()
    if name == "redis":
        return RedisStorage()
    if name == "memory":
        return MemoryStorage()
    raise ValueError(f"Unknown storage backend: {name!r}")
