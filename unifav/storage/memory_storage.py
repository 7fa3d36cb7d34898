"""In-process storage backend (tests and throwaway sessions)."""

from typing import Dict, Optional

from unifav.storage.base import KeyValueStorage


class MemoryStorage(KeyValueStorage):
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    async def set(self, key: str, value: str) -> None:
        self.data[key] = value

    async def delete(self, key: str) -> None:
        self.data.pop(key, None)
