"""Redis storage backend (async redis-py)."""

from typing import Optional

import redis.asyncio as redis

from unifav.storage.base import KeyValueStorage
from unifav.utils.config import settings
from unifav.utils.logger import get_logger

log = get_logger(__name__)


class RedisStorage(KeyValueStorage):
    """Thin wrapper around redis-py storing each blob as a plain string key."""

    def __init__(
        self,
        host: str | None = None,
        port: int | None = None,
        password: str | None = None,
        db: int | None = None,
        client: redis.Redis | None = None,
    ):
        self.client = client or redis.Redis(
            host=host or settings.redis_host,
            port=port or settings.redis_port,
            password=password or settings.redis_password or None,
            db=db if db is not None else settings.redis_db,
            decode_responses=True,
        )

    async def get(self, key: str) -> Optional[str]:
        return await self.client.get(key)

    async def set(self, key: str, value: str) -> None:
        await self.client.set(key, value)
        log.debug("Stored %d byte(s) under %s", len(value), key)

    async def delete(self, key: str) -> None:
        await self.client.delete(key)

    async def ping(self) -> bool:
        return await self.client.ping()

    async def aclose(self) -> None:
        await self.client.aclose()
