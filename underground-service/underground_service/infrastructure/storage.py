"""
Key-value storage backends for viewer-local state
"""
import redis.asyncio as redis
from typing import Dict, Optional
import logging

from ..config import settings
from ..domain.repositories import IKeyValueStore

logger = logging.getLogger(__name__)


class InMemoryKeyValueStore(IKeyValueStore):
    """Process-local store, lost on restart"""

    def __init__(self):
        self._data: Dict[str, str] = {}

    async def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> bool:
        self._data[key] = value
        return True

    async def delete(self, key: str) -> bool:
        self._data.pop(key, None)
        return True

    def clear(self) -> None:
        self._data.clear()


class RedisKeyValueStore(IKeyValueStore):
    """Redis-backed store"""

    def __init__(self):
        self.client: Optional[redis.Redis] = None

    async def connect(self):
        """Connect to Redis"""
        try:
            self.client = await redis.from_url(
                f"redis://{settings.REDIS_HOST}:{settings.REDIS_PORT}/{settings.REDIS_DB}",
                password=settings.REDIS_PASSWORD if settings.REDIS_PASSWORD else None,
                encoding="utf-8",
                decode_responses=True,
            )
            # Test connection
            await self.client.ping()
            logger.info("Redis storage connected successfully")
        except Exception as e:
            logger.error(f"Failed to connect to Redis: {e}")
            self.client = None

    async def disconnect(self):
        """Disconnect from Redis"""
        if self.client:
            await self.client.close()
            logger.info("Redis storage disconnected")

    async def get(self, key: str) -> Optional[str]:
        if not self.client:
            return None

        try:
            return await self.client.get(key)
        except Exception as e:
            logger.error(f"Failed to read key {key}: {e}")
            return None

    async def set(self, key: str, value: str) -> bool:
        if not self.client:
            return False

        try:
            await self.client.set(key, value)
            return True
        except Exception as e:
            logger.error(f"Failed to write key {key}: {e}")
            return False

    async def delete(self, key: str) -> bool:
        if not self.client:
            return False

        try:
            await self.client.delete(key)
            return True
        except Exception as e:
            logger.error(f"Failed to delete key {key}: {e}")
            return False


class ViewerStorage(IKeyValueStore):
    """Namespaces another store so each viewer gets its own keys"""

    def __init__(self, store: IKeyValueStore, viewer_id: str):
        self.store = store
        self.viewer_id = viewer_id

    def _key(self, key: str) -> str:
        return f"viewer:{self.viewer_id}:{key}"

    async def get(self, key: str) -> Optional[str]:
        return await self.store.get(self._key(key))

    async def set(self, key: str, value: str) -> bool:
        return await self.store.set(self._key(key), value)

    async def delete(self, key: str) -> bool:
        return await self.store.delete(self._key(key))


def create_store(backend: str) -> IKeyValueStore:
    """Build the store for the configured backend"""
    if backend == "redis":
        return RedisKeyValueStore()
    if backend != "memory":
        logger.warning(f"Unknown storage backend '{backend}', using memory")
    return InMemoryKeyValueStore()


# Global storage instance
key_value_store = create_store(settings.STORAGE_BACKEND)


async def get_key_value_store() -> IKeyValueStore:
    """Dependency for getting the storage instance"""
    return key_value_store
