"""
Redis adapter - Durable key-value substrate for the collection store.

Provides:
- String get/set/delete/exists per key
- Connectivity check for readiness probes

Every collection is a single Redis string holding a JSON document, so the
adapter never needs hashes, lists or TTLs.
"""

import logging
from typing import Optional

import redis
from redis.exceptions import RedisError

from ...config.settings import settings

logger = logging.getLogger(__name__)


class RedisAdapter:
    """
    Adapter for Redis operations.

    Failures are logged and reported through return values (None / False)
    rather than raised, so a flaky Redis degrades reads to "absent".
    """

    def __init__(self, url: Optional[str] = None, client: Optional[redis.Redis] = None):
        """
        Initialize Redis adapter.

        Args:
            url: Redis URL (redis://host:port/db)
            client: Pre-built client, mostly useful for tests
        """
        self.url = url or settings.REDIS_URL
        self._client: Optional[redis.Redis] = client

    @property
    def client(self) -> redis.Redis:
        """Lazy-loaded Redis client."""
        if self._client is None:
            self._client = redis.from_url(
                self.url,
                decode_responses=True,
            )
        return self._client

    def get(self, key: str) -> Optional[str]:
        """
        Get the raw value stored under key.

        Args:
            key: Store key

        Returns:
            Stored string or None
        """
        try:
            return self.client.get(key)
        except RedisError as e:
            logger.warning("Redis get failed for %s: %s", key, e)
            return None

    def set(self, key: str, value: str) -> bool:
        """
        Overwrite the value stored under key.

        Args:
            key: Store key
            value: Serialized collection

        Returns:
            True if successful
        """
        try:
            self.client.set(key, value)
            return True
        except RedisError as e:
            logger.warning("Redis set failed for %s: %s", key, e)
            return False

    def delete(self, key: str) -> bool:
        """
        Delete a key.

        Returns:
            True if key was deleted
        """
        try:
            return bool(self.client.delete(key))
        except RedisError as e:
            logger.warning("Redis delete failed for %s: %s", key, e)
            return False

    def exists(self, key: str) -> bool:
        """Check if a key exists."""
        try:
            return bool(self.client.exists(key))
        except RedisError as e:
            logger.warning("Redis exists failed for %s: %s", key, e)
            return False

    def ping(self) -> bool:
        """
        Check Redis connectivity.

        Returns:
            True if connected
        """
        try:
            return bool(self.client.ping())
        except RedisError:
            return False

    def close(self) -> None:
        """Close the underlying connection pool."""
        if self._client is not None:
            try:
                self._client.close()
            except RedisError as e:
                logger.warning("Redis close failed: %s", e)
            self._client = None
