"""Redis implementation of CacheStore.

Values are pickled so that detached SQLAlchemy instances survive the
round trip. ``get`` unpickles whatever the server returns, so the Redis
instance must be trusted and not writable by untrusted clients.

Every key is prefixed so ``flush()`` only touches entries written by
this package.
"""

import logging
import pickle
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import redis

from model_finder.config import get_redis_client, settings
from model_finder.exceptions import CacheUnavailableError

logger = logging.getLogger(__name__)


class RedisCacheStore:
    """Redis-backed cache store.

    This class satisfies the CacheStore protocol through structural
    typing - no explicit inheritance needed. Redis errors are raised as
    CacheUnavailableError.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        prefix: str | None = None,
    ) -> None:
        """Initialize the Redis cache store.

        Args:
            redis_client: Redis client instance. If None, creates default.
            prefix: Prefix prepended to every key. Defaults to settings.
        """
        self._client = redis_client or get_redis_client()
        self._prefix = settings.cache_prefix if prefix is None else prefix

    @classmethod
    def create(cls, prefix: str | None = None) -> "RedisCacheStore":
        """Factory method to create RedisCacheStore with defaults.

        Args:
            prefix: Key prefix. If None, uses settings.

        Returns:
            Configured RedisCacheStore
        """
        return cls(prefix=prefix)

    @contextmanager
    def _translate_errors(self, operation: str, key: str | None = None) -> Iterator[None]:
        try:
            yield
        except redis.RedisError as e:
            raise CacheUnavailableError(operation, key=key, original_error=e) from e

    def _key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    def get(self, key: str) -> Any | None:
        """Return the unpickled value for ``key``.

        Only point this store at a Redis instance you trust: the stored
        bytes are passed to ``pickle.loads``.
        """
        with self._translate_errors("get", key):
            payload = self._client.get(self._key(key))
        if payload is None:
            return None
        return pickle.loads(payload)  # type: ignore[arg-type]

    def put(self, key: str, value: Any, ttl: int) -> None:
        payload = pickle.dumps(value)
        with self._translate_errors("put", key):
            self._client.set(self._key(key), payload, ex=ttl)

    def forever(self, key: str, value: Any) -> None:
        payload = pickle.dumps(value)
        with self._translate_errors("forever", key):
            self._client.set(self._key(key), payload)

    def forget(self, key: str) -> bool:
        with self._translate_errors("forget", key):
            result: int = self._client.delete(self._key(key))  # type: ignore[assignment]
        return result > 0

    def flush(self) -> None:
        with self._translate_errors("flush"):
            count = 0
            for key in self._client.scan_iter(match=f"{self._prefix}*"):
                count += self._client.delete(key)  # type: ignore[operator]
        logger.debug("Flushed %d keys with prefix %s", count, self._prefix)

    def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            return False

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client
