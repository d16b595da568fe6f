import os
from dataclasses import dataclass
from functools import lru_cache

import redis
from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Redis
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")

    # Cache
    cache_store: str = os.getenv("FINDER_CACHE_STORE", "redis")
    cache_ttl: int = int(os.getenv("FINDER_CACHE_TTL", "86400"))  # 1 day default
    cache_tag: str = os.getenv("FINDER_CACHE_TAG", "model-finder")
    cache_prefix: str = os.getenv("FINDER_CACHE_PREFIX", "model_finder:")

    # Answer from the database when the cache backend is down
    cache_fallback: bool = os.getenv("FINDER_CACHE_FALLBACK", "false").lower() == "true"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.cache_ttl <= 0:
            raise ValueError("FINDER_CACHE_TTL must be a positive number of seconds")

        if not self.cache_tag.strip():
            raise ValueError("FINDER_CACHE_TAG must not be empty")

        if self.cache_store not in ["redis", "memory"]:
            raise ValueError(
                f"FINDER_CACHE_STORE must be one of ['redis', 'memory'], got {self.cache_store}"
            )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_redis_client() -> redis.Redis:
    """Create a Redis client instance."""
    return redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        decode_responses=False,
    )
