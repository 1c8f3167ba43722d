# config/cache.py
from typing import Optional
from redis.asyncio import Redis
from config.settings import settings

_redis: Optional[Redis] = None


async def get_redis() -> Redis:
    """Shared Redis client; created and pinged on first use."""
    global _redis
    if _redis is None:
        client = Redis.from_url(settings.REDIS_URL, decode_responses=False)
        await client.ping()
        _redis = client
    return _redis


async def close_redis() -> None:
    global _redis
    if _redis is not None:
        await _redis.aclose()
        _redis = None
