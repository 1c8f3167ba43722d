# repository/api_key_repository.py
from typing import Final, Optional, Protocol
from redis.asyncio import Redis
from config.cache import get_redis
from repository.namespaces import API_KEY

KEY: Final[str] = API_KEY


class ApiKeyStore(Protocol):
    """Single-entry key-value store holding the user's API key."""

    async def get(self) -> Optional[str]: ...

    async def put(self, api_key: str) -> None: ...

    async def delete(self) -> int: ...


class ApiKeyRepository:
    """Redis-backed ApiKeyStore. Absence of the entry means no API key."""

    @staticmethod
    async def _client() -> Redis:
        return await get_redis()

    async def get(self) -> Optional[str]:
        r = await self._client()
        v = await r.get(KEY)
        if v is None:
            return None
        value = v.decode("utf-8") if isinstance(v, (bytes, bytearray)) else str(v)
        return value or None

    async def put(self, api_key: str) -> None:
        r = await self._client()
        await r.set(KEY, api_key)

    async def delete(self) -> int:
        r = await self._client()
        return int(await r.delete(KEY))
