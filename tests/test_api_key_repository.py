import asyncio
from typing import Optional

import pytest

from repository import api_key_repository
from repository.api_key_repository import ApiKeyRepository


class _FakeRedis:
    def __init__(self) -> None:
        self.data: dict[str, bytes] = {}
        self.keys_seen: list[str] = []

    async def get(self, key: str) -> Optional[bytes]:
        self.keys_seen.append(key)
        return self.data.get(key)

    async def set(self, key: str, value: str) -> bool:
        self.keys_seen.append(key)
        self.data[key] = value.encode("utf-8")
        return True

    async def delete(self, key: str) -> int:
        self.keys_seen.append(key)
        return 1 if self.data.pop(key, None) is not None else 0


@pytest.fixture
def redis(monkeypatch) -> _FakeRedis:
    fake = _FakeRedis()

    async def _get_redis() -> _FakeRedis:
        return fake

    monkeypatch.setattr(api_key_repository, "get_redis", _get_redis)
    return fake


def test_put_writes_the_gemini_api_key_entry(redis, valid_key) -> None:
    asyncio.run(ApiKeyRepository().put(valid_key))

    assert redis.data == {"gemini_api_key": valid_key.encode("utf-8")}
    assert redis.keys_seen == ["gemini_api_key"]


def test_get_decodes_bytes(redis, valid_key) -> None:
    redis.data["gemini_api_key"] = valid_key.encode("utf-8")
    assert asyncio.run(ApiKeyRepository().get()) == valid_key


def test_get_missing_or_empty_entry_is_none(redis) -> None:
    repo = ApiKeyRepository()
    assert asyncio.run(repo.get()) is None

    redis.data["gemini_api_key"] = b""
    assert asyncio.run(repo.get()) is None


def test_delete_reports_whether_an_entry_existed(redis, valid_key) -> None:
    repo = ApiKeyRepository()
    asyncio.run(repo.put(valid_key))

    assert asyncio.run(repo.delete()) == 1
    assert asyncio.run(repo.delete()) == 0
    assert asyncio.run(repo.get()) is None
