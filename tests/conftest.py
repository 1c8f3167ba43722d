from typing import Optional

import httpx
import pytest

from service.api_key_validation_service import ApiKeyValidationService

VALID_KEY = "AIzaSyD-" + "a1B2c3D4e5F6g7H8i9J0k1L2m3N4o5P"


class InMemoryApiKeyStore:
    def __init__(self, value: Optional[str] = None) -> None:
        self.value = value
        self.writes: list[str] = []

    async def get(self) -> Optional[str]:
        return self.value

    async def put(self, api_key: str) -> None:
        self.writes.append(api_key)
        self.value = api_key

    async def delete(self) -> int:
        existed = self.value is not None
        self.value = None
        return int(existed)


class ProbeRecorder:
    """httpx MockTransport handler answering every probe with a fixed outcome."""

    def __init__(self, status_code: int = 200, exc: Exception | None = None) -> None:
        self.status_code = status_code
        self.exc = exc
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return httpx.Response(self.status_code, json={"models": []})

    def validator(self) -> ApiKeyValidationService:
        return ApiKeyValidationService(
            transport=httpx.MockTransport(self),
            models_url="https://generativelanguage.googleapis.com/v1beta/models",
            prefix="AIza",
            min_length=30,
        )


@pytest.fixture
def valid_key() -> str:
    return VALID_KEY


@pytest.fixture
def key_store() -> InMemoryApiKeyStore:
    return InMemoryApiKeyStore()


@pytest.fixture
def probe_ok() -> ProbeRecorder:
    return ProbeRecorder(200)
