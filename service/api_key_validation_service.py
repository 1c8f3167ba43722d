# service/api_key_validation_service.py
import logging
import httpx
from config.settings import settings

logger = logging.getLogger(__name__)


class ApiKeyValidationService:
    """
    Checks that a user entered a usable Gemini API key:
    a local format check, then a read-only call to the model listing.
    """

    def __init__(
        self,
        transport: httpx.AsyncBaseTransport | None = None,
        *,
        models_url: str | None = None,
        prefix: str | None = None,
        min_length: int | None = None,
    ) -> None:
        self._url: str = models_url or settings.GEMINI_MODELS_URL
        self._prefix: str = prefix or settings.API_KEY_PREFIX
        self._min_length: int = min_length or settings.API_KEY_MIN_LENGTH
        self._transport = transport

    def is_plausible(self, api_key: str) -> bool:
        return api_key.startswith(self._prefix) and len(api_key) >= self._min_length

    async def probe(self, api_key: str) -> bool:
        """True iff the provider answers the listing call with a 2xx. Body is ignored."""
        timeout = httpx.Timeout(settings.PROBE_TIMEOUT_SECONDS, connect=5.0)
        try:
            async with httpx.AsyncClient(
                timeout=timeout, transport=self._transport
            ) as client:
                res = await client.get(self._url, params={"key": api_key})
        except httpx.HTTPError as e:
            logger.info("API key probe failed: %s", type(e).__name__)
            return False

        if res.status_code // 100 == 2:
            return True

        logger.info("API key probe rejected with status %s", res.status_code)
        return False
