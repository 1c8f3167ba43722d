# service/credential_store.py
import logging
from typing import Callable
from model.credential import CredentialState, CredentialStatus, InvalidReason
from repository.api_key_repository import ApiKeyStore
from service.api_key_validation_service import ApiKeyValidationService
from util.enums import CredentialMessage

logger = logging.getLogger(__name__)

ApiKeyListener = Callable[[str], None]


class CredentialStore:
    """
    Owns the user's Gemini API key and its validity state.

    Flow:
    - initialize: a persisted key is trusted as-is (no probe) and announced.
    - submit: empty / bad format fail locally; otherwise exactly one probe.
      Only a confirmed key is persisted and announced.
    - remove: erase the persisted key and announce "" (no longer usable).

    Validation failures never raise; they become an `invalid` state with a
    displayable message. Submissions are expected to be serialized by the
    caller; one arriving while a probe is in flight is ignored.
    """

    def __init__(
        self,
        store: ApiKeyStore,
        validator: ApiKeyValidationService,
        on_api_key_set: ApiKeyListener | None = None,
    ) -> None:
        self._store = store
        self._validator = validator
        self._on_api_key_set = on_api_key_set
        self._api_key = ""
        self._state = CredentialState(status=CredentialStatus.absent)

    @property
    def state(self) -> CredentialState:
        return self._state

    @property
    def api_key(self) -> str:
        return self._api_key

    def _notify(self, api_key: str) -> None:
        if self._on_api_key_set is not None:
            self._on_api_key_set(api_key)

    def _invalid(self, reason: InvalidReason, message: str) -> CredentialState:
        self._state = CredentialState(
            status=CredentialStatus.invalid, reason=reason, message=message
        )
        return self._state

    async def initialize(self) -> CredentialState:
        stored = await self._store.get()
        if stored:
            self._api_key = stored
            self._state = CredentialState(status=CredentialStatus.confirmed)
            self._notify(stored)
        else:
            self._state = CredentialState(status=CredentialStatus.pending_input)
        return self._state

    async def submit(self, raw_input: str) -> CredentialState:
        if self._state.status == CredentialStatus.validating:
            logger.warning("API key submission ignored: validation already in flight")
            return self._state

        candidate = (raw_input or "").strip()
        if not candidate:
            return self._invalid(InvalidReason.empty, CredentialMessage.EMPTY.value)

        if not self._validator.is_plausible(candidate):
            return self._invalid(InvalidReason.format, CredentialMessage.INVALID.value)

        self._state = CredentialState(status=CredentialStatus.validating)
        try:
            accepted = await self._validator.probe(candidate)
        except Exception as e:
            logger.info("API key probe errored: %s", type(e).__name__)
            accepted = False
        except BaseException:
            # Cancelled mid-probe: leave the store usable for the next submit
            self._state = CredentialState(status=CredentialStatus.pending_input)
            raise

        if not accepted:
            return self._invalid(InvalidReason.rejected, CredentialMessage.INVALID.value)

        try:
            await self._store.put(candidate)
        except Exception:
            self._state = CredentialState(status=CredentialStatus.pending_input)
            raise
        self._api_key = candidate
        self._state = CredentialState(status=CredentialStatus.confirmed)
        self._notify(candidate)
        return self._state

    async def remove(self) -> CredentialState:
        await self._store.delete()
        self._api_key = ""
        self._state = CredentialState(status=CredentialStatus.pending_input)
        self._notify("")
        return self._state

    def edit(self) -> CredentialState:
        """User started re-editing after a failed attempt."""
        if self._state.status == CredentialStatus.invalid:
            self._state = CredentialState(status=CredentialStatus.pending_input)
        return self._state
