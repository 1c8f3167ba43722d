# controller/controller_dependencies.py
from repository.api_key_repository import ApiKeyRepository
from service.api_key_validation_service import ApiKeyValidationService
from service.credential_store import CredentialStore
from service.lesson_plan_service import LessonPlanService


class ActiveApiKey:
    """The API key last announced by the CredentialStore ("" when none)."""

    def __init__(self) -> None:
        self.value = ""

    def set(self, api_key: str) -> None:
        self.value = api_key


_active_api_key = ActiveApiKey()
_credential_store = CredentialStore(
    ApiKeyRepository(),
    ApiKeyValidationService(),
    on_api_key_set=_active_api_key.set,
)


def get_active_api_key() -> ActiveApiKey:
    return _active_api_key


def get_credential_store() -> CredentialStore:
    return _credential_store


def get_lesson_plan_service() -> LessonPlanService:
    return LessonPlanService()
