# util/errors.py
from util.enums import ErrorDetail, ErrorMessage


class AppError(Exception):
    """Error carrying a user-facing message and the HTTP status to answer with."""

    def __init__(self, message: str, http_status: int, code: str = "app_error") -> None:
        super().__init__(message)
        self.message = message
        self.http_status = http_status
        self.code = code


class GenerationError(AppError):
    """Terminal, classified failure of a lesson-plan generation request."""

    detail: ErrorDetail = ErrorMessage.UNKNOWN_PROVIDER_ERROR.value

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message or self.detail.message, self.detail.http_status, self.detail.code
        )


class CredentialMissingError(GenerationError):
    detail = ErrorMessage.CREDENTIAL_MISSING.value


class EmptyResultError(GenerationError):
    detail = ErrorMessage.EMPTY_RESULT.value


class CredentialError(GenerationError):
    detail = ErrorMessage.CREDENTIAL_ERROR.value


class QuotaExceededError(GenerationError):
    detail = ErrorMessage.QUOTA_EXCEEDED.value


class ContentPolicyViolationError(GenerationError):
    detail = ErrorMessage.CONTENT_POLICY_VIOLATION.value


class UnknownProviderError(GenerationError):
    """Anything unmatched; forwards the upstream message when there is one."""

    detail = ErrorMessage.UNKNOWN_PROVIDER_ERROR.value
