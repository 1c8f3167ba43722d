# core/error_classifier.py
from util.errors import (
    ContentPolicyViolationError,
    CredentialError,
    GenerationError,
    QuotaExceededError,
    UnknownProviderError,
)

# First match wins; case-sensitive substring checks on the upstream message.
_RULES: tuple[tuple[str, type[GenerationError]], ...] = (
    ("API key", CredentialError),
    ("quota", QuotaExceededError),
    ("SAFETY", ContentPolicyViolationError),
)


def _message_of(exc: BaseException) -> str:
    message = getattr(exc, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(exc)


def classify_provider_error(exc: BaseException) -> GenerationError:
    """Map any failure raised by the Gemini call to one classified error."""
    message = _message_of(exc)
    for needle, error_cls in _RULES:
        if needle in message:
            return error_cls()
    return UnknownProviderError(message or None)
