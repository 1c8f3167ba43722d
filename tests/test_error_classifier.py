import pytest

from core.error_classifier import classify_provider_error
from util.errors import (
    ContentPolicyViolationError,
    CredentialError,
    QuotaExceededError,
    UnknownProviderError,
)


class _ProviderError(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(f"400 INVALID_ARGUMENT. {message}")
        self.message = message


@pytest.mark.parametrize(
    "message, expected",
    [
        ("API key not valid. Please pass a valid API key.", CredentialError),
        ("You exceeded your current quota", QuotaExceededError),
        ("Response was blocked due to SAFETY", ContentPolicyViolationError),
        ("API key quota exceeded", CredentialError),
        ("quota hit while checking SAFETY", QuotaExceededError),
        ("api key bad", UnknownProviderError),
        ("Quota", UnknownProviderError),
        ("safety", UnknownProviderError),
    ],
)
def test_first_matching_rule_wins(message: str, expected: type) -> None:
    assert type(classify_provider_error(RuntimeError(message))) is expected


def test_classified_errors_use_fixed_messages() -> None:
    error = classify_provider_error(RuntimeError("API key expired"))
    assert error.message == "API key không hợp lệ hoặc đã hết hạn. Vui lòng kiểm tra lại."
    assert error.http_status == 401
    assert error.code == "credential_error"

    error = classify_provider_error(RuntimeError("quota exceeded"))
    assert error.message == "API key đã vượt quá giới hạn sử dụng. Vui lòng thử lại sau."
    assert error.http_status == 429

    error = classify_provider_error(RuntimeError("finishReason: SAFETY"))
    assert error.message.startswith("Nội dung giáo án có thể chứa thông tin bị hạn chế")


def test_unknown_error_forwards_upstream_message() -> None:
    error = classify_provider_error(ConnectionError("Connection reset by peer"))
    assert isinstance(error, UnknownProviderError)
    assert error.message == "Connection reset by peer"
    assert error.http_status == 502


def test_unknown_error_without_message_uses_fallback() -> None:
    error = classify_provider_error(RuntimeError())
    assert isinstance(error, UnknownProviderError)
    assert error.message == "Không thể kết nối với Gemini API"


def test_sdk_message_attribute_is_preferred() -> None:
    error = classify_provider_error(_ProviderError("model not found"))
    assert error.message == "model not found"
