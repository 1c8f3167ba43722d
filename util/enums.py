# util/enums.py
from enum import Enum
from typing import NamedTuple


class Color(str, Enum):
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"
    BOLD = "\033[1m"

    def __str__(self):
        return self.value


class Environment(str, Enum):
    DEV = "dev"
    PROD = "prod"


class ErrorDetail(NamedTuple):
    code: str
    message: str
    http_status: int


class CredentialMessage(str, Enum):
    # Shown with an invalid CredentialState; never raised
    EMPTY = "Vui lòng nhập API key"
    INVALID = "API key không hợp lệ. Vui lòng kiểm tra lại."


class ErrorMessage(Enum):
    CREDENTIAL_MISSING = ErrorDetail(
        "credential_missing", "API key không được cung cấp", 400
    )
    EMPTY_RESULT = ErrorDetail(
        "empty_result", "Gemini API trả về kết quả rỗng", 502
    )
    CREDENTIAL_ERROR = ErrorDetail(
        "credential_error",
        "API key không hợp lệ hoặc đã hết hạn. Vui lòng kiểm tra lại.",
        401,
    )
    QUOTA_EXCEEDED = ErrorDetail(
        "quota_exceeded",
        "API key đã vượt quá giới hạn sử dụng. Vui lòng thử lại sau.",
        429,
    )
    CONTENT_POLICY_VIOLATION = ErrorDetail(
        "content_policy_violation",
        "Nội dung giáo án có thể chứa thông tin bị hạn chế. Vui lòng kiểm tra lại.",
        422,
    )
    UNKNOWN_PROVIDER_ERROR = ErrorDetail(
        "unknown_provider_error", "Không thể kết nối với Gemini API", 502
    )
