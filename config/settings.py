# config/settings.py
import os
import sys
from dotenv import load_dotenv
from pydantic import ValidationError, Field
from pydantic_settings import BaseSettings
from util.constants import ExternalURIs
from util.enums import Environment


if os.getenv("APP_ENV", Environment.DEV) == Environment.DEV:
    load_dotenv()


class Settings(BaseSettings):
    # App
    APP_ENV: str = Field(Environment.DEV.value, validation_alias="APP_ENV")
    REDIS_URL: str = Field("redis://localhost:6379/0", validation_alias="REDIS_URL")
    LOG_LEVEL: str = Field("INFO", validation_alias="LOG_LEVEL")

    # CORS
    ALLOWED_ORIGIN: str = Field(
        "http://localhost:5173", validation_alias="ALLOWED_ORIGIN"
    )

    # API key checks
    API_KEY_PREFIX: str = Field("AIza", validation_alias="API_KEY_PREFIX")
    API_KEY_MIN_LENGTH: int = Field(30, validation_alias="API_KEY_MIN_LENGTH")
    PROBE_TIMEOUT_SECONDS: float = Field(10.0, validation_alias="PROBE_TIMEOUT_SECONDS")

    # Gemini Settings
    GEMINI_MODELS_URL: str = Field(
        ExternalURIs.GEMINI_MODELS, validation_alias="GEMINI_MODELS_URL"
    )
    GEMINI_MODEL: str = Field("gemini-2.0-flash-exp", validation_alias="GEMINI_MODEL")

    # Prompts
    GENERATION_SYSTEM_PROMPT: str = (
        "Bạn là chuyên gia giáo dục Việt Nam, am hiểu Chương trình Giáo dục phổ thông 2018 "
        "và Khung năng lực số (NLS) dành cho học sinh.\n"
        "Nhiệm vụ: tích hợp năng lực số vào giáo án do giáo viên cung cấp.\n"
        "\n"
        "Nguyên tắc:\n"
        "- Chỉ sử dụng các năng lực có trong KHUNG NĂNG LỰC SỐ được cung cấp, ghi rõ mã năng lực.\n"
        "- Chọn năng lực phù hợp với môn học, lớp và hoạt động cụ thể của bài học.\n"
        "- Không bịa đặt nội dung, không thay đổi mục tiêu kiến thức của bài học.\n"
        "- Giữ nguyên cấu trúc, thứ tự mục và định dạng của giáo án gốc.\n"
        "- Trình bày bằng tiếng Việt, không dùng khối mã (code fences).\n"
    )


try:
    settings = Settings()
except ValidationError as e:
    print("❌ Missing/invalid environment variables:", file=sys.stderr)
    for err in e.errors():
        loc = ".".join(str(x) for x in err.get("loc", []))
        msg = err.get("msg", "")
        print(f" - {loc}: {msg}", file=sys.stderr)
    sys.exit(1)
except Exception as e:
    print(f"❌ Settings initialization failed: {e}", file=sys.stderr)
    sys.exit(1)
