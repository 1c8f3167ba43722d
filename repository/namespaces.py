# repository/namespaces.py
from typing import Final

API_KEY: Final[str] = "gemini_api_key"
