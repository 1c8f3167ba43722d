# core/gemini_client.py
from typing import Callable, Final, Optional, Protocol
from google import genai
from google.genai import types

BLOCKING_FINISH_REASONS: Final[frozenset[str]] = frozenset(
    {"SAFETY", "PROHIBITED_CONTENT", "BLOCKLIST", "SPII", "RECITATION"}
)


class TextGenerator(Protocol):
    async def generate(
        self, *, model: str, system_instruction: str, prompt: str
    ) -> Optional[str]: ...


TextGeneratorFactory = Callable[[str], TextGenerator]


def _name(value: object) -> str:
    return str(getattr(value, "name", value) or "")


def _blocked_reason(response: types.GenerateContentResponse) -> Optional[str]:
    """Why Gemini withheld the text, if it did."""
    feedback = response.prompt_feedback
    if feedback is not None and feedback.block_reason:
        return _name(feedback.block_reason)
    for candidate in response.candidates or []:
        reason = _name(candidate.finish_reason)
        if reason in BLOCKING_FINISH_REASONS:
            return reason
    return None


class GeminiTextGenerator:
    """Thin async wrapper over google-genai bound to one user's API key."""

    def __init__(self, api_key: str) -> None:
        self._client = genai.Client(api_key=api_key)

    async def generate(
        self, *, model: str, system_instruction: str, prompt: str
    ) -> Optional[str]:
        response = await self._client.aio.models.generate_content(
            model=model,
            contents=prompt,
            config=types.GenerateContentConfig(system_instruction=system_instruction),
        )
        text = response.text
        if not text:
            reason = _blocked_reason(response)
            if reason:
                raise ValueError(f"Text not available. Response was blocked due to {reason}")
        return text


def build_gemini_generator(api_key: str) -> TextGenerator:
    return GeminiTextGenerator(api_key)
