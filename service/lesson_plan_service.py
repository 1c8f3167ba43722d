# service/lesson_plan_service.py
import logging
from config.settings import settings
from core.error_classifier import classify_provider_error
from core.gemini_client import TextGeneratorFactory, build_gemini_generator
from core.prompt_builder import build_user_prompt
from model.lesson import LessonInfo, ProcessingOptions
from util.errors import CredentialMissingError, EmptyResultError

logger = logging.getLogger(__name__)


class LessonPlanService:
    """
    Integrates the digital-competency (NLS) framework into a lesson plan via Gemini.

    Flow:
    - No API key: fail immediately, nothing is sent.
    - Build the user prompt from lesson + options, call Gemini once with the
      fixed system instruction and model.
    - Empty / whitespace output is a failure; every upstream failure is
      classified into one GenerationError. Nothing is retried.
    """

    def __init__(
        self,
        generator_factory: TextGeneratorFactory = build_gemini_generator,
        *,
        model: str | None = None,
        system_instruction: str | None = None,
    ) -> None:
        self._generator_factory = generator_factory
        self._model: str = model or settings.GEMINI_MODEL
        self._system_instruction: str = (
            system_instruction or settings.GENERATION_SYSTEM_PROMPT
        )

    async def generate(
        self, lesson: LessonInfo, options: ProcessingOptions, api_key: str
    ) -> str:
        if not api_key:
            raise CredentialMissingError()

        prompt = build_user_prompt(lesson, options)
        try:
            generator = self._generator_factory(api_key)
            text = await generator.generate(
                model=self._model,
                system_instruction=self._system_instruction,
                prompt=prompt,
            )
        except Exception as e:
            logger.error("Gemini service error: %s", e)
            raise classify_provider_error(e) from e

        if not text or not text.strip():
            logger.error("Gemini service error: empty result")
            raise EmptyResultError()

        return text
