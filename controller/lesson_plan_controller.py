# controller/lesson_plan_controller.py
from fastapi import APIRouter, Depends
from controller.controller_dependencies import (
    ActiveApiKey,
    get_active_api_key,
    get_lesson_plan_service,
)
from model.api import (
    ErrorResponse,
    GenerateLessonPlanRequest,
    GenerateLessonPlanResponse,
)
from service.lesson_plan_service import LessonPlanService
from util.constants import InternalURIs

lesson_plan_router = APIRouter()


@lesson_plan_router.post(
    InternalURIs.GENERATE_LESSON_PLAN,
    response_model=GenerateLessonPlanResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
async def generate_lesson_plan(
    payload: GenerateLessonPlanRequest,
    active_key: ActiveApiKey = Depends(get_active_api_key),
    service: LessonPlanService = Depends(get_lesson_plan_service),
) -> GenerateLessonPlanResponse:
    content = await service.generate(payload.lesson, payload.options, active_key.value)
    return GenerateLessonPlanResponse(content=content)
