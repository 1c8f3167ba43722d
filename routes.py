# routes.py
from fastapi import FastAPI
from controller.api_key_controller import api_key_router
from controller.lesson_plan_controller import lesson_plan_router


def register_routes(app: FastAPI) -> None:
    """Register & Access control controllers here."""
    app.include_router(api_key_router)
    app.include_router(lesson_plan_router)
