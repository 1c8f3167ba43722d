# model/api.py
from pydantic import BaseModel, Field
from model.credential import CredentialStatus, InvalidReason
from model.lesson import LessonInfo, ProcessingOptions


class SubmitKeyRequest(BaseModel):
    apiKey: str


class CredentialStateResponse(BaseModel):
    status: CredentialStatus
    hasKey: bool
    reason: InvalidReason | None = None
    message: str | None = None


class GenerateLessonPlanRequest(BaseModel):
    lesson: LessonInfo
    options: ProcessingOptions = Field(default_factory=ProcessingOptions)


class GenerateLessonPlanResponse(BaseModel):
    content: str


class ErrorResponse(BaseModel):
    code: str
    message: str
