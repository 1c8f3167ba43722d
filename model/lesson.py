# model/lesson.py
from pydantic import BaseModel


class LessonInfo(BaseModel):
    textbook: str
    subject: str
    grade: str
    content: str
    distributionContent: str | None = None


class ProcessingOptions(BaseModel):
    analyzeOnly: bool = False
    detailedReport: bool = False
