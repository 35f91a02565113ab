"""
Pydantic models for lesson records.

A lesson record is appended each time a member takes a lesson.  When
``lessonDay`` is omitted on creation the store stamps the current local
time.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .common import CamelModel


class LessonCreate(CamelModel):
    user_id: str = Field(..., example="tutor01")
    name: str = Field(..., example="Kim")
    phone: str = Field("", example="010-1234-5678")
    lesson_day: Optional[datetime] = Field(None, description="Back‑date the record; defaults to now")


class LessonRead(CamelModel):
    id: int
    user_id: str
    name: str
    phone: str | None = None
    lesson_day: datetime


class LessonName(CamelModel):
    """Row returned by the today's lessons query."""

    name: str
