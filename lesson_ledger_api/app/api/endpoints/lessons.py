"""
Lesson log endpoints.

Paths follow the front end's conventions, including the unseparated
``/lessonListmonth``.
"""

from datetime import date
from typing import List

from fastapi import APIRouter, Depends, Path, Query

from ...schemas.common import MessageResponse
from ...schemas.lesson import LessonCreate, LessonName, LessonRead
from ...services.lesson_service import LessonService
from ..dependencies import get_lesson_service


router = APIRouter()


@router.post("/lessonList", response_model=MessageResponse)
async def create_lesson(
    lesson: LessonCreate,
    service: LessonService = Depends(get_lesson_service),
) -> MessageResponse:
    await service.create_lesson(lesson)
    return MessageResponse(message="Lesson data saved successfully")


@router.get("/lessonList/today", response_model=List[LessonName])
async def list_today_lessons(
    day: date = Query(..., alias="date"),
    user_id: str = Query(..., alias="userId"),
    service: LessonService = Depends(get_lesson_service),
) -> List[LessonName]:
    """Names of members who had a lesson on ``date`` (one entry per lesson)."""
    return await service.list_names_for_day(day, user_id)


@router.get("/lessonList/detail/{name}", response_model=List[LessonRead])
async def list_member_lessons(
    name: str = Path(..., description="Member name"),
    user_id: str = Query(..., alias="userId"),
    service: LessonService = Depends(get_lesson_service),
) -> List[LessonRead]:
    return await service.list_for_member(name, user_id)


@router.get("/lessonListmonth", response_model=List[LessonRead])
async def list_month_lessons(
    month: int = Query(..., ge=1, le=12),
    user_id: str = Query(..., alias="userId"),
    service: LessonService = Depends(get_lesson_service),
) -> List[LessonRead]:
    """Lessons of all members in ``month`` of any year."""
    return await service.list_for_month(month, user_id)


@router.delete("/lessonList/{name}", response_model=MessageResponse)
async def delete_latest_lesson(
    name: str = Path(..., description="Member name"),
    user_id: str = Query(..., alias="userId"),
    service: LessonService = Depends(get_lesson_service),
) -> MessageResponse:
    """Remove the most recent lesson record of a member.

    Succeeds even when there is nothing to remove.
    """
    await service.delete_latest(name, user_id)
    return MessageResponse(message="Lesson data deleted successfully")
