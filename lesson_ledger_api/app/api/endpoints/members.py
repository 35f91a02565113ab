"""
Member endpoints.

Manage a tutor's roster and the lesson‑credit balance of each member.
Every route is scoped by the ``userId`` query parameter (or body field
on registration).  Balance changes made here do not write the lesson
log; see ``/complete`` and ``/undo`` for the transactional workflows.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from ...schemas.common import MessageResponse
from ...schemas.member import LessonCountUpdate, MemberCreate, MemberRead
from ...services.ledger_service import LedgerService
from ...services.member_service import MemberService
from ..dependencies import get_ledger_service, get_member_service


router = APIRouter()


@router.get("", response_model=List[MemberRead])
async def list_members(
    user_id: str = Query(..., alias="userId"),
    service: MemberService = Depends(get_member_service),
) -> List[MemberRead]:
    """Return all members of the tutor, in store order."""
    return await service.list_members(user_id)


@router.post("", response_model=MessageResponse)
async def register_member(
    member: MemberCreate,
    service: MemberService = Depends(get_member_service),
) -> MessageResponse:
    """Register a member.  Duplicate names are accepted."""
    await service.create_member(member)
    return MessageResponse(message="Data saved successfully")


@router.get("/detail/{name}", response_model=Optional[MemberRead])
async def get_member_detail(
    name: str = Path(..., description="Member name"),
    user_id: str = Query(..., alias="userId"),
    service: MemberService = Depends(get_member_service),
) -> Optional[MemberRead]:
    """Return the first member with this name, or ``null``."""
    return await service.get_member(name, user_id)


@router.put("/charge/{name}", response_model=MessageResponse)
async def charge_lessons(
    body: LessonCountUpdate,
    name: str = Path(..., description="Member name"),
    user_id: str = Query(..., alias="userId"),
    service: MemberService = Depends(get_member_service),
) -> MessageResponse:
    """Add ``lesson`` credits to the balance after a payment."""
    await service.charge_lessons(name, user_id, body.lesson)
    return MessageResponse(message="Member lesson increased successfully")


@router.put("/cancel/{name}", response_model=MessageResponse)
async def cancel_lesson(
    name: str = Path(..., description="Member name"),
    user_id: str = Query(..., alias="userId"),
    service: MemberService = Depends(get_member_service),
) -> MessageResponse:
    """Give one credit back.

    The matching lesson record is not removed; clients call
    ``DELETE /api/lessonList/{name}`` as well, or use ``/undo``.
    """
    await service.cancel_lesson(name, user_id)
    return MessageResponse(message="Member lesson increased successfully")


@router.put("/complete/{name}", response_model=MemberRead)
async def complete_lesson(
    name: str = Path(..., description="Member name"),
    user_id: str = Query(..., alias="userId"),
    ledger: LedgerService = Depends(get_ledger_service),
) -> MemberRead:
    """Decrement the balance and log the lesson in one transaction."""
    try:
        return await ledger.complete_lesson(name, user_id)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Member not found")


@router.put("/undo/{name}", response_model=MemberRead)
async def undo_lesson(
    name: str = Path(..., description="Member name"),
    user_id: str = Query(..., alias="userId"),
    ledger: LedgerService = Depends(get_ledger_service),
) -> MemberRead:
    """Restore one credit and remove the latest lesson record in one transaction."""
    try:
        return await ledger.undo_lesson(name, user_id)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Member not found")


@router.put("/{name}", response_model=MessageResponse)
async def set_lesson_count(
    body: LessonCountUpdate,
    name: str = Path(..., description="Member name"),
    user_id: str = Query(..., alias="userId"),
    service: MemberService = Depends(get_member_service),
) -> MessageResponse:
    """Overwrite the balance after a lesson.

    The client sends the already decremented value.  The lesson record
    is written by a separate ``POST /api/lessonList`` call.
    """
    await service.set_lesson_count(name, user_id, body.lesson)
    return MessageResponse(message="Lesson data updated successfully")


@router.delete("/{name}", response_model=MessageResponse)
async def delete_member(
    name: str = Path(..., description="Member name"),
    user_id: str = Query(..., alias="userId"),
    service: MemberService = Depends(get_member_service),
) -> MessageResponse:
    """Remove a member who quit.  Lesson and payment history is kept."""
    await service.delete_member(name, user_id)
    return MessageResponse(message="Member deleted successfully")
