"""
Pydantic models for lesson members.

A member is a student on a tutor's roster.  ``lesson`` is the number of
prepaid lessons left; it may go negative when a tutor completes more
lessons than were charged.
"""

from pydantic import Field

from .common import CamelModel


class MemberCreate(CamelModel):
    """Schema for registering a member."""

    user_id: str = Field(..., example="tutor01")
    name: str = Field(..., example="Kim")
    phone: str = Field("", example="010-1234-5678")
    lesson: int = Field(0, example=4)


class LessonCountUpdate(CamelModel):
    """Body of the charge and complete endpoints.

    For a charge ``lesson`` is the number of credits to add (negative
    values subtract).  For a completion it is the new balance.
    """

    lesson: int = Field(..., example=3)


class MemberRead(CamelModel):
    """Schema for reading a member row."""

    member_id: int
    user_id: str
    name: str
    phone: str | None = None
    lesson: int
