"""
Pydantic models for user accounts.

``UserRead`` mirrors the stored row, password included, because the
front end expects the full row back from login.  Do not reuse it for
any listing endpoint.
"""

from typing import Optional

from pydantic import BaseModel, Field

from .common import CamelModel


class UserJoin(CamelModel):
    """Signup payload.

    ``pwCon`` is the confirmation typed by the user.  It is stored as
    submitted; the front end is responsible for comparing it with ``pw``.
    """

    name: str = Field(..., example="Lee")
    phone: str = Field("", example="010-9876-5432")
    id: str = Field(..., min_length=1, example="tutor01")
    pw: str = Field(..., min_length=1, example="secret")
    pw_con: Optional[str] = Field(None, example="secret")


class UserCheck(BaseModel):
    id: str = Field(..., example="tutor01")


class UserLogin(BaseModel):
    id: str = Field(..., example="tutor01")
    pw: str = Field(..., example="secret")


class UserRead(CamelModel):
    id: str
    pw: str
    name: Optional[str] = None
    phone: Optional[str] = None
    pw_con: Optional[str] = None


class ExistsResponse(BaseModel):
    exists: bool


class LoginResponse(BaseModel):
    message: str
    user: UserRead
