"""
User account endpoints.

Signup, duplicate‑id check, login and logout.  Login returns the stored
user row, password field included, because the front end keeps it in
local state; this is a known weakness documented in ``core.security``.
"""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from ...core.security import USER_COOKIE, encode_user_cookie, get_cookie_user_id
from ...schemas.common import MessageResponse
from ...schemas.user import ExistsResponse, LoginResponse, UserCheck, UserJoin, UserLogin
from ...services.user_service import UserService
from ..dependencies import get_user_service


router = APIRouter()


@router.post("/join", response_model=MessageResponse)
async def join(user: UserJoin, service: UserService = Depends(get_user_service)) -> MessageResponse:
    """Create an account.  ``pwCon`` is stored but not compared with ``pw``."""
    try:
        await service.create_user(user)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="User id already exists")
    return MessageResponse(message="Data saved successfully")


@router.post("/check", response_model=ExistsResponse)
async def check_duplicate_id(body: UserCheck, service: UserService = Depends(get_user_service)) -> ExistsResponse:
    return ExistsResponse(exists=await service.id_exists(body.id))


@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: UserLogin,
    response: Response,
    service: UserService = Depends(get_user_service),
) -> LoginResponse:
    """Check credentials, record the login and set the ``user`` cookie."""
    user = await service.authenticate(credentials.id, credentials.pw)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    await service.record_login(user.id)
    response.set_cookie(USER_COOKIE, encode_user_cookie(user.id), httponly=False, samesite="lax")
    return LoginResponse(message="Login successful", user=user)


@router.post("/logout", response_model=MessageResponse)
async def logout(
    response: Response,
    user_id: str = Depends(get_cookie_user_id),
    service: UserService = Depends(get_user_service),
) -> MessageResponse:
    """Delete the login row of the user named by the ``user`` cookie."""
    await service.logout(user_id)
    response.delete_cookie(USER_COOKIE)
    return MessageResponse(message="Logout successful")
