"""
API dependencies.

The store client and settings live on ``app.state`` (set by
``create_app``).  These functions expose them to endpoints and build the
per‑request service instances.
"""

from fastapi import Depends, Request

from ..core.config import Settings
from ..core.db import Database
from ..services.ledger_service import LedgerService
from ..services.lesson_service import LessonService
from ..services.member_service import MemberService
from ..services.payment_service import PaymentService
from ..services.post_service import PostService
from ..services.user_service import UserService


def get_store(request: Request) -> Database:
    """Return the store client owned by the running application."""
    return request.app.state.store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_member_service(store: Database = Depends(get_store)) -> MemberService:
    return MemberService(store)


def get_lesson_service(store: Database = Depends(get_store)) -> LessonService:
    return LessonService(store)


def get_ledger_service(store: Database = Depends(get_store)) -> LedgerService:
    return LedgerService(store)


def get_payment_service(store: Database = Depends(get_store)) -> PaymentService:
    return PaymentService(store)


def get_post_service(store: Database = Depends(get_store)) -> PostService:
    return PostService(store)


def get_user_service(
    store: Database = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> UserService:
    return UserService(store, password_hashing=settings.password_hashing)
