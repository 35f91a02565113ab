"""
Top‑level API router.

All routes live directly under ``/api`` without a version segment,
because the existing front end calls paths such as ``/api/member`` and
``/api/newsList``.  Several domains use flat paths (``/api/write``,
``/api/payListmonth``), so only the member routes take a prefix here.
"""

from fastapi import APIRouter

from .endpoints import members, lessons, payments, posts, users

router = APIRouter()

router.include_router(members.router, prefix="/member", tags=["members"])
# Lesson, payment and post routers define their own paths internally.
router.include_router(lessons.router, tags=["lessons"])
router.include_router(payments.router, tags=["payments"])
router.include_router(posts.router, tags=["posts"])
router.include_router(users.router, prefix="/user", tags=["users"])
