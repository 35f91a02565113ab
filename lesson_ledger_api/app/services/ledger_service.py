"""
Transactional lesson workflows.

Completing a lesson touches two tables: the member's balance goes down
by one and a lesson record is appended.  The legacy endpoints expose
those as two independent requests (``PUT /api/member/{name}`` followed
by ``POST /api/lessonList``), so a failure between them leaves the
balance and the log out of step.  The same holds for undoing a lesson
(``PUT /api/member/cancel/{name}`` plus ``DELETE /api/lessonList/{name}``).

``LedgerService`` runs each pair inside one store transaction.  The
two‑request endpoints stay available for existing clients.
"""

import logging

from ..core.db import Database
from ..schemas.member import MemberRead
from .lesson_service import DELETE_LATEST_LESSON


logger = logging.getLogger(__name__)


class LedgerService:
    """Atomic complete/undo operations over ``member`` and ``lessonList``."""

    def __init__(self, store: Database) -> None:
        self.store = store

    async def complete_lesson(self, name: str, user_id: str) -> MemberRead:
        """Take one lesson credit and log the lesson.

        Raises ``ValueError`` if the member does not exist; nothing is
        written in that case.
        """
        with self.store.get_cursor() as cursor:
            member = cursor.execute(
                "SELECT * FROM member WHERE name = ? AND userId = ?",
                (name, user_id),
            ).fetchone()
            if member is None:
                raise ValueError(f"Member {name} not found")
            cursor.execute(
                "UPDATE member SET lesson = lesson - 1 WHERE memberId = ?",
                (member["memberId"],),
            )
            cursor.execute(
                "INSERT INTO lessonList (userId, name, phone) VALUES (?, ?, ?)",
                (user_id, name, member["phone"]),
            )
            updated = cursor.execute(
                "SELECT * FROM member WHERE memberId = ?",
                (member["memberId"],),
            ).fetchone()
        logger.info("Completed a lesson for %s (%s), %d left", name, user_id, updated["lesson"])
        return MemberRead.model_validate(dict(updated))

    async def undo_lesson(self, name: str, user_id: str) -> MemberRead:
        """Give the credit back and drop the most recent lesson record.

        When the member has no lesson records the balance is still
        restored.  Raises ``ValueError`` if the member does not exist.
        """
        with self.store.get_cursor() as cursor:
            member = cursor.execute(
                "SELECT * FROM member WHERE name = ? AND userId = ?",
                (name, user_id),
            ).fetchone()
            if member is None:
                raise ValueError(f"Member {name} not found")
            cursor.execute(
                "UPDATE member SET lesson = lesson + 1 WHERE memberId = ?",
                (member["memberId"],),
            )
            cursor.execute(DELETE_LATEST_LESSON, (name, user_id))
            removed = cursor.rowcount
            updated = cursor.execute(
                "SELECT * FROM member WHERE memberId = ?",
                (member["memberId"],),
            ).fetchone()
        logger.info("Undid a lesson for %s (%s), removed %d record(s)", name, user_id, removed)
        return MemberRead.model_validate(dict(updated))
