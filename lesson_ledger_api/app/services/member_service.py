"""
Business logic for the member roster.

Members belong to a tutor (``userId``) and are addressed by name within
that roster.  Names are not unique per tutor; when duplicates exist the
lookups below act on whichever rows the store matches, exactly like the
update and delete statements do.

Balance changes come in three flavours:

* ``charge_lessons`` adds an arbitrary delta with an atomic increment;
* ``cancel_lesson`` adds one credit back;
* ``set_lesson_count`` overwrites the balance with a value the caller
  computed, which races with concurrent increments.

None of them touch the lesson log.  ``services.ledger_service`` offers
the transactional variants that do.
"""

import logging
from typing import List, Optional

from ..core.db import Database
from ..schemas.member import MemberCreate, MemberRead


logger = logging.getLogger(__name__)


class MemberService:
    """Сервис для работы с учениками (members) одного репетитора."""

    def __init__(self, store: Database) -> None:
        self.store = store

    async def list_members(self, user_id: str) -> List[MemberRead]:
        """Return every member on the roster of ``user_id``."""
        with self.store.get_cursor() as cursor:
            rows = cursor.execute(
                "SELECT * FROM member WHERE userId = ?",
                (user_id,),
            ).fetchall()
        logger.debug("Fetched %d members for %s", len(rows), user_id)
        return [MemberRead.model_validate(dict(row)) for row in rows]

    async def get_member(self, name: str, user_id: str) -> Optional[MemberRead]:
        """Return the first member called ``name`` or ``None``."""
        with self.store.get_cursor() as cursor:
            row = cursor.execute(
                "SELECT * FROM member WHERE name = ? AND userId = ?",
                (name, user_id),
            ).fetchone()
        if row is None:
            return None
        return MemberRead.model_validate(dict(row))

    async def create_member(self, data: MemberCreate) -> int:
        """Insert a member row and return its key.  No duplicate check."""
        with self.store.get_cursor() as cursor:
            cursor.execute(
                "INSERT INTO member (userId, name, phone, lesson) VALUES (?, ?, ?, ?)",
                (data.user_id, data.name, data.phone, data.lesson),
            )
            member_id = cursor.lastrowid
        logger.info("Registered member %s for %s with %d lessons", data.name, data.user_id, data.lesson)
        return member_id

    async def charge_lessons(self, name: str, user_id: str, delta: int) -> int:
        """Add ``delta`` lesson credits.  Returns the number of rows changed."""
        with self.store.get_cursor() as cursor:
            cursor.execute(
                "UPDATE member SET lesson = lesson + ? WHERE name = ? AND userId = ?",
                (delta, name, user_id),
            )
            affected = cursor.rowcount
        logger.info("Charged %d lessons to %s (%s), %d row(s)", delta, name, user_id, affected)
        return affected

    async def cancel_lesson(self, name: str, user_id: str) -> int:
        """Give one lesson credit back."""
        with self.store.get_cursor() as cursor:
            cursor.execute(
                "UPDATE member SET lesson = lesson + 1 WHERE name = ? AND userId = ?",
                (name, user_id),
            )
            affected = cursor.rowcount
        logger.info("Cancelled a lesson for %s (%s), %d row(s)", name, user_id, affected)
        return affected

    async def set_lesson_count(self, name: str, user_id: str, lesson: int) -> int:
        """Overwrite the balance with ``lesson``."""
        with self.store.get_cursor() as cursor:
            cursor.execute(
                "UPDATE member SET lesson = ? WHERE name = ? AND userId = ?",
                (lesson, name, user_id),
            )
            affected = cursor.rowcount
        logger.info("Set lesson balance of %s (%s) to %d, %d row(s)", name, user_id, lesson, affected)
        return affected

    async def delete_member(self, name: str, user_id: str) -> int:
        """Remove the member row.

        Lesson and payment records are left in place and stay reachable
        through the per‑name listing endpoints.
        """
        with self.store.get_cursor() as cursor:
            cursor.execute(
                "DELETE FROM member WHERE name = ? AND userId = ?",
                (name, user_id),
            )
            affected = cursor.rowcount
        logger.info("Deleted member %s (%s), %d row(s)", name, user_id, affected)
        return affected
