"""
Business logic for the lesson log.

The log is append‑mostly: a row per lesson taken, and the only removal
is "undo the latest one" for a member.  Month filters compare the month
component only, so March lessons of every year are returned together.
"""

import logging
from datetime import date
from typing import List

from ..core.db import TIMESTAMP_FORMAT, Database
from ..schemas.lesson import LessonCreate, LessonName, LessonRead


logger = logging.getLogger(__name__)

# Deletes the newest record of one member; ``id`` breaks ties between
# records stamped within the same second.
DELETE_LATEST_LESSON = """
DELETE FROM lessonList WHERE id = (
    SELECT id FROM lessonList
    WHERE name = ? AND userId = ?
    ORDER BY lessonDay DESC, id DESC
    LIMIT 1
)
"""


class LessonService:
    """Service for lesson records."""

    def __init__(self, store: Database) -> None:
        self.store = store

    async def create_lesson(self, data: LessonCreate) -> int:
        """Append a lesson record and return its id.

        Without ``lesson_day`` the store default (current local time) is
        used.
        """
        with self.store.get_cursor() as cursor:
            if data.lesson_day is None:
                cursor.execute(
                    "INSERT INTO lessonList (userId, name, phone) VALUES (?, ?, ?)",
                    (data.user_id, data.name, data.phone),
                )
            else:
                cursor.execute(
                    "INSERT INTO lessonList (userId, name, phone, lessonDay) VALUES (?, ?, ?, ?)",
                    (data.user_id, data.name, data.phone, data.lesson_day.strftime(TIMESTAMP_FORMAT)),
                )
            lesson_id = cursor.lastrowid
        logger.info("Saved lesson %s for %s (%s)", lesson_id, data.name, data.user_id)
        return lesson_id

    async def list_for_member(self, name: str, user_id: str) -> List[LessonRead]:
        with self.store.get_cursor() as cursor:
            rows = cursor.execute(
                "SELECT * FROM lessonList WHERE name = ? AND userId = ?",
                (name, user_id),
            ).fetchall()
        return [LessonRead.model_validate(dict(row)) for row in rows]

    async def list_for_month(self, month: int, user_id: str) -> List[LessonRead]:
        """Return the lessons of every member whose month component is ``month``."""
        with self.store.get_cursor() as cursor:
            rows = cursor.execute(
                "SELECT * FROM lessonList WHERE CAST(strftime('%m', lessonDay) AS INTEGER) = ? AND userId = ?",
                (month, user_id),
            ).fetchall()
        return [LessonRead.model_validate(dict(row)) for row in rows]

    async def list_names_for_day(self, day: date, user_id: str) -> List[LessonName]:
        with self.store.get_cursor() as cursor:
            rows = cursor.execute(
                "SELECT name FROM lessonList WHERE DATE(lessonDay) = ? AND userId = ?",
                (day.isoformat(), user_id),
            ).fetchall()
        return [LessonName(name=row["name"]) for row in rows]

    async def delete_latest(self, name: str, user_id: str) -> int:
        """Delete the most recent record for a member.

        Returns the number of rows removed: ``1``, or ``0`` when the
        member has no records.
        """
        with self.store.get_cursor() as cursor:
            cursor.execute(DELETE_LATEST_LESSON, (name, user_id))
            affected = cursor.rowcount
        logger.info("Deleted latest lesson of %s (%s), %d row(s)", name, user_id, affected)
        return affected
