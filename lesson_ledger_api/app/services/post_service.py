"""
Service layer for news posts.

Posts are shared by every tutor (they are not scoped by ``userId``).
Listing returns newest first by ``postId``.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Optional

from ..core.db import Database
from ..schemas.post import PostRead, PostWrite


class PostService:
    """Service class for managing posts."""

    def __init__(self, store: Database) -> None:
        self.store = store

    async def create_post(self, data: PostWrite) -> int:
        logger = logging.getLogger(__name__)
        with self.store.get_cursor() as cursor:
            cursor.execute(
                "INSERT INTO posts (id, title, content) VALUES (?, ?, ?)",
                (data.id, data.title, data.content),
            )
            post_id = cursor.lastrowid
        logger.info("Saved post %s by %s", post_id, data.id)
        return post_id

    async def list_posts(self) -> List[PostRead]:
        with self.store.get_cursor() as cursor:
            rows = cursor.execute("SELECT * FROM posts ORDER BY postId DESC").fetchall()
        return [self._row_to_post_read(row) for row in rows]

    async def get_post(self, post_id: int) -> Optional[PostRead]:
        with self.store.get_cursor() as cursor:
            row = cursor.execute("SELECT * FROM posts WHERE postId = ?", (post_id,)).fetchone()
        if not row:
            return None
        return self._row_to_post_read(row)

    async def update_post(self, post_id: int, data: PostWrite) -> bool:
        """Replace author, title and content of a post.

        Returns ``True`` if the post existed.
        """
        logger = logging.getLogger(__name__)
        with self.store.get_cursor() as cursor:
            cursor.execute(
                "UPDATE posts SET id = ?, title = ?, content = ? WHERE postId = ?",
                (data.id, data.title, data.content, post_id),
            )
            affected = cursor.rowcount
        if affected:
            logger.info("Updated post %s", post_id)
        return affected > 0

    async def delete_post(self, post_id: int) -> bool:
        """Delete a post.  Returns ``True`` if a row was removed."""
        logger = logging.getLogger(__name__)
        with self.store.get_cursor() as cursor:
            cursor.execute("DELETE FROM posts WHERE postId = ?", (post_id,))
            affected = cursor.rowcount
        if affected:
            logger.info("Deleted post %s", post_id)
        return affected > 0

    @staticmethod
    def _row_to_post_read(row: sqlite3.Row) -> PostRead:
        return PostRead(
            post_id=row["postId"],
            id=row["id"],
            title=row["title"],
            content=row["content"],
        )
