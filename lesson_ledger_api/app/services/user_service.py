"""
Business logic for user accounts and login sessions.

Accounts are created at signup and never updated or removed.  A row in
the ``login`` table marks a user as logged in; logout deletes it.
"""

import logging
from typing import Optional

from ..core.db import Database
from ..core.security import check_password, prepare_password
from ..schemas.user import UserJoin, UserRead


logger = logging.getLogger(__name__)


class UserService:
    """Сервис для работы с пользователями.

    ``password_hashing`` selects between plain‑text storage (the
    default, kept for compatibility with existing accounts) and PBKDF2
    digests.
    """

    def __init__(self, store: Database, password_hashing: bool = False) -> None:
        self.store = store
        self.password_hashing = password_hashing

    async def id_exists(self, user_id: str) -> bool:
        with self.store.get_cursor() as cursor:
            row = cursor.execute("SELECT 1 FROM user WHERE id = ?", (user_id,)).fetchone()
        return row is not None

    async def create_user(self, data: UserJoin) -> None:
        """Store a new account.

        Raises ``ValueError`` if the id is already taken.
        """
        logger.info("Registering user %s", data.id)
        with self.store.get_cursor() as cursor:
            row = cursor.execute("SELECT 1 FROM user WHERE id = ?", (data.id,)).fetchone()
            if row:
                raise ValueError(f"User id {data.id} already exists")
            cursor.execute(
                "INSERT INTO user (name, phone, id, pw, pwCon) VALUES (?, ?, ?, ?, ?)",
                (
                    data.name,
                    data.phone,
                    data.id,
                    prepare_password(data.pw, self.password_hashing),
                    data.pw_con,
                ),
            )

    async def authenticate(self, user_id: str, password: str) -> Optional[UserRead]:
        """Return the stored user row if the credentials match, else ``None``."""
        with self.store.get_cursor() as cursor:
            row = cursor.execute("SELECT * FROM user WHERE id = ?", (user_id,)).fetchone()
        if not row or not check_password(password, row["pw"], self.password_hashing):
            logger.info("Failed login for %s", user_id)
            return None
        return UserRead.model_validate(dict(row))

    async def record_login(self, user_id: str) -> None:
        with self.store.get_cursor() as cursor:
            cursor.execute(
                "INSERT OR REPLACE INTO login (id, loginAt) VALUES (?, datetime('now', 'localtime'))",
                (user_id,),
            )
        logger.info("User %s logged in", user_id)

    async def logout(self, user_id: str) -> None:
        with self.store.get_cursor() as cursor:
            cursor.execute("DELETE FROM login WHERE id = ?", (user_id,))
        logger.info("Login info deleted for user %s", user_id)
