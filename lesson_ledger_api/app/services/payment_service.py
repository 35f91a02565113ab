"""
Business logic for payments.

Payments are logged after a tutor collects money from a member.  Records
are never updated or deleted, and recording a payment does not change
the member's lesson balance; the front end charges lessons separately.
"""

import logging
from typing import List

from ..core.db import TIMESTAMP_FORMAT, Database
from ..schemas.payment import PaymentCreate, PaymentRead


class PaymentService:
    """Сервис для журнала платежей."""

    def __init__(self, store: Database) -> None:
        self.store = store

    async def create_payment(self, data: PaymentCreate) -> int:
        """Log a payment and return its id."""
        logger = logging.getLogger(__name__)
        columns = ["userId", "name", "pay"]
        values: list = [data.user_id, data.name, data.pay]
        if data.pay_day is not None:
            columns.append("payDay")
            values.append(data.pay_day.strftime(TIMESTAMP_FORMAT))
        placeholders = ", ".join("?" for _ in columns)
        with self.store.get_cursor() as cursor:
            cursor.execute(
                f"INSERT INTO payList ({', '.join(columns)}) VALUES ({placeholders})",
                tuple(values),
            )
            payment_id = cursor.lastrowid
        logger.info("Saved payment %s: %s paid %d to %s", payment_id, data.name, data.pay, data.user_id)
        return payment_id

    async def list_for_member(self, name: str, user_id: str) -> List[PaymentRead]:
        with self.store.get_cursor() as cursor:
            rows = cursor.execute(
                "SELECT * FROM payList WHERE name = ? AND userId = ?",
                (name, user_id),
            ).fetchall()
        return [self._row_to_payment_read(row) for row in rows]

    async def list_for_month(self, month: int, user_id: str) -> List[PaymentRead]:
        """Return payments whose month component is ``month``, any year."""
        with self.store.get_cursor() as cursor:
            rows = cursor.execute(
                "SELECT * FROM payList WHERE CAST(strftime('%m', payDay) AS INTEGER) = ? AND userId = ?",
                (month, user_id),
            ).fetchall()
        return [self._row_to_payment_read(row) for row in rows]

    @staticmethod
    def _row_to_payment_read(row) -> PaymentRead:
        return PaymentRead(
            id=row["id"],
            user_id=row["userId"],
            name=row["name"],
            pay=row["pay"],
            pay_day=row["payDay"],
        )
