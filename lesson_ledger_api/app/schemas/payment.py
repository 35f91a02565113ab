"""
Pydantic models for payment records.

Payments are an append‑only log per tutor.  ``pay`` is a whole amount in
won; there is no currency field because the business only takes KRW.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .common import CamelModel


class PaymentCreate(CamelModel):
    """Schema for logging a payment."""

    user_id: str = Field(..., example="tutor01")
    name: str = Field(..., example="Kim")
    pay: int = Field(..., example=200000)
    pay_day: Optional[datetime] = Field(None, description="Back‑date the record; defaults to now")


class PaymentRead(CamelModel):
    """Schema for reading a payment."""

    id: int
    user_id: str
    name: str
    pay: int
    pay_day: datetime
