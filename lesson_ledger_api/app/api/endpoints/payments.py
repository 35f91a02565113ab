"""
Payment endpoints.

Recording a payment only logs it; charging the member's lesson balance
is a separate call to ``PUT /api/member/charge/{name}``.
"""

from fastapi import APIRouter, Depends, Path, Query
from typing import List

from ...schemas.common import MessageResponse
from ...schemas.payment import PaymentCreate, PaymentRead
from ...services.payment_service import PaymentService
from ..dependencies import get_payment_service


router = APIRouter()


@router.post("/payList", response_model=MessageResponse)
async def create_payment(
    payment: PaymentCreate,
    service: PaymentService = Depends(get_payment_service),
) -> MessageResponse:
    await service.create_payment(payment)
    return MessageResponse(message="Payment data saved successfully")


@router.get("/payList/detail/{name}", response_model=List[PaymentRead])
async def list_member_payments(
    name: str = Path(..., description="Member name"),
    user_id: str = Query(..., alias="userId"),
    service: PaymentService = Depends(get_payment_service),
) -> List[PaymentRead]:
    return await service.list_for_member(name, user_id)


@router.get("/payListmonth", response_model=List[PaymentRead])
async def list_month_payments(
    month: int = Query(..., ge=1, le=12),
    user_id: str = Query(..., alias="userId"),
    service: PaymentService = Depends(get_payment_service),
) -> List[PaymentRead]:
    """Payments in ``month`` of any year."""
    return await service.list_for_month(month, user_id)
