"""
User API routes.

This module provides:
- GET /users/{user_id}/reservations - A user's reservations
- POST /users/{user_id}/fees/payments - Pay overdue fees
"""

from fastapi import APIRouter

from library.application.dto.book_dto import FeePaymentOutput, PayFeesInput
from library.application.dto.reservation_dto import UserReservationsOutput
from library.infrastructure.adapters.inbound.http.dependencies import (
    ListUserReservationsDep,
    PayFeesDep,
)
from library.infrastructure.adapters.inbound.http.schemas import FeePaymentRequest

router = APIRouter(prefix="/users", tags=["Users"])


@router.get(
    "/{user_id}/reservations",
    response_model=UserReservationsOutput,
    summary="List a user's reservations",
    responses={404: {"description": "User not found"}},
)
async def list_user_reservations(
    user_id: str, use_case: ListUserReservationsDep
) -> UserReservationsOutput:
    """Every reservation of the user, newest first, with hold days remaining."""
    return await use_case.execute(user_id)


@router.post(
    "/{user_id}/fees/payments",
    response_model=FeePaymentOutput,
    summary="Pay overdue fees",
    responses={
        400: {"description": "Amount exceeds the outstanding fees"},
        404: {"description": "User not found"},
    },
)
async def pay_fees(
    user_id: str, body: FeePaymentRequest, use_case: PayFeesDep
) -> FeePaymentOutput:
    """Pay off overdue fees; a user owing nothing may borrow again."""
    return await use_case.execute(PayFeesInput(user_id=user_id, amount=body.amount))
