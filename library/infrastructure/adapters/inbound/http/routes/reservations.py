"""
Reservation API routes.

This module provides:
- POST /reservations - Join a book's waiting line
- DELETE /reservations/{reservation_id} - Cancel a reservation
- POST /reservations/expirations - Run one expiration sweep now

Refused requests return the use case output (``success=false`` with a
``reason``) under a 4xx status code.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from library.application.dto.reservation_dto import (
    CancelReservationInput,
    CancelReservationOutput,
    ReserveBookInput,
    ReserveBookOutput,
)
from library.infrastructure.adapters.inbound.http.dependencies import (
    CancelReservationDep,
    ReserveBookDep,
    SweeperDep,
)
from library.infrastructure.adapters.inbound.http.handlers import failure_status_code
from library.infrastructure.adapters.inbound.http.schemas import ExpirationSweepResponse

router = APIRouter(prefix="/reservations", tags=["Reservations"])


@router.post(
    "",
    response_model=ReserveBookOutput,
    status_code=status.HTTP_201_CREATED,
    summary="Reserve a book",
    responses={
        403: {"description": "User is suspended"},
        404: {"description": "User or book not found"},
        409: {"description": "Book is available or already reserved by this user"},
    },
)
async def reserve_book(body: ReserveBookInput, use_case: ReserveBookDep):
    """Place the user at the end of the book's waiting line."""
    output = await use_case.execute(body)
    if not output.success:
        return JSONResponse(
            status_code=failure_status_code(output.reason),
            content=output.model_dump(mode="json"),
        )
    return output


@router.delete(
    "/{reservation_id}",
    response_model=CancelReservationOutput,
    summary="Cancel a reservation",
    responses={
        404: {"description": "Reservation not found"},
        409: {"description": "Reservation is fulfilled, expired or already cancelled"},
    },
)
async def cancel_reservation(reservation_id: str, use_case: CancelReservationDep):
    """Cancel a reservation; a held book passes to the next user in line."""
    output = await use_case.execute(CancelReservationInput(reservation_id=reservation_id))
    if not output.success:
        return JSONResponse(
            status_code=failure_status_code(output.reason),
            content=output.model_dump(mode="json"),
        )
    return output


@router.post(
    "/expirations",
    response_model=ExpirationSweepResponse,
    summary="Expire lapsed holds",
)
async def run_expiration_sweep(sweeper: SweeperDep) -> ExpirationSweepResponse:
    """Run one expiration sweep immediately instead of waiting for the scheduler."""
    expired = await sweeper.run_once()
    return ExpirationSweepResponse(expired=expired)
