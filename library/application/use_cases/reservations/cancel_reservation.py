"""Cancel reservation use case."""

from library.application.dto.reservation_dto import (
    CancelReservationInput,
    CancelReservationOutput,
    ReservationFailureReason,
    ReservationOutput,
)
from library.application.ports.outbound.reservation_repository_port import (
    ReservationRepositoryPort,
)
from library.application.services.reservation_queue_service import (
    ReservationQueueService,
)
from library.domain.clock import Clock, utc_now
from library.domain.entities.reservation import ReservationStatus
from library.domain.exceptions import InvalidReservationStateTransitionError
from library.domain.value_objects.reservation_id import ReservationId


class CancelReservationUseCase:
    """Use case for cancelling a reservation."""

    def __init__(
        self,
        reservations: ReservationRepositoryPort,
        queue_service: ReservationQueueService,
        clock: Clock = utc_now,
    ):
        """
        Initialize use case.

        Args:
            reservations: Reservation repository
            queue_service: Reservation queue service
            clock: Source of the current time
        """
        self.reservations = reservations
        self.queue_service = queue_service
        self.clock = clock

    async def execute(self, input_dto: CancelReservationInput) -> CancelReservationOutput:
        """
        Cancel a reservation.

        Cancelling a READY reservation passes the held book to the next
        user in line.

        Args:
            input_dto: Reservation identifier

        Returns:
            Cancellation outcome

        Raises:
            InvalidReservationIdError: If the reservation ID is malformed
        """
        reservation_id = ReservationId(input_dto.reservation_id)

        reservation = await self.reservations.get_by_id(reservation_id)
        if reservation is None:
            return CancelReservationOutput.failure(
                ReservationFailureReason.RESERVATION_NOT_FOUND, "Reservation not found"
            )

        if reservation.status in (ReservationStatus.FULFILLED, ReservationStatus.EXPIRED):
            return CancelReservationOutput.failure(
                ReservationFailureReason.NOT_CANCELLABLE,
                f"Cannot cancel {reservation.status.value} reservation",
            )

        if reservation.status == ReservationStatus.CANCELLED:
            return CancelReservationOutput.failure(
                ReservationFailureReason.ALREADY_CANCELLED,
                "Reservation is already cancelled",
            )

        try:
            cancelled = await self.queue_service.cancel_reservation(reservation)
        except InvalidReservationStateTransitionError as e:
            # Expired or fulfilled since the check above.
            return CancelReservationOutput.failure(
                ReservationFailureReason.NOT_CANCELLABLE,
                f"Cannot cancel {e.current_status} reservation",
            )

        return CancelReservationOutput(
            success=True,
            message="Reservation cancelled successfully",
            reservation=ReservationOutput.from_entity(cancelled, now=self.clock()),
        )
