"""List user reservations use case."""

from library.application.dto.reservation_dto import (
    ReservationOutput,
    UserReservationsOutput,
)
from library.application.exceptions import NotFoundError, ResourceType
from library.application.ports.outbound.reservation_repository_port import (
    ReservationRepositoryPort,
)
from library.application.ports.outbound.user_repository_port import UserRepositoryPort
from library.application.services.reservation_queue_service import (
    ReservationQueueService,
)
from library.domain.clock import Clock, utc_now
from library.domain.value_objects.user_id import UserId


class ListUserReservationsUseCase:
    """Use case for listing every reservation a user has placed."""

    def __init__(
        self,
        users: UserRepositoryPort,
        reservations: ReservationRepositoryPort,
        queue_service: ReservationQueueService,
        clock: Clock = utc_now,
    ):
        self.users = users
        self.reservations = reservations
        self.queue_service = queue_service
        self.clock = clock

    async def execute(self, user_id: str) -> UserReservationsOutput:
        """
        List a user's reservations, newest first.

        ACTIVE reservations include their current queue position.

        Args:
            user_id: User's identifier

        Returns:
            User's reservations

        Raises:
            NotFoundError: If user doesn't exist
        """
        uid = UserId(user_id)

        user = await self.users.get_by_id(uid)
        if user is None:
            raise NotFoundError(ResourceType.USER, uid)

        now = self.clock()
        reservations = sorted(
            await self.reservations.list_by_user(uid),
            key=lambda r: r.created_at,
            reverse=True,
        )

        outputs = []
        for reservation in reservations:
            position = None
            if reservation.is_active():
                position = await self.queue_service.get_queue_position(
                    reservation.book_id, uid
                )
            outputs.append(
                ReservationOutput.from_entity(reservation, now=now, queue_position=position)
            )

        return UserReservationsOutput(
            user_id=str(uid), reservations=outputs, total=len(outputs)
        )
