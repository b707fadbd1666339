"""Pay overdue fees use case."""

import logging

from library.application.dto.book_dto import BorrowerOutput, FeePaymentOutput, PayFeesInput
from library.application.exceptions import NotFoundError, ResourceType
from library.application.ports.outbound.user_repository_port import UserRepositoryPort
from library.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


class PayFeesUseCase:
    """Use case for paying off overdue fees so the user may borrow again."""

    def __init__(self, users: UserRepositoryPort):
        self.users = users

    async def execute(self, input_dto: PayFeesInput) -> FeePaymentOutput:
        """
        Record a fee payment.

        Raises:
            NotFoundError: If user doesn't exist
            InvalidFeePaymentError: If the amount exceeds what is owed
        """
        user_id = UserId(input_dto.user_id)

        user = await self.users.get_by_id(user_id)
        if user is None:
            raise NotFoundError(ResourceType.USER, user_id)

        updated_user = user.pay_fees(input_dto.amount)
        await self.users.save(updated_user)

        logger.info(
            f"User {user_id} paid {input_dto.amount} in overdue fees, "
            f"{updated_user.overdue_fees} outstanding"
        )
        return FeePaymentOutput(
            message="Payment recorded",
            paid=input_dto.amount,
            user=BorrowerOutput.from_entity(updated_user),
        )
