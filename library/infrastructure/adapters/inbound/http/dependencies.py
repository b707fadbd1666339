"""
FastAPI dependencies.

Use cases are built per request from the application's ``Container``,
stored on ``app.state`` by ``create_app``.
"""

from typing import Annotated

from fastapi import Depends, Request

from library.application.use_cases.books import (
    BorrowBookUseCase,
    PayFeesUseCase,
    ReturnBookUseCase,
)
from library.application.use_cases.reservations import (
    CancelReservationUseCase,
    GetBookQueueUseCase,
    ListUserReservationsUseCase,
    ReserveBookUseCase,
)
from library.infrastructure.config.container import Container
from library.infrastructure.scheduling.expiration_sweeper import ExpirationSweeper


def get_container(request: Request) -> Container:
    """Return the container attached to the running application."""
    return request.app.state.container


ContainerDep = Annotated[Container, Depends(get_container)]


def get_reserve_book_use_case(container: ContainerDep) -> ReserveBookUseCase:
    return container.reserve_book()


def get_cancel_reservation_use_case(container: ContainerDep) -> CancelReservationUseCase:
    return container.cancel_reservation()


def get_list_user_reservations_use_case(
    container: ContainerDep,
) -> ListUserReservationsUseCase:
    return container.list_user_reservations()


def get_book_queue_use_case(container: ContainerDep) -> GetBookQueueUseCase:
    return container.get_book_queue()


def get_borrow_book_use_case(container: ContainerDep) -> BorrowBookUseCase:
    return container.borrow_book()


def get_return_book_use_case(container: ContainerDep) -> ReturnBookUseCase:
    return container.return_book()


def get_pay_fees_use_case(container: ContainerDep) -> PayFeesUseCase:
    return container.pay_fees()


def get_sweeper(container: ContainerDep) -> ExpirationSweeper:
    return container.sweeper


ReserveBookDep = Annotated[ReserveBookUseCase, Depends(get_reserve_book_use_case)]
CancelReservationDep = Annotated[
    CancelReservationUseCase, Depends(get_cancel_reservation_use_case)
]
ListUserReservationsDep = Annotated[
    ListUserReservationsUseCase, Depends(get_list_user_reservations_use_case)
]
BookQueueDep = Annotated[GetBookQueueUseCase, Depends(get_book_queue_use_case)]
BorrowBookDep = Annotated[BorrowBookUseCase, Depends(get_borrow_book_use_case)]
ReturnBookDep = Annotated[ReturnBookUseCase, Depends(get_return_book_use_case)]
PayFeesDep = Annotated[PayFeesUseCase, Depends(get_pay_fees_use_case)]
SweeperDep = Annotated[ExpirationSweeper, Depends(get_sweeper)]
