"""Overdue fee domain service."""

from datetime import datetime

from library.domain.entities.book import Book


class OverdueFeePolicy:
    """
    Domain service for the late-return fee.

    The first GRACE_DAYS overdue days are free; each day after that costs
    DAILY_RATE yen, up to MAX_FEE per loan:

        fee = min((overdue_days - GRACE_DAYS) * DAILY_RATE, MAX_FEE)
    """

    GRACE_DAYS = 3
    DAILY_RATE = 10
    MAX_FEE = 1000

    @classmethod
    def fee_for_days(cls, overdue_days: int) -> int:
        """
        Calculate the fee for a number of overdue days.

        Args:
            overdue_days: Whole days past the loan period

        Returns:
            Fee in yen, 0 within the grace period
        """
        chargeable = overdue_days - cls.GRACE_DAYS
        if chargeable <= 0:
            return 0
        return min(chargeable * cls.DAILY_RATE, cls.MAX_FEE)

    @classmethod
    def fee_for_return(cls, book: Book, now: datetime) -> int:
        """Calculate the fee owed when ``book`` comes back at ``now``."""
        return cls.fee_for_days(book.overdue_days(now))
