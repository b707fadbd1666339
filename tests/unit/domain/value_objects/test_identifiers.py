"""Unit tests for identifier value objects."""

import pytest

from library.domain.exceptions import (
    InvalidBookIdError,
    InvalidReservationIdError,
    InvalidUserIdError,
)
from library.domain.value_objects.book_id import BookId
from library.domain.value_objects.reservation_id import ReservationId
from library.domain.value_objects.user_id import UserId


class TestReservationId:
    """Test ReservationId value object."""

    def test_valid_reservation_id(self):
        assert str(ReservationId("RES0001234567")) == "RES0001234567"

    def test_surrounding_whitespace_is_stripped(self):
        assert ReservationId("  RES0001234567 ").value == "RES0001234567"

    @pytest.mark.parametrize(
        "value", ["", "RES123", "res0001234567", "ABC0001234567", "RES00012345678"]
    )
    def test_invalid_reservation_id_raises_error(self, value):
        with pytest.raises(InvalidReservationIdError) as exc_info:
            ReservationId(value)
        assert exc_info.value.code == "INVALID_RESERVATION_ID"

    def test_generate_produces_valid_ids(self):
        ids = {ReservationId.generate() for _ in range(50)}
        assert all(str(rid).startswith("RES") and len(str(rid)) == 13 for rid in ids)
        assert len(ids) > 1

    def test_value_equality(self):
        assert ReservationId("RES0000000001") == ReservationId("RES0000000001")
        assert ReservationId("RES0000000001") != ReservationId("RES0000000002")


class TestUserId:
    """Test UserId value object."""

    def test_valid_user_id(self):
        assert UserId("12345678").value == "12345678"

    @pytest.mark.parametrize("value", ["1234567", "123456789", "1234567a", ""])
    def test_invalid_user_id_raises_error(self, value):
        with pytest.raises(InvalidUserIdError):
            UserId(value)

    def test_generate_produces_eight_digits(self):
        generated = UserId.generate()
        assert len(generated.value) == 8
        assert generated.value.isdigit()

    def test_hashable_and_equal_by_value(self):
        assert {UserId("12345678"), UserId(" 12345678 ")} == {UserId("12345678")}


class TestBookId:
    """Test BookId value object."""

    def test_book_id_is_uppercased(self):
        assert BookId("abc123defg").value == "ABC123DEFG"

    @pytest.mark.parametrize("value", ["ABC", "ABC123DEFGH", "ABC-123-DE", ""])
    def test_invalid_book_id_raises_error(self, value):
        with pytest.raises(InvalidBookIdError):
            BookId(value)

    def test_generate_produces_valid_id(self):
        generated = BookId.generate()
        assert BookId(generated.value) == generated

    def test_repr(self):
        assert repr(BookId("ABC123DEFG")) == "BookId(value='ABC123DEFG')"
