"""Integration tests for borrow and return routes."""

import pytest

pytestmark = pytest.mark.usefixtures("library")

BOOK_URL = "/books/BOOK000001"


class TestBorrowAndReturnRoutes:
    """Test POST /books/{book_id}/borrow and /return."""

    @pytest.mark.asyncio
    async def test_return_holds_book_for_first_in_line(self, client):
        await client.post("/reservations", json={"user_id": "10000001", "book_id": "BOOK000001"})

        response = await client.post(f"{BOOK_URL}/return", json={"user_id": "99999999"})

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Book returned successfully"
        assert data["book"]["status"] == "available"
        assert data["user"]["current_borrow_count"] == 0

        listing = (await client.get("/users/10000001/reservations")).json()
        assert listing["reservations"][0]["status"] == "ready"

    @pytest.mark.asyncio
    async def test_holder_borrows_held_book(self, client):
        reserved = await client.post(
            "/reservations", json={"user_id": "10000001", "book_id": "BOOK000001"}
        )
        await client.post(f"{BOOK_URL}/return", json={"user_id": "99999999"})

        response = await client.post(f"{BOOK_URL}/borrow", json={"user_id": "10000001"})

        assert response.status_code == 200
        data = response.json()
        assert data["book"]["borrowed_by"] == "10000001"
        assert data["fulfilled_reservation_id"] == reserved.json()["reservation"]["id"]

    @pytest.mark.asyncio
    async def test_other_user_cannot_take_held_book(self, client):
        await client.post("/reservations", json={"user_id": "10000001", "book_id": "BOOK000001"})
        await client.post(f"{BOOK_URL}/return", json={"user_id": "99999999"})

        response = await client.post(f"{BOOK_URL}/borrow", json={"user_id": "10000002"})

        assert response.status_code == 409
        assert response.json()["error"]["code"] == "CONFLICT"
        assert response.json()["error"]["details"]["current_state"] == "held"

    @pytest.mark.asyncio
    async def test_borrow_borrowed_book(self, client):
        response = await client.post(f"{BOOK_URL}/borrow", json={"user_id": "10000001"})

        assert response.status_code == 409

    @pytest.mark.asyncio
    async def test_return_by_wrong_user(self, client):
        response = await client.post(f"{BOOK_URL}/return", json={"user_id": "10000001"})

        assert response.status_code == 409

    @pytest.mark.asyncio
    async def test_borrow_unknown_book(self, client):
        response = await client.post("/books/NOSUCHBOOK/borrow", json={"user_id": "10000001"})

        assert response.status_code == 404
        assert response.json()["error"]["details"]["resource_type"] == "Book"


class TestOverdueFeeRoutes:
    """Test late returns and fee payment over HTTP."""

    @pytest.mark.asyncio
    async def test_late_return_blocks_borrowing_until_paid(self, client, clock):
        # Dave borrowed the book 7 days ago; bring it back 11 days overdue
        clock.advance(days=18)
        returned = await client.post(f"{BOOK_URL}/return", json={"user_id": "99999999"})

        assert returned.status_code == 200
        assert returned.json()["overdue_fee"] == 80
        assert returned.json()["user"]["overdue_fees"] == 80

        refused = await client.post(f"{BOOK_URL}/borrow", json={"user_id": "99999999"})
        assert refused.status_code == 409
        assert refused.json()["error"]["details"]["current_state"] == "fees_outstanding"
        assert refused.json()["error"]["details"]["outstanding_fees"] == 80

        paid = await client.post("/users/99999999/fees/payments", json={"amount": 80})
        assert paid.status_code == 200
        assert paid.json()["user"]["overdue_fees"] == 0

        borrowed = await client.post(f"{BOOK_URL}/borrow", json={"user_id": "99999999"})
        assert borrowed.status_code == 200

    @pytest.mark.asyncio
    async def test_overpayment_rejected(self, client):
        response = await client.post("/users/99999999/fees/payments", json={"amount": 10})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_FEE_PAYMENT"

    @pytest.mark.asyncio
    async def test_non_positive_payment_fails_validation(self, client):
        response = await client.post("/users/99999999/fees/payments", json={"amount": 0})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_payment_for_unknown_user(self, client):
        response = await client.post("/users/12345678/fees/payments", json={"amount": 10})

        assert response.status_code == 404
        assert response.json()["error"]["details"]["resource_type"] == "User"
