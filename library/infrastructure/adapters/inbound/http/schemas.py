"""Request and response schemas specific to the HTTP API."""

from pydantic import BaseModel, Field


class BookCirculationRequest(BaseModel):
    """Request body for borrowing or returning a book."""

    user_id: str = Field(..., min_length=1, description="User's 8-digit identifier")


class FeePaymentRequest(BaseModel):
    """Request body for paying overdue fees."""

    amount: int = Field(..., gt=0, description="Amount paid, in yen")


class ExpirationSweepResponse(BaseModel):
    """Result of an on-demand expiration sweep."""

    expired: int = Field(..., description="Number of reservations expired by the sweep")


class HealthResponse(BaseModel):
    """Service health information."""

    status: str
    app: str
    version: str
    environment: str
    reservation_store: str
    checks: dict[str, str] = Field(default_factory=dict)
