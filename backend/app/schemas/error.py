"""Error Schema — uniform body for every failure response."""

from datetime import datetime, timezone

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """timestamp/status/error/detalles — detalles always has at least one entry."""
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
    status: int
    error: str
    detalles: list[str] = Field(min_length=1)
