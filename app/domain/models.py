"""
Pydantic models for requests, responses, and internal data transfer.
Pure data — no I/O, no side effects.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# ── User ──────────────────────────────────────────────────────


class UserRecord(BaseModel):
    """Row written by the user sync upsert. `id` is the session subject."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    image_url: str = Field(..., min_length=1, alias="imageUrl")

    def to_row(self) -> dict[str, str]:
        """Serialize with the store's column names (camelCase imageUrl)."""
        return self.model_dump(by_alias=True)


# ── Errors ────────────────────────────────────────────────────


class ErrorResponse(BaseModel):
    """Body of every non-2xx response from the sync endpoint."""

    error: str
