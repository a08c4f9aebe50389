"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class IdenticonRequest(BaseModel):
    text: str = Field(..., description="String to derive the identicon from")
