"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
    transforms_registered: int = 0


class IdenticonResponse(BaseModel):
    text: str
    hex: list[int] = Field(default_factory=list)
    color: tuple[int, int, int]
    grid: list[tuple[int, int]] = Field(default_factory=list, description="Surviving (value, index) cells")
    pixel_map: list[tuple[tuple[int, int], tuple[int, int]]] = Field(default_factory=list)
    ascii: str = ""
    png_base64: str = ""
