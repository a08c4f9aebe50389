"""Image — the single state object flowing through all transforms.

Each transform owns the record while it runs and assigns fresh values to the
fields it produces. Lists held by earlier fields are never edited in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from PIL import Image as PILImage

# (value, index) — index is the row-major position in the 5-wide grid
Cell = tuple[int, int]
Point = tuple[int, int]
Rect = tuple[Point, Point]
Color = tuple[int, int, int]


@dataclass
class Image:
    """Shared state for one identicon run."""

    # Raw input string
    input: str = ""
    # Digest bytes as ints 0..255
    hex: list[int] | None = None
    # (r, g, b) taken from the first three digest bytes
    color: Color | None = None
    # Mirrored, indexed cells; replaced by the parity filter
    grid: list[Cell] | None = None
    # One rectangle per surviving cell, same order as grid
    pixel_map: list[Rect] | None = None
    # Rasterized result
    bitmap: PILImage.Image | None = None

    # --- Pipeline metadata ---
    completed_transforms: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def filled_cells(self) -> int:
        return len(self.grid or [])
