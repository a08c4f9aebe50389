"""T4.01 — Pixel Mapping.

Decode each surviving cell's row-major index back to (column, row) and turn
it into a canvas rectangle ``((x0, y0), (x1, y1))``.
"""

from __future__ import annotations

from collections.abc import Iterable

from identicon.engine.config import CELL_SIZE, GRID_WIDTH
from identicon.engine.context import Cell, Image, Rect
from identicon.engine.registry import Layer, transform


def build_pixel_map(
    grid: Iterable[Cell],
    width: int = GRID_WIDTH,
    cell_size: int = CELL_SIZE,
) -> list[Rect]:
    pixel_map: list[Rect] = []
    for _value, index in grid:
        column, row = index % width, index // width
        x0, y0 = column * cell_size, row * cell_size
        pixel_map.append(((x0, y0), (x0 + cell_size, y0 + cell_size)))
    return pixel_map


@transform(
    id="T4.01",
    layer=Layer.RASTER,
    dependencies=["T3.01"],
    description="Map grid cells to pixel rectangles",
)
def pixel_mapping(image: Image) -> None:
    image.pixel_map = build_pixel_map(image.grid or [])
