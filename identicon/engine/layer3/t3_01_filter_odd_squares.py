"""T3.01 — Parity Filter.

Only even-valued cells get painted. Surviving cells keep their original
index and relative order.
"""

from __future__ import annotations

from collections.abc import Iterable

from identicon.engine.context import Cell, Image
from identicon.engine.registry import Layer, transform


def filter_odd_squares(grid: Iterable[Cell]) -> list[Cell]:
    return [(value, index) for value, index in grid if value % 2 == 0]


@transform(
    id="T3.01",
    layer=Layer.FILTER,
    dependencies=["T2.01"],
    description="Drop odd-valued cells from the grid",
)
def parity_filter(image: Image) -> None:
    image.grid = filter_odd_squares(image.grid or [])
