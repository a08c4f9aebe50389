"""Grid helpers — cell list to boolean mask, mask to text preview."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np
from numpy.typing import NDArray

from identicon.engine.config import GRID_ROWS, GRID_WIDTH
from identicon.engine.context import Cell

FILLED = "█"
EMPTY = "·"


def grid_to_mask(
    grid: Iterable[Cell],
    width: int = GRID_WIDTH,
    rows: int = GRID_ROWS,
) -> NDArray[np.bool_]:
    """Return a rows×width matrix, True where a cell of ``grid`` survives.

    Indices outside the matrix are ignored.
    """
    mask = np.zeros((rows, width), dtype=np.bool_)
    for _value, index in grid:
        r, c = divmod(index, width)
        if r < rows:
            mask[r, c] = True
    return mask


def mask_to_text(mask: NDArray[np.bool_], filled: str = FILLED, empty: str = EMPTY) -> str:
    lines = []
    for row in mask:
        lines.append("".join(filled * 2 if cell else empty * 2 for cell in row))
    return "\n".join(lines)


def is_mirror_symmetric(mask: NDArray[np.bool_]) -> bool:
    return bool(np.array_equal(mask, mask[:, ::-1]))
