"""T2.01 — Grid Construction.

Split the digest into rows of 3, mirror each row to width 5 and number the
cells row-major. A 16-byte digest yields 5 rows (the 16th byte is dropped),
i.e. a 5x5 grid with indices 0..24. Mirroring makes the image left-right
symmetric around the middle column.
"""

from __future__ import annotations

from collections.abc import Sequence

from identicon.engine.context import Cell, Image
from identicon.engine.registry import Layer, transform
from identicon.errors import PreconditionError

_ROW_SOURCE_LEN = 3


def mirror_row(row: Sequence[int]) -> list[int]:
    """Append the second and first values in reverse.

    >>> mirror_row([145, 46, 200])
    [145, 46, 200, 46, 145]
    """
    if len(row) < 2:
        raise PreconditionError(f"Cannot mirror a row of length {len(row)}")
    return [*row, row[1], row[0]]


def build_grid(digest: Sequence[int]) -> list[Cell]:
    """Return ``(value, index)`` pairs for every cell of the mirrored grid.

    A trailing group with fewer than 3 bytes is discarded, not padded, so
    fewer than 3 bytes produce an empty grid.
    """
    values: list[int] = []
    full = len(digest) - len(digest) % _ROW_SOURCE_LEN
    for start in range(0, full, _ROW_SOURCE_LEN):
        values.extend(mirror_row(digest[start:start + _ROW_SOURCE_LEN]))
    return [(value, index) for index, value in enumerate(values)]


@transform(
    id="T2.01",
    layer=Layer.GRID,
    dependencies=["T0.01"],
    description="Mirror rows of 3 digest bytes into an indexed 5-wide grid",
)
def grid_construction(image: Image) -> None:
    image.grid = build_grid(image.hex or [])
