"""Fixed geometry of the rendered identicon."""

from __future__ import annotations

# 5 cells per row: 3 hashed bytes + 2 mirrored
GRID_WIDTH = 5
GRID_ROWS = 5
CELL_SIZE = 60
CANVAS_SIZE = GRID_WIDTH * CELL_SIZE
BACKGROUND = (255, 255, 255)
