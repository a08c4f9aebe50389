"""T4.02 — Rasterization.

Paint every rectangle of the pixel map onto a blank square canvas with the
selected color. Rectangles are inclusive of both corners, so neighbouring
cells overlap by one pixel line; later fills simply overwrite.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from PIL import Image as PILImage
from PIL import ImageDraw

from identicon.engine.config import BACKGROUND, CANVAS_SIZE
from identicon.engine.context import Color, Image, Rect
from identicon.engine.registry import Layer, transform
from identicon.errors import PreconditionError

logger = logging.getLogger(__name__)


def draw_image(
    color: Color,
    pixel_map: Iterable[Rect],
    size: int = CANVAS_SIZE,
) -> PILImage.Image:
    canvas = PILImage.new("RGB", (size, size), BACKGROUND)
    draw = ImageDraw.Draw(canvas)
    count = 0
    for top_left, bottom_right in pixel_map:
        draw.rectangle((top_left, bottom_right), fill=color)
        count += 1
    logger.debug("Drew %d cells in rgb%s", count, color)
    return canvas


@transform(
    id="T4.02",
    layer=Layer.RASTER,
    dependencies=["T1.01", "T4.01"],
    description="Fill each pixel rectangle with the selected color",
)
def rasterization(image: Image) -> None:
    if image.color is None:
        raise PreconditionError("Cannot draw before a color has been selected")
    image.bitmap = draw_image(image.color, image.pixel_map or [])
