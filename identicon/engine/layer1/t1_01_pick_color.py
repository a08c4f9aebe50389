"""T1.01 — Color Selection.

The first three digest bytes are the (r, g, b) fill color.
"""

from __future__ import annotations

from collections.abc import Sequence

from identicon.engine.context import Color, Image
from identicon.engine.registry import Layer, transform
from identicon.errors import PreconditionError


def pick_color(digest: Sequence[int] | None) -> Color:
    if digest is None or len(digest) < 3:
        raise PreconditionError(
            f"Color selection needs at least 3 digest bytes, got {0 if digest is None else len(digest)}"
        )
    return (digest[0], digest[1], digest[2])


@transform(
    id="T1.01",
    layer=Layer.COLOR,
    dependencies=["T0.01"],
    description="Take the first three digest bytes as the RGB color",
)
def color_selection(image: Image) -> None:
    image.color = pick_color(image.hex)
