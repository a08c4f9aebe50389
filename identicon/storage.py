"""PNG encoding and persistence of finished identicons."""

from __future__ import annotations

import io
import logging
import os
from pathlib import Path

from PIL import Image as PILImage

from identicon.engine.context import Image
from identicon.errors import PersistenceError

logger = logging.getLogger(__name__)


def encode_png(bitmap: PILImage.Image) -> bytes:
    buf = io.BytesIO()
    try:
        bitmap.save(buf, format="PNG")
    except (OSError, ValueError) as e:
        raise PersistenceError(f"PNG encoding failed: {e}") from e
    return buf.getvalue()


def output_path(text: str, directory: str | Path = ".") -> Path:
    """``<directory>/<text>.png``; the input must be usable as a bare file name."""
    seps = {os.sep} | ({os.altsep} if os.altsep else set())
    if any(sep in text for sep in seps):
        raise PersistenceError(f"Input {text!r} contains a path separator")
    if "\x00" in text:
        raise PersistenceError(f"Input {text!r} contains a NUL byte")
    return Path(directory) / f"{text}.png"


def save_image(image: Image, directory: str | Path = ".") -> Path:
    """Encode ``image.bitmap`` and write it next to its siblings, overwriting.

    Raises:
        PersistenceError: if the image was never rasterized or the write fails.
    """
    if image.bitmap is None:
        raise PersistenceError(f"Identicon for {image.input!r} has not been rasterized")

    path = output_path(image.input, directory)
    data = encode_png(image.bitmap)
    try:
        path.write_bytes(data)
    except (OSError, ValueError) as e:
        raise PersistenceError(f"Could not write {path}: {e}") from e

    logger.info("Saved %s (%d bytes)", path, len(data))
    return path
