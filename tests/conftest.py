"""Shared test fixtures."""

from __future__ import annotations

import pytest

from identicon.engine.context import Image
from identicon.engine.pipeline import create_pipeline

# MD5("hello world!")
HELLO_TEXT = "hello world!"
HELLO_HEX = [252, 63, 249, 142, 140, 106, 13, 48, 135, 213, 21, 192, 71, 63, 134, 119]
HELLO_COLOR = (252, 63, 249)
HELLO_FIRST_ROW = [252, 63, 249, 63, 252]
# Even cells of the mirrored 5x5 grid built from HELLO_HEX
HELLO_FILLED_INDICES = [0, 4, 5, 6, 7, 8, 9, 11, 13, 17, 22]

# MD5("")
EMPTY_HEX = [212, 29, 140, 217, 143, 0, 178, 4, 233, 128, 9, 152, 236, 248, 66, 126]

WHITE = (255, 255, 255)


@pytest.fixture
def pipeline():
    return create_pipeline()


@pytest.fixture
def hello_image(pipeline):
    return pipeline.run(Image(input=HELLO_TEXT))
