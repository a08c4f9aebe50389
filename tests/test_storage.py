"""Tests for PNG encoding and persistence."""

from __future__ import annotations

import io

import pytest
from PIL import Image as PILImage

from identicon.engine import generate
from identicon.engine.context import Image
from identicon.errors import PersistenceError
from identicon.storage import encode_png, output_path, save_image

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


def test_encode_png(hello_image):
    data = encode_png(hello_image.bitmap)
    assert data.startswith(PNG_MAGIC)
    decoded = PILImage.open(io.BytesIO(data))
    assert decoded.size == (300, 300)


def test_encoding_is_deterministic():
    assert encode_png(generate("same").bitmap) == encode_png(generate("same").bitmap)


def test_output_path(tmp_path):
    assert output_path("alice", tmp_path) == tmp_path / "alice.png"


def test_output_path_rejects_separator(tmp_path):
    with pytest.raises(PersistenceError):
        output_path("../escape", tmp_path)


def test_save_image(tmp_path, hello_image):
    path = save_image(hello_image, tmp_path)
    assert path == tmp_path / "hello world!.png"
    assert path.read_bytes() == encode_png(hello_image.bitmap)


def test_save_overwrites(tmp_path, hello_image):
    target = tmp_path / "hello world!.png"
    target.write_bytes(b"stale")
    save_image(hello_image, tmp_path)
    assert target.read_bytes().startswith(PNG_MAGIC)


def test_save_without_bitmap(tmp_path):
    with pytest.raises(PersistenceError):
        save_image(Image(input="never drawn"), tmp_path)


def test_write_failure_keeps_image_usable(tmp_path, hello_image):
    missing = tmp_path / "does" / "not" / "exist"
    with pytest.raises(PersistenceError) as excinfo:
        save_image(hello_image, missing)
    assert isinstance(excinfo.value, OSError)

    # Retry against a valid folder without recomputing
    assert save_image(hello_image, tmp_path).exists()


def test_nul_byte_in_name(tmp_path):
    image = generate("a\x00b")
    with pytest.raises(PersistenceError):
        save_image(image, tmp_path)
    assert list(tmp_path.iterdir()) == []


def test_unencodable_name_is_persistence_error(tmp_path):
    image = generate("\ud800")
    with pytest.raises(PersistenceError):
        save_image(image, tmp_path)
