"""Tests for the HTTP endpoints."""

from __future__ import annotations

import base64
import io

from fastapi.testclient import TestClient
from PIL import Image as PILImage

from identicon import __version__
from identicon.main import app
from tests.conftest import HELLO_COLOR, HELLO_FILLED_INDICES, HELLO_HEX, HELLO_TEXT

client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"] == __version__
    assert data["transforms_registered"] == 6


def test_png_endpoint():
    response = client.get("/api/identicon/alice.png")
    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert "immutable" in response.headers["cache-control"]
    assert PILImage.open(io.BytesIO(response.content)).size == (300, 300)


def test_png_endpoint_deterministic():
    first = client.get("/api/identicon/bob.png")
    second = client.get("/api/identicon/bob.png")
    assert first.content == second.content
    assert first.headers["etag"] == second.headers["etag"]


def test_json_endpoint():
    response = client.post("/api/identicon", json={"text": HELLO_TEXT})
    assert response.status_code == 200
    data = response.json()
    assert data["hex"] == HELLO_HEX
    assert tuple(data["color"]) == HELLO_COLOR
    assert [index for _, index in data["grid"]] == HELLO_FILLED_INDICES
    assert data["pixel_map"][0] == [[0, 0], [60, 60]]
    assert len(data["ascii"].splitlines()) == 5
    png = base64.b64decode(data["png_base64"])
    assert png.startswith(b"\x89PNG")


def test_json_endpoint_empty_text():
    response = client.post("/api/identicon", json={"text": ""})
    assert response.status_code == 200
    assert len(response.json()["hex"]) == 16


def test_json_endpoint_requires_text():
    response = client.post("/api/identicon", json={})
    assert response.status_code == 422
