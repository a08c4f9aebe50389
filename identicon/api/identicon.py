"""GET/POST /api/identicon — render identicons over HTTP."""

from __future__ import annotations

import base64
import hashlib

from fastapi import APIRouter, HTTPException, Response

from identicon.engine.pipeline import generate
from identicon.errors import IdenticonError
from identicon.models.requests import IdenticonRequest
from identicon.models.responses import IdenticonResponse
from identicon.storage import encode_png
from identicon.utils.grid import grid_to_mask, mask_to_text

router = APIRouter(prefix="/identicon")

# Same input, same bytes: clients may cache forever
_CACHE_CONTROL = "public, max-age=31536000, immutable"


@router.get("/{text}.png")
def identicon_png(text: str) -> Response:
    try:
        image = generate(text)
        png = encode_png(image.bitmap)
    except IdenticonError as e:
        raise HTTPException(status_code=500, detail=str(e)) from e

    return Response(
        content=png,
        media_type="image/png",
        headers={
            "Cache-Control": _CACHE_CONTROL,
            "ETag": f'"{hashlib.md5(text.encode("utf-8")).hexdigest()}"',
        },
    )


@router.post("", response_model=IdenticonResponse)
def identicon_json(req: IdenticonRequest) -> IdenticonResponse:
    try:
        image = generate(req.text)
        png = encode_png(image.bitmap)
    except IdenticonError as e:
        raise HTTPException(status_code=500, detail=str(e)) from e

    return IdenticonResponse(
        text=req.text,
        hex=image.hex,
        color=image.color,
        grid=image.grid,
        pixel_map=image.pixel_map,
        ascii=mask_to_text(grid_to_mask(image.grid)),
        png_base64=base64.b64encode(png).decode("ascii"),
    )
