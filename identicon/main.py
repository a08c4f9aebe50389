"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from identicon import __version__
from identicon.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.identicon_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Identicon",
        description="Deterministic 5x5 mirrored identicons from arbitrary strings",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # Import all transform modules to trigger registration
    from identicon.engine.pipeline import register_transforms

    register_transforms()

    from identicon.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
