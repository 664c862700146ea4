"""FastAPI application factory for the DualCrypt service."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dualcrypt.api.errors import register_error_handlers
from dualcrypt.api.router_asymmetric import router as asymmetric_router
from dualcrypt.api.router_health import router as health_router
from dualcrypt.api.router_symmetric import router as symmetric_router
from dualcrypt.core.settings import CryptoSettings
from dualcrypt.core.timing import TIMING_HEADER, request_timing

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def create_app() -> FastAPI:
    """Build and configure the FastAPI application."""
    settings = CryptoSettings()
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger("dualcrypt").setLevel(settings.log_level.upper())

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        yield

    app = FastAPI(
        title="DualCrypt API",
        description=(
            "AES-256-GCM, RSA-OAEP and RS256 token operations that "
            "interoperate with the browser Web Crypto client."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )

    origins = settings.get_cors_origin_list()
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=True,
            allow_methods=["GET", "POST", "HEAD", "OPTIONS"],
            allow_headers=["Content-Type"],
            expose_headers=[TIMING_HEADER],
        )
    app.middleware("http")(request_timing)

    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(symmetric_router)
    app.include_router(asymmetric_router)

    return app
