"""Map codec errors to HTTP responses."""

import logging

from fastapi import FastAPI, Request
from starlette.responses import JSONResponse

from dualcrypt.crypto.errors import CryptoError

logger = logging.getLogger(__name__)

HTTP_BAD_REQUEST = 400


async def _crypto_error_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, CryptoError)
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc.code)
    return JSONResponse(
        {"error": exc.code, "error_description": str(exc)},
        status_code=HTTP_BAD_REQUEST,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the CryptoError -> 400 handler."""
    app.add_exception_handler(CryptoError, _crypto_error_handler)
