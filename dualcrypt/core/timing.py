"""Request timing middleware."""

import logging
import time
from collections.abc import Awaitable, Callable

from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)

TIMING_HEADER = "X-Server-Total-Time-Ms"


async def request_timing(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Log request duration and expose it to the browser client."""
    start = time.perf_counter()
    try:
        response = await call_next(request)
        response.headers[TIMING_HEADER] = f"{_elapsed_ms(start):.2f}"
        return response
    finally:
        logger.info(
            "Request %s %s completed in %d ms",
            request.method,
            request.url.path,
            _elapsed_ms(start),
        )


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000
