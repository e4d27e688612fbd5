# Standard library imports
import logging
import time
from typing import Awaitable, Callable

# External package imports
from fastapi import Request, Response

logger = logging.getLogger("users_api.access")


async def log_requests(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """HTTP middleware: one log line per request with method, path, status code and duration"""
    start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        duration_ms = (time.perf_counter() - start) * 1000
        logger.exception(f"{request.method} {request.url.path} failed after {duration_ms:.2f}ms")
        raise
    
    duration_ms = (time.perf_counter() - start) * 1000
    logger.info(f"{request.method} {request.url.path} {response.status_code} {duration_ms:.2f}ms")
    return response
