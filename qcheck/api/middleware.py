from uuid import uuid4
import logging
import time

from fastapi import Request

logger = logging.getLogger(__name__)

async def request_logging_middleware(request: Request, call_next):
    """Log each request with a generated id and echo it as X-Request-ID."""
    request_id = uuid4().hex
    request.state.request_id = request_id
    start = time.perf_counter()
    response = await call_next(request)
    duration = time.perf_counter() - start
    logger.info(
        "[%s] %s %s - %s (%.3fs)",
        request_id, request.method, request.url.path, response.status_code, duration,
    )
    response.headers["X-Request-ID"] = request_id
    return response
