import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from leaguehub_backend.core.config import LOG_LEVEL

logger = logging.getLogger("leaguehub.http")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """One log line per request: id, method, path, status, duration."""

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = uuid.uuid4().hex[:8]
        start = time.time()

        response: Response = await call_next(request)

        duration_ms = round((time.time() - start) * 1000, 2)
        level = logging.WARNING if response.status_code >= 400 else logging.INFO
        logger.log(level, "%s %s %s -> %d (%.2f ms)",
                   request_id, request.method, request.url.path, response.status_code, duration_ms)

        response.headers["X-Request-ID"] = request_id
        return response


def setup_logging() -> None:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )
