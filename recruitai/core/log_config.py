"""
Logging setup and the request access log.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

access_logger = logging.getLogger("recruitai.access")
logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def internal_error_response(exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": str(exc) or exc.__class__.__name__})


class AccessLogMiddleware(BaseHTTPMiddleware):
    """
    One line per request: method, path, status and elapsed time.

    Unhandled errors become a 500 `{"error"}` response here, inside the
    CORS layer.
    """

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            response = internal_error_response(exc)
        elapsed_ms = (time.perf_counter() - started) * 1000
        access_logger.info(
            "%s %s %s - %.1f ms",
            request.method, request.url.path, response.status_code, elapsed_ms
        )
        return response
