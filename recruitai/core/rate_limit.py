"""
Global request rate limiter and request body size limit.

A single timestamp shared by every client: a request arriving less than
`interval_ms` after the last accepted one is rejected with 429.
"""

import threading
import time
from typing import Optional

from starlette.datastructures import Headers
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from recruitai.core.errors import RateLimitedError


class GlobalRateLimiter:
    def __init__(self, interval_ms: int = 750):
        self.interval_ms = interval_ms
        self._last_ms: Optional[float] = None
        self._lock = threading.Lock()

    def check(self, now_ms: Optional[float] = None) -> bool:
        """Return True and record `now_ms` if the request may proceed."""
        if self.interval_ms <= 0:
            return True
        if now_ms is None:
            now_ms = time.monotonic() * 1000
        with self._lock:
            if self._last_ms is not None and now_ms - self._last_ms < self.interval_ms:
                return False
            self._last_ms = now_ms
            return True

    def reset(self) -> None:
        with self._lock:
            self._last_ms = None


class RateLimitMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, limiter: GlobalRateLimiter):
        super().__init__(app)
        self.limiter = limiter

    async def dispatch(self, request: Request, call_next):
        if not self.limiter.check():
            error = RateLimitedError()
            return JSONResponse(status_code=error.status_code, content={"error": error.message})
        return await call_next(request)


class BodySizeLimitMiddleware:
    """
    Reject request bodies larger than `max_bytes` with 413.

    The declared Content-Length is checked first. The body is then read and
    counted as it arrives, so chunked uploads are held to the same limit.
    The buffered body is replayed to the app.
    """

    def __init__(self, app: ASGIApp, max_bytes: int):
        self.app = app
        self.max_bytes = max_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        length = Headers(scope=scope).get("content-length")
        if length and length.isdigit() and int(length) > self.max_bytes:
            await self._reject(scope, receive, send)
            return

        chunks = []
        received = 0
        more_body = True
        while more_body:
            message = await receive()
            if message["type"] == "http.disconnect":
                return
            body = message.get("body", b"")
            received += len(body)
            if received > self.max_bytes:
                await self._reject(scope, receive, send)
                return
            chunks.append(body)
            more_body = message.get("more_body", False)

        body = b"".join(chunks)
        replayed = False

        async def replay() -> Message:
            nonlocal replayed
            if not replayed:
                replayed = True
                return {"type": "http.request", "body": body, "more_body": False}
            return await receive()

        await self.app(scope, replay, send)

    async def _reject(self, scope: Scope, receive: Receive, send: Send) -> None:
        response = JSONResponse(status_code=413, content={"error": "Request body too large"})
        await response(scope, receive, send)
