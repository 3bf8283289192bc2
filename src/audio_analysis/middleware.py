"""Request logging and upload size middleware."""

import time

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.datastructures import Headers
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from audio_analysis.domain import build_error_envelope
from audio_analysis.exceptions import FileTooLargeError
from audio_analysis.logging import setup_logging

logger = setup_logging()

# Room for multipart boundaries, part headers and small form fields.
MULTIPART_OVERHEAD_BYTES = 64 * 1024


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Emits one structured log line per HTTP request."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        start_time = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "HTTP request",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round((time.perf_counter() - start_time) * 1000, 2),
                "client_ip": request.client.host if request.client else None,
            },
        )
        return response


class UploadSizeLimitMiddleware:
    """
    Rejects oversize upload bodies before the multipart form is parsed.

    A declared Content-Length above the budget is refused without reading the
    body. Bodies without one are read into memory up to the budget and
    replayed to the application, or refused as soon as they exceed it. The
    budget is the file limit plus MULTIPART_OVERHEAD_BYTES, so the exact
    per-file check still happens in the route.
    """

    def __init__(
        self,
        app: ASGIApp,
        max_file_size: int,
        paths: tuple[str, ...] = ("/api/audio/analyze",),
    ) -> None:
        self.app = app
        self.max_file_size = max_file_size
        self.max_body_size = max_file_size + MULTIPART_OVERHEAD_BYTES
        self.paths = paths

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if (
            scope["type"] != "http"
            or scope["method"] != "POST"
            or scope["path"] not in self.paths
        ):
            await self.app(scope, receive, send)
            return

        content_length = Headers(scope=scope).get("content-length")
        if content_length is not None and content_length.isdigit():
            declared = int(content_length)
            if declared > self.max_body_size:
                await self._reject(scope, receive, send, declared)
                return
            await self.app(scope, receive, send)
            return

        body = bytearray()
        more_body = True
        while more_body:
            message = await receive()
            if message["type"] == "http.disconnect":
                return
            body.extend(message.get("body", b""))
            if len(body) > self.max_body_size:
                await self._reject(scope, receive, send, len(body))
                return
            more_body = message.get("more_body", False)

        await self.app(scope, _replay(bytes(body), receive), send)

    async def _reject(
        self, scope: Scope, receive: Receive, send: Send, size: int
    ) -> None:
        logger.warning(
            "Upload body exceeds size limit",
            extra={
                "path": scope["path"],
                "size": size,
                "max_size": self.max_file_size,
            },
        )
        status_code, envelope = build_error_envelope(
            FileTooLargeError(size, self.max_file_size)
        )
        response = JSONResponse(status_code=status_code, content=envelope.to_wire())
        await response(scope, receive, send)


def _replay(body: bytes, receive: Receive) -> Receive:
    """Serves a buffered body once, then defers to the original receive."""
    delivered = False

    async def replay() -> Message:
        nonlocal delivered
        if delivered:
            return await receive()
        delivered = True
        return {"type": "http.request", "body": body, "more_body": False}

    return replay
