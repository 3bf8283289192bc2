"""FastAPI application factory."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartParser

from audio_analysis import __version__
from audio_analysis.config import AppConfig
from audio_analysis.dependencies import get_config
from audio_analysis.domain import ResultEnvelope, build_error_envelope
from audio_analysis.exceptions import AudioAnalysisError
from audio_analysis.logging import setup_logging
from audio_analysis.middleware import (
    MULTIPART_OVERHEAD_BYTES,
    RequestLoggingMiddleware,
    UploadSizeLimitMiddleware,
)
from audio_analysis.response_models import ServiceIndexResponse
from audio_analysis.routes import audio_router

logger = setup_logging()


async def _handle_analysis_error(request: Request, exc: AudioAnalysisError):
    logger.error(
        "Request failed", extra={"path": request.url.path, "error": str(exc)}
    )
    status_code, envelope = build_error_envelope(exc)
    return JSONResponse(status_code=status_code, content=envelope.to_wire())


async def _handle_http_error(request: Request, exc: StarletteHTTPException):
    envelope = ResultEnvelope(success=False, error=str(exc.detail))
    return JSONResponse(
        status_code=exc.status_code,
        content=envelope.to_wire(),
        headers=getattr(exc, "headers", None),
    )


async def _handle_validation_error(request: Request, exc: RequestValidationError):
    logger.warning(
        "Request validation failed",
        extra={"path": request.url.path, "errors": str(exc.errors())},
    )
    envelope = ResultEnvelope(success=False, error="Invalid request.")
    return JSONResponse(status_code=400, content=envelope.to_wire())


def create_app(config: AppConfig | None = None) -> FastAPI:
    """Builds the API application with CORS, logging and envelope error handling."""
    config = config or get_config()

    app = FastAPI(title="Audio Analysis API", version=__version__)
    app.state.config = config

    # Admitted uploads stay in memory instead of rolling over to a temp file.
    MultiPartParser.spool_max_size = (
        config.upload.max_file_size_bytes + MULTIPART_OVERHEAD_BYTES
    )

    app.add_middleware(
        UploadSizeLimitMiddleware, max_file_size=config.upload.max_file_size_bytes
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.server.allowed_origins),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
    )

    app.add_exception_handler(AudioAnalysisError, _handle_analysis_error)
    app.add_exception_handler(StarletteHTTPException, _handle_http_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)

    app.include_router(audio_router)

    @app.get("/", response_model=ServiceIndexResponse, tags=["service"])
    def service_index() -> ServiceIndexResponse:
        """Lists the service endpoints."""
        return ServiceIndexResponse(
            message="Audio Analysis API Server",
            version=__version__,
            endpoints={
                "POST /api/audio/analyze": "Analyze audio file",
                "GET /api/audio/health": "Health check",
            },
        )

    logger.info(
        "Application configured",
        extra={
            "environment": config.server.environment,
            "allowed_origins": list(config.server.allowed_origins),
        },
    )
    return app
