"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel

MAX_FILE_SIZE_BYTES = 25 * 1024 * 1024

_PRODUCTION_ORIGINS = ("http://localhost:5173", "http://localhost:4173")
_DEVELOPMENT_ORIGINS = ("http://localhost:5173", "http://localhost:3000")


class GeminiConfig(BaseModel, frozen=True):
    """Gemini model configuration."""

    api_key: str
    model_name: str = "gemini-2.5-flash"
    request_timeout_ms: int = 120_000


class ServerConfig(BaseModel, frozen=True):
    """HTTP server and cross-origin configuration."""

    host: str = "0.0.0.0"
    port: int = 3001
    environment: str = "development"
    allowed_origins: tuple[str, ...] = _DEVELOPMENT_ORIGINS


class UploadConfig(BaseModel, frozen=True):
    """Upload gate limits."""

    max_file_size_bytes: int = MAX_FILE_SIZE_BYTES


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    gemini: GeminiConfig
    server: ServerConfig
    upload: UploadConfig = UploadConfig()
    log_level: str = "INFO"


def default_allowed_origins(environment: str) -> tuple[str, ...]:
    """Returns the origin allowlist used when none is configured explicitly."""
    if environment == "production":
        return _PRODUCTION_ORIGINS
    return _DEVELOPMENT_ORIGINS


def _parse_origins(raw: str | None, environment: str) -> tuple[str, ...]:
    if not raw:
        return default_allowed_origins(environment)
    origins = tuple(origin.strip() for origin in raw.split(",") if origin.strip())
    return origins or default_allowed_origins(environment)


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    environment = os.getenv("APP_ENV") or os.getenv("NODE_ENV") or "development"
    return AppConfig(
        gemini=GeminiConfig(
            api_key=os.getenv("GEMINI_API_KEY", ""),
            model_name=os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
            request_timeout_ms=int(os.getenv("GEMINI_TIMEOUT_MS", "120000")),
        ),
        server=ServerConfig(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3001")),
            environment=environment,
            allowed_origins=_parse_origins(os.getenv("ALLOWED_ORIGINS"), environment),
        ),
        upload=UploadConfig(
            max_file_size_bytes=int(
                os.getenv("MAX_UPLOAD_BYTES", str(MAX_FILE_SIZE_BYTES))
            ),
        ),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )
