"""Response models for the audio analysis API."""

from datetime import datetime

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Liveness report for the service process."""

    success: bool
    message: str
    timestamp: datetime


class ServiceIndexResponse(BaseModel):
    """Service name, version and available endpoints."""

    message: str
    version: str
    endpoints: dict[str, str]
