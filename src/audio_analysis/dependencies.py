"""FastAPI dependency injection configuration."""

from typing import Annotated

from fastapi import Depends, Request

from audio_analysis.config import AppConfig, load_config
from audio_analysis.domain.audio_analyzer import AudioAnalyzer
from audio_analysis.exceptions import ConfigurationError
from audio_analysis.infrastructure import (
    UnconfiguredAnalysisModel,
    build_gemini_model,
)
from audio_analysis.infrastructure.interfaces import AnalysisModel
from audio_analysis.logging import setup_logging

logger = setup_logging()

_config = load_config()

# Gemini model
try:
    _model: AnalysisModel = build_gemini_model(_config.gemini)
except ConfigurationError as e:
    logger.error(
        "GEMINI_API_KEY environment variable not set, analysis requests will fail",
    )
    _model = UnconfiguredAnalysisModel(e)


def get_config() -> AppConfig:
    """Returns the process-wide configuration."""
    return _config


def get_app_config(request: Request) -> AppConfig:
    """Returns the configuration the serving application was built with."""
    return request.app.state.config


def get_analysis_model() -> AnalysisModel:
    """Returns the configured analysis model."""
    return _model


def get_audio_analyzer(
    model: Annotated[AnalysisModel, Depends(get_analysis_model)],
) -> AudioAnalyzer:
    """Creates an AudioAnalyzer around the injected model."""
    return AudioAnalyzer(model)
