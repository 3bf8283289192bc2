"""Infrastructure layer exports."""

from audio_analysis.infrastructure.gemini_model import (
    GeminiAnalysisModel,
    build_gemini_model,
)
from audio_analysis.infrastructure.unconfigured_model import UnconfiguredAnalysisModel

__all__ = [
    "GeminiAnalysisModel",
    "UnconfiguredAnalysisModel",
    "build_gemini_model",
]
