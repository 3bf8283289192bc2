"""Infrastructure interface exports."""

from audio_analysis.infrastructure.interfaces.analysis_model import AnalysisModel

__all__ = ["AnalysisModel"]
