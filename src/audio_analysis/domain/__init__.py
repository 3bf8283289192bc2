"""Domain layer exports."""

from .envelope import (
    build_error_envelope,
    build_metadata,
    build_success_envelope,
    classify_error,
)
from .models import (
    AnalysisMetadata,
    AnalysisRequest,
    AnalysisResult,
    InlineAudio,
    ResultEnvelope,
    UploadedAudio,
)
from .prompt_builder import build_analysis_prompt
from .response_reconciler import FALLBACK_RESULT, reconcile_response
from .upload_gate import validate_upload

__all__ = [
    "AnalysisMetadata",
    "AnalysisRequest",
    "AnalysisResult",
    "FALLBACK_RESULT",
    "InlineAudio",
    "ResultEnvelope",
    "UploadedAudio",
    "build_analysis_prompt",
    "build_error_envelope",
    "build_metadata",
    "build_success_envelope",
    "classify_error",
    "reconcile_response",
    "validate_upload",
]
