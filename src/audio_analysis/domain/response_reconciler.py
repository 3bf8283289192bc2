"""Turns raw model text into an AnalysisResult, falling back on failure."""

import json
import re

from pydantic import ValidationError

from audio_analysis.exceptions import MalformedProviderResponseError
from audio_analysis.logging import setup_logging

from .models import AnalysisResult

logger = setup_logging()

REQUIRED_FIELDS = (
    "identifiedLanguage",
    "nativeSubtitles",
    "nativeSummary",
    "englishSummary",
    "englishTranslation",
)

FALLBACK_RESULT = AnalysisResult(
    identified_language="Unknown",
    native_subtitles="Error: Could not process audio transcription.",
    english_transliteration="Error: Could not process transliteration.",
    native_summary="Error: Could not generate summary.",
    english_summary="Error: Could not generate English summary.",
    english_translation="Error: Could not generate English translation.",
)

_LEADING_FENCE = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_TRAILING_FENCE = re.compile(r"\s*```$")

_RAW_PREVIEW_CHARS = 500


def strip_code_fences(text: str) -> str:
    """Removes surrounding whitespace and a markdown code fence, if present."""
    cleaned = text.strip()
    cleaned = _LEADING_FENCE.sub("", cleaned, count=1)
    cleaned = _TRAILING_FENCE.sub("", cleaned, count=1)
    return cleaned.strip()


def parse_analysis(text: str) -> AnalysisResult:
    """
    Parses model output into an AnalysisResult.

    Args:
        text: Raw text returned by the model.

    Returns:
        The parsed AnalysisResult.

    Raises:
        MalformedProviderResponseError: If the text is not a JSON object or a
            mandatory field is missing.
    """
    try:
        parsed = json.loads(strip_code_fences(text))
    except json.JSONDecodeError as e:
        raise MalformedProviderResponseError("Response is not valid JSON", e) from e

    if not isinstance(parsed, dict):
        raise MalformedProviderResponseError("Response is not a JSON object")

    missing = [field for field in REQUIRED_FIELDS if field not in parsed]
    if missing:
        raise MalformedProviderResponseError(
            f"Missing required field(s): {', '.join(missing)}"
        )

    try:
        return AnalysisResult.model_validate(parsed)
    except ValidationError as e:
        raise MalformedProviderResponseError("Response has invalid field types", e) from e


def reconcile_response(text: str) -> AnalysisResult:
    """Parses model output, substituting FALLBACK_RESULT if it cannot be used."""
    try:
        return parse_analysis(text)
    except MalformedProviderResponseError as e:
        logger.error(
            "Could not parse model response, using fallback result",
            extra={"reason": str(e), "raw_response": text[:_RAW_PREVIEW_CHARS]},
        )
        return FALLBACK_RESULT
