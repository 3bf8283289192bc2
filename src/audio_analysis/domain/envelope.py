"""Builds the success/error envelopes returned to callers."""

from datetime import datetime, timezone

from audio_analysis.exceptions import (
    ConfigurationError,
    FileTooLargeError,
    InvalidMediaTypeError,
    MissingFileError,
    ProviderError,
)

from .models import AnalysisMetadata, AnalysisResult, ResultEnvelope, UploadedAudio

GENERIC_ERROR_MESSAGE = "Internal server error. Please try again later."

_ERROR_CLASSIFICATION: tuple[tuple[type[Exception], int, str], ...] = (
    (MissingFileError, 400, "No audio file provided"),
    (InvalidMediaTypeError, 400, "Invalid file type. Please upload an audio file."),
    (ConfigurationError, 500, "API configuration error. Please check server setup."),
    (ProviderError, 500, "Failed to analyze audio. Please try again."),
)

_SIZE_UNITS = (("MB", 1024 * 1024), ("KB", 1024))


def describe_size(size: int) -> str:
    """Formats a byte count as MB or KB, or in bytes below one kilobyte."""
    for unit, factor in _SIZE_UNITS:
        if size >= factor:
            whole, remainder = divmod(size, factor)
            return f"{whole}{unit}" if not remainder else f"{size / factor:.1f}{unit}"
    return f"{size} bytes"


def build_metadata(
    upload: UploadedAudio, processed_at: datetime | None = None
) -> AnalysisMetadata:
    """Describes the upload that produced a result."""
    return AnalysisMetadata(
        file_name=upload.file_name,
        file_size=upload.size,
        mime_type=upload.media_type,
        processed_at=processed_at or datetime.now(timezone.utc),
    )


def build_success_envelope(
    result: AnalysisResult, metadata: AnalysisMetadata
) -> ResultEnvelope:
    return ResultEnvelope(success=True, data=result, metadata=metadata)


def classify_error(error: Exception) -> tuple[int, str]:
    """
    Maps a pipeline error to an HTTP status and a user-facing message.

    Unrecognized errors collapse to a generic 500 so internals never leak.
    """
    if isinstance(error, FileTooLargeError):
        return 413, (
            "File too large. Please upload an audio file smaller than "
            f"{describe_size(error.max_size)}."
        )
    for error_type, status_code, message in _ERROR_CLASSIFICATION:
        if isinstance(error, error_type):
            return status_code, message
    return 500, GENERIC_ERROR_MESSAGE


def build_error_envelope(error: Exception) -> tuple[int, ResultEnvelope]:
    """Returns the status code and failure envelope for an error."""
    status_code, message = classify_error(error)
    return status_code, ResultEnvelope(success=False, error=message)
