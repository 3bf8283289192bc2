"""Audio analysis endpoints."""

from datetime import datetime, timezone
from typing import Annotated, BinaryIO

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import JSONResponse

from audio_analysis.config import AppConfig
from audio_analysis.dependencies import get_app_config, get_audio_analyzer
from audio_analysis.domain import (
    ResultEnvelope,
    UploadedAudio,
    build_metadata,
    build_success_envelope,
    validate_upload,
)
from audio_analysis.domain.audio_analyzer import AudioAnalyzer
from audio_analysis.exceptions import (
    AudioAnalysisError,
    MissingFileError,
    UploadValidationError,
)
from audio_analysis.logging import setup_logging
from audio_analysis.response_models import HealthResponse

logger = setup_logging()

router = APIRouter(prefix="/api/audio", tags=["audio"])

AnalyzerDep = Annotated[AudioAnalyzer, Depends(get_audio_analyzer)]
ConfigDep = Annotated[AppConfig, Depends(get_app_config)]

_ERROR_RESPONSES = {
    400: {"model": ResultEnvelope, "description": "Missing or non-audio file"},
    413: {"model": ResultEnvelope, "description": "File exceeds the size limit"},
    500: {"model": ResultEnvelope, "description": "Configuration or analysis failure"},
}


def _measure(stream: BinaryIO) -> int:
    stream.seek(0, 2)
    size = stream.tell()
    stream.seek(0)
    return size


@router.post(
    "/analyze",
    response_model=ResultEnvelope,
    responses=_ERROR_RESPONSES,
)
def analyze_audio(
    analyzer: AnalyzerDep,
    config: ConfigDep,
    audio: Annotated[
        UploadFile | None, File(description="Audio file to analyze.")
    ] = None,
):
    """
    Analyzes an uploaded audio file.

    Identifies the spoken language and returns the transcript, a
    transliteration, native and English summaries and an English translation.
    Failures are raised and rendered as envelopes by the application's
    exception handler.
    """
    if audio is None:
        raise MissingFileError()

    size = audio.size if audio.size is not None else _measure(audio.file)
    media_type = audio.content_type or ""

    logger.info(
        "Processing audio file",
        extra={"file_name": audio.filename, "media_type": media_type, "size": size},
    )

    try:
        validate_upload(media_type, size, config.upload.max_file_size_bytes)
    except UploadValidationError as e:
        logger.warning(
            "Upload rejected",
            extra={"file_name": audio.filename, "reason": str(e)},
        )
        raise

    upload = UploadedAudio(
        file_name=audio.filename or "audio",
        media_type=media_type,
        size=size,
        data=audio.file.read(),
    )

    try:
        result = analyzer.analyze(upload)
    except AudioAnalysisError as e:
        logger.error(
            "Audio analysis failed",
            extra={"file_name": upload.file_name, "error": str(e)},
        )
        raise
    except Exception as e:
        logger.exception(
            "Unexpected error analyzing audio",
            extra={"file_name": upload.file_name},
        )
        raise AudioAnalysisError("Unexpected error analyzing audio", e) from e

    envelope = build_success_envelope(result, build_metadata(upload))
    return JSONResponse(content=envelope.to_wire())


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    """Reports that the service process is reachable."""
    return HealthResponse(
        success=True,
        message="Audio analysis service is running",
        timestamp=datetime.now(timezone.utc),
    )
