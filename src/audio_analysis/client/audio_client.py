"""HTTP client for submitting audio to the analysis service."""

import mimetypes
from pathlib import Path

import httpx
from pydantic import BaseModel, ValidationError

from audio_analysis.config import MAX_FILE_SIZE_BYTES
from audio_analysis.domain import ResultEnvelope, validate_upload
from audio_analysis.exceptions import ServiceConnectionError
from audio_analysis.logging import setup_logging

logger = setup_logging()

DEFAULT_BASE_URL = "http://localhost:3001/api/audio"
DEFAULT_TIMEOUT_SECONDS = 300.0


class AudioFile(BaseModel, frozen=True):
    """A local audio file ready to be submitted."""

    name: str
    size: int
    media_type: str
    content: bytes

    @classmethod
    def from_path(cls, path: str | Path, media_type: str | None = None) -> "AudioFile":
        """Reads a file, guessing its media type from the extension if not given."""
        path = Path(path)
        content = path.read_bytes()
        guessed, _ = mimetypes.guess_type(path.name)
        return cls(
            name=path.name,
            size=len(content),
            media_type=media_type or guessed or "application/octet-stream",
            content=content,
        )


class AudioAnalysisClient:
    """Submits audio files for analysis and checks service health."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        http_client: httpx.Client | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        max_file_size: int = MAX_FILE_SIZE_BYTES,
    ):
        self._base_url = base_url.rstrip("/")
        self._owns_client = http_client is None
        self._http = http_client or httpx.Client(timeout=timeout)
        self._max_file_size = max_file_size
        self.last_result: ResultEnvelope | None = None

    def __enter__(self) -> "AudioAnalysisClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._http.close()

    def submit_for_analysis(self, audio_file: AudioFile) -> ResultEnvelope:
        """
        Validates a file locally and submits it to the analysis endpoint.

        Args:
            audio_file: The file to analyze.

        Returns:
            The service's envelope. Successful envelopes are also kept as
            last_result.

        Raises:
            InvalidMediaTypeError: If the file is not declared as audio.
            FileTooLargeError: If the file exceeds the size limit.
            ServiceConnectionError: If the service cannot be reached.
        """
        validate_upload(audio_file.media_type, audio_file.size, self._max_file_size)

        logger.info(
            "Uploading audio file",
            extra={
                "file_name": audio_file.name,
                "size": audio_file.size,
                "media_type": audio_file.media_type,
            },
        )

        try:
            response = self._http.post(
                f"{self._base_url}/analyze",
                files={
                    "audio": (
                        audio_file.name,
                        audio_file.content,
                        audio_file.media_type,
                    )
                },
            )
        except httpx.RequestError as e:
            logger.error("Audio analysis request failed", extra={"error": str(e)})
            raise ServiceConnectionError(
                "Unable to connect to the server. Please ensure the backend is running.",
                e,
            ) from e

        envelope = self._read_envelope(response)
        if envelope.success:
            self.last_result = envelope
        else:
            logger.warning(
                "Audio analysis rejected",
                extra={"status_code": response.status_code, "error": envelope.error},
            )
        return envelope

    def check_service_health(self) -> bool:
        """Returns True if the service answers its health check."""
        try:
            response = self._http.get(f"{self._base_url}/health")
        except httpx.RequestError as e:
            logger.error("Health check failed", extra={"error": str(e)})
            return False
        return response.is_success

    def _read_envelope(self, response: httpx.Response) -> ResultEnvelope:
        try:
            return ResultEnvelope.model_validate(response.json())
        except (ValueError, ValidationError):
            if response.is_success:
                return ResultEnvelope(success=False, error="Analysis failed")
            return ResultEnvelope(
                success=False, error=f"Server error: {response.status_code}"
            )
