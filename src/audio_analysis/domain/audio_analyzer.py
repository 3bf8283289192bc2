"""Core business logic for audio analysis."""

from audio_analysis.infrastructure.interfaces import AnalysisModel
from audio_analysis.logging import setup_logging

from .models import AnalysisRequest, AnalysisResult, InlineAudio, UploadedAudio
from .prompt_builder import build_analysis_prompt
from .response_reconciler import reconcile_response

logger = setup_logging()


class AudioAnalyzer:
    """Runs an admitted upload through the external model and reconciles the output."""

    def __init__(self, model: AnalysisModel):
        self._model = model

    def build_request(self, data: bytes, media_type: str) -> AnalysisRequest:
        """Packages the audio and the fixed instruction for a single model call."""
        return AnalysisRequest(
            instruction=build_analysis_prompt(),
            audio=InlineAudio.from_bytes(data, media_type),
        )

    def invoke(self, data: bytes, media_type: str) -> str:
        """
        Performs exactly one model round trip and returns the raw text.

        Args:
            data: Raw audio bytes.
            media_type: MIME type of the audio.

        Returns:
            The model's unprocessed text output.

        Raises:
            ConfigurationError: If the model credential is missing or invalid.
            TransientProviderError: On quota or network failures.
            ProviderError: On any other provider failure.
        """
        request = self.build_request(data, media_type)
        logger.info(
            "Sending analysis request to model",
            extra={"model": self._model.model_name, "media_type": media_type},
        )
        return self._model.generate(request.instruction, request.audio)

    def analyze(self, upload: UploadedAudio) -> AnalysisResult:
        """
        Analyzes an upload that has already passed the upload gate.

        Provider failures propagate; unparseable output is absorbed into
        the fallback result.
        """
        raw_text = self.invoke(upload.data, upload.media_type)
        result = reconcile_response(raw_text)
        logger.info(
            "Audio analysis completed",
            extra={
                "file_name": upload.file_name,
                "identified_language": result.identified_language,
            },
        )
        return result
