"""Stand-in model used when the external model cannot be configured."""

from audio_analysis.domain.models import InlineAudio
from audio_analysis.exceptions import ConfigurationError
from audio_analysis.infrastructure.interfaces import AnalysisModel


class UnconfiguredAnalysisModel(AnalysisModel):
    """Fails every call with the configuration error recorded at startup."""

    def __init__(self, error: ConfigurationError):
        self._error = error

    @property
    def model_name(self) -> str:
        return "unconfigured"

    def generate(self, instruction: str, audio: InlineAudio) -> str:
        raise ConfigurationError(str(self._error), self._error)
