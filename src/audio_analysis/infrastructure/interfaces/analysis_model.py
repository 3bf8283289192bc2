"""Abstract interface for the external generative model."""

from abc import ABC, abstractmethod

from audio_analysis.domain.models import InlineAudio


class AnalysisModel(ABC):
    """Abstract base class for generative model backends."""

    @abstractmethod
    def generate(self, instruction: str, audio: InlineAudio) -> str:
        """
        Sends an instruction and inline audio to the model in a single request.

        Args:
            instruction: The natural-language instruction text.
            audio: Base64-encoded audio and its media type.

        Returns:
            The raw text produced by the model.

        Raises:
            ConfigurationError: If the credential is missing or rejected.
            TransientProviderError: On quota, rate-limit or network failures.
            ProviderError: For any other provider failure.
        """
        pass

    @property
    @abstractmethod
    def model_name(self) -> str:
        """Identifier of the underlying model, for logging."""
        pass
