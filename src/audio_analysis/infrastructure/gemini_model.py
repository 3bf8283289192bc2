"""Gemini implementation of the AnalysisModel interface."""

import base64

import httpx
from google import genai
from google.genai import errors, types

from audio_analysis.config import GeminiConfig
from audio_analysis.domain.models import InlineAudio
from audio_analysis.exceptions import (
    ConfigurationError,
    ProviderError,
    ProviderQuotaError,
    ProviderUnavailableError,
)
from audio_analysis.infrastructure.interfaces import AnalysisModel
from audio_analysis.logging import setup_logging

logger = setup_logging()

_AUTH_STATUS_CODES = (401, 403)
_QUOTA_STATUS_CODE = 429


class GeminiAnalysisModel(AnalysisModel):
    """Analysis model backed by Google Gemini."""

    def __init__(self, client: genai.Client, model_name: str):
        self._client = client
        self._model_name = model_name

    @property
    def model_name(self) -> str:
        return self._model_name

    def generate(self, instruction: str, audio: InlineAudio) -> str:
        """
        Sends the instruction and audio to Gemini and returns its text output.

        An empty or blocked response is returned as an empty string so the
        reconciler can substitute its fallback.
        """
        audio_part = types.Part.from_bytes(
            data=base64.b64decode(audio.data_base64),
            mime_type=audio.media_type,
        )
        try:
            response = self._client.models.generate_content(
                model=self._model_name,
                contents=[instruction, audio_part],
                config={"response_mime_type": "application/json"},
            )
        except errors.ClientError as e:
            raise self._classify_client_error(e) from e
        except errors.ServerError as e:
            logger.exception("Gemini server error", extra={"status_code": e.code})
            raise ProviderUnavailableError(f"Gemini server error: {e.code}", e) from e
        except httpx.TransportError as e:
            logger.exception("Gemini transport failure")
            raise ProviderUnavailableError(f"Gemini unreachable: {e}", e) from e
        except Exception as e:
            logger.exception("Gemini API call failed")
            raise ProviderError(f"Gemini analysis failed: {e}", e) from e

        text = response.text
        if not text:
            logger.warning("Gemini returned empty response")
            return ""
        logger.info(
            "Received response from Gemini",
            extra={"model": self._model_name, "response_chars": len(text)},
        )
        return text

    def _classify_client_error(self, error: errors.ClientError) -> Exception:
        message = getattr(error, "message", None) or str(error)
        if error.code in _AUTH_STATUS_CODES or "api key" in message.lower():
            logger.error(
                "Gemini rejected the API credential",
                extra={"status_code": error.code},
            )
            return ConfigurationError("Gemini rejected the API key", error)
        if error.code == _QUOTA_STATUS_CODE:
            logger.warning("Gemini quota exhausted", extra={"status_code": error.code})
            return ProviderQuotaError("Gemini quota or rate limit exceeded", error)
        logger.error(
            "Gemini rejected the request",
            extra={"status_code": error.code, "error": message},
        )
        return ProviderError(f"Gemini request failed: {message}", error)


def build_gemini_model(config: GeminiConfig) -> GeminiAnalysisModel:
    """
    Creates the Gemini-backed model from configuration.

    Raises:
        ConfigurationError: If no API key is configured.
    """
    if not config.api_key:
        raise ConfigurationError("GEMINI_API_KEY environment variable is required")
    client = genai.Client(
        api_key=config.api_key,
        http_options=types.HttpOptions(timeout=config.request_timeout_ms),
    )
    logger.info("Gemini client initialized", extra={"model": config.model_name})
    return GeminiAnalysisModel(client, config.model_name)
