"""Custom exceptions for the audio analysis service."""


class AudioAnalysisError(Exception):
    """Base class for all errors raised by the analysis pipeline."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class UploadValidationError(AudioAnalysisError):
    """Raised when an upload is rejected before any processing happens."""


class MissingFileError(UploadValidationError):
    """Raised when the request carries no audio file."""

    def __init__(self):
        super().__init__("No audio file provided")


class InvalidMediaTypeError(UploadValidationError):
    """Raised when the declared media type is not an audio type."""

    def __init__(self, media_type: str | None):
        self.media_type = media_type
        super().__init__(f"Unsupported media type '{media_type}', expected audio/*")


class FileTooLargeError(UploadValidationError):
    """Raised when the upload exceeds the configured size limit."""

    def __init__(self, size: int, max_size: int):
        self.size = size
        self.max_size = max_size
        super().__init__(f"File of {size} bytes exceeds the {max_size} byte limit")


class ConfigurationError(AudioAnalysisError):
    """Raised when the external model credential is missing or rejected."""


class ProviderError(AudioAnalysisError):
    """Raised when the external model call fails."""


class TransientProviderError(ProviderError):
    """Raised for provider failures that may succeed when retried."""


class ProviderQuotaError(TransientProviderError):
    """Raised when the provider rejects the call due to quota or rate limits."""


class ProviderUnavailableError(TransientProviderError):
    """Raised on network failures, timeouts and provider-side outages."""


class MalformedProviderResponseError(AudioAnalysisError):
    """Raised when model output does not parse into an analysis result."""


class ServiceConnectionError(AudioAnalysisError):
    """Raised by the client when the analysis service cannot be reached."""
