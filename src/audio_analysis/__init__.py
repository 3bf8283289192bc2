"""Audio analysis service: language identification, transcription and translation via Gemini."""

__version__ = "1.0.0"
