"""Client for the audio analysis service."""

from .audio_client import AudioAnalysisClient, AudioFile

__all__ = ["AudioAnalysisClient", "AudioFile"]
