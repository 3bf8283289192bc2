"""Domain models for audio analysis."""

import base64
import json
from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base for models exchanged as camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class UploadedAudio(BaseModel, frozen=True):
    """An audio upload held in memory for the duration of one request."""

    file_name: str
    media_type: str
    size: int
    data: bytes


class InlineAudio(BaseModel, frozen=True):
    """Audio payload in the form sent to the external model."""

    data_base64: str
    media_type: str

    @classmethod
    def from_bytes(cls, data: bytes, media_type: str) -> "InlineAudio":
        return cls(
            data_base64=base64.b64encode(data).decode("ascii"),
            media_type=media_type,
        )


class AnalysisRequest(BaseModel, frozen=True):
    """Instruction text plus inline audio, built fresh for every call."""

    instruction: str
    audio: InlineAudio


class AnalysisResult(WireModel):
    """
    Structured outcome of analyzing one audio file.

    Mandatory fields must be present but may be null. Non-string values are
    kept as their JSON text.
    """

    identified_language: str | None
    native_subtitles: str | None
    english_transliteration: str | None = None
    native_summary: str | None
    english_summary: str | None
    english_translation: str | None

    @field_validator("*", mode="before")
    @classmethod
    def _as_text(cls, value):
        if value is None or isinstance(value, str):
            return value
        return json.dumps(value, ensure_ascii=False)


class AnalysisMetadata(WireModel):
    """Request metadata attached to a successful analysis."""

    file_name: str
    file_size: int
    mime_type: str
    processed_at: datetime


class ResultEnvelope(WireModel):
    """Uniform success/error wrapper returned by the analysis endpoint."""

    success: bool
    data: AnalysisResult | None = None
    metadata: AnalysisMetadata | None = None
    error: str | None = None

    def to_wire(self) -> dict:
        """Returns the JSON-ready representation with unset fields omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)
