import base64
import json

import pytest

from audio_analysis.domain import FALLBACK_RESULT, UploadedAudio, build_analysis_prompt
from audio_analysis.domain.audio_analyzer import AudioAnalyzer
from audio_analysis.exceptions import ConfigurationError, ProviderQuotaError

from .conftest import WELL_FORMED_ANALYSIS, FakeAnalysisModel

AUDIO_BYTES = b"ID3\x03\x00fake-mp3-frames"


@pytest.fixture
def upload() -> UploadedAudio:
    return UploadedAudio(
        file_name="clip.mp3",
        media_type="audio/mpeg",
        size=len(AUDIO_BYTES),
        data=AUDIO_BYTES,
    )


def test_request_carries_prompt_and_base64_audio():
    request = AudioAnalyzer(FakeAnalysisModel()).build_request(AUDIO_BYTES, "audio/mpeg")

    assert request.instruction == build_analysis_prompt()
    assert request.audio.media_type == "audio/mpeg"
    assert base64.b64decode(request.audio.data_base64) == AUDIO_BYTES


def test_invoke_makes_exactly_one_call():
    model = FakeAnalysisModel("raw model text")

    raw = AudioAnalyzer(model).invoke(AUDIO_BYTES, "audio/wav")

    assert raw == "raw model text"
    assert len(model.calls) == 1
    instruction, audio = model.calls[0]
    assert instruction == build_analysis_prompt()
    assert audio.media_type == "audio/wav"


def test_analyze_returns_reconciled_result(upload):
    model = FakeAnalysisModel(json.dumps(WELL_FORMED_ANALYSIS))

    result = AudioAnalyzer(model).analyze(upload)

    assert result.identified_language == "Hindi"
    assert result.native_summary == WELL_FORMED_ANALYSIS["nativeSummary"]


def test_analyze_falls_back_on_unparseable_output(upload):
    model = FakeAnalysisModel("The audio contains a greeting.")

    assert AudioAnalyzer(model).analyze(upload) == FALLBACK_RESULT


@pytest.mark.parametrize(
    "error", [ConfigurationError("missing key"), ProviderQuotaError("quota")]
)
def test_provider_errors_propagate_without_retry(upload, error):
    model = FakeAnalysisModel(error=error)

    with pytest.raises(type(error)):
        AudioAnalyzer(model).analyze(upload)

    assert len(model.calls) == 1
