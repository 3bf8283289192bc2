import json

import pytest

from audio_analysis.client import cli
from audio_analysis.domain import ResultEnvelope

from .conftest import WELL_FORMED_ANALYSIS


class StubClient:
    """Replaces AudioAnalysisClient inside the CLI."""

    healthy = True
    envelope = ResultEnvelope.model_validate({"success": True, "data": WELL_FORMED_ANALYSIS})

    def __init__(self, base_url):
        self.base_url = base_url
        self.submitted = []

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return None

    def check_service_health(self):
        return self.healthy

    def submit_for_analysis(self, audio_file):
        self.submitted.append(audio_file)
        return self.envelope


@pytest.fixture(autouse=True)
def stub_client(monkeypatch):
    monkeypatch.setattr(cli, "AudioAnalysisClient", StubClient)


def test_health_exit_codes(monkeypatch, capsys):
    assert cli.main(["health"]) == 0
    assert "healthy" in capsys.readouterr().out

    monkeypatch.setattr(StubClient, "healthy", False)
    assert cli.main(["health"]) == 1


def test_analyze_prints_and_saves_envelope(tmp_path, capsys):
    audio_path = tmp_path / "clip.mp3"
    audio_path.write_bytes(b"ID3")
    output = tmp_path / "result.json"

    exit_code = cli.main(["analyze", str(audio_path), "--output", str(output)])

    assert exit_code == 0
    printed = json.loads(capsys.readouterr().out)
    assert printed["data"] == WELL_FORMED_ANALYSIS
    assert json.loads(output.read_text(encoding="utf-8")) == printed


def test_analyze_missing_file_fails(tmp_path, capsys):
    exit_code = cli.main(["analyze", str(tmp_path / "absent.mp3")])

    assert exit_code == 1
    assert "Error" in capsys.readouterr().err
