"""Command-line front end for the audio analysis service."""

import argparse
import json
import os
import sys
from pathlib import Path

from audio_analysis.exceptions import AudioAnalysisError

from .audio_client import DEFAULT_BASE_URL, AudioAnalysisClient, AudioFile


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="audio-analysis",
        description="Submit audio files to the audio analysis service.",
    )
    parser.add_argument(
        "--url",
        default=os.getenv("AUDIO_ANALYSIS_URL", DEFAULT_BASE_URL),
        help="Base URL of the audio API (default: %(default)s)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze = subparsers.add_parser("analyze", help="Analyze an audio file")
    analyze.add_argument("file", type=Path, help="Path to the audio file")
    analyze.add_argument("--media-type", help="Override the guessed media type")
    analyze.add_argument(
        "--output", type=Path, help="Write the result envelope to this JSON file"
    )

    subparsers.add_parser("health", help="Check that the service is reachable")
    return parser


def _analyze(client: AudioAnalysisClient, args: argparse.Namespace) -> int:
    audio_file = AudioFile.from_path(args.file, media_type=args.media_type)
    envelope = client.submit_for_analysis(audio_file)
    payload = json.dumps(envelope.to_wire(), indent=2, ensure_ascii=False)
    print(payload)
    if args.output and envelope.success:
        args.output.write_text(payload, encoding="utf-8")
    return 0 if envelope.success else 1


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    with AudioAnalysisClient(args.url) as client:
        if args.command == "health":
            healthy = client.check_service_health()
            print("healthy" if healthy else "unreachable")
            return 0 if healthy else 1

        try:
            return _analyze(client, args)
        except (AudioAnalysisError, OSError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1


if __name__ == "__main__":
    sys.exit(main())
