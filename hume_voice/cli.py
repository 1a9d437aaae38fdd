"""
Command line tool for the Hume voice SDK.

Usage:
    python -m hume_voice voices [--provider HUME_AI|CUSTOM_VOICE]
    python -m hume_voice synthesize TEXT --output PATH [--voice NAME] [--stream]
"""

import argparse
import os
import shutil
import sys
import tempfile
from typing import List, Optional

from hume_voice.client import HumeClient
from hume_voice.config.logging_config import configure_logging
from hume_voice.exceptions import HumeAPIError
from hume_voice.models.tts_schemas import AudioFormatType, VoiceProvider


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="hume-voice",
        description="List voices and synthesize speech with the Hume API",
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv("LOG_LEVEL", "INFO"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: INFO or LOG_LEVEL env var)",
    )
    parser.add_argument(
        "--log-file",
        default=os.getenv("HUME_LOG_FILE"),
        help="Also write logs to this rotating file (default: HUME_LOG_FILE env var)",
    )
    parser.add_argument(
        "--env-file",
        default=None,
        help="Path of a .env file holding HUME_API_KEY (default: ./.env)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    voices = subparsers.add_parser("voices", help="List available voices")
    voices.add_argument(
        "--provider",
        default=VoiceProvider.HUME_AI.value,
        choices=[p.value for p in VoiceProvider],
        help="Voice library to list (default: HUME_AI)",
    )

    synthesize = subparsers.add_parser("synthesize", help="Synthesize text to an audio file")
    synthesize.add_argument("text", help="Text to speak")
    synthesize.add_argument("--output", "-o", required=True, help="Where to write the audio")
    synthesize.add_argument("--voice", default=None, help="Voice name")
    synthesize.add_argument(
        "--provider",
        default=VoiceProvider.HUME_AI.value,
        choices=[p.value for p in VoiceProvider],
        help="Library the voice belongs to (default: HUME_AI)",
    )
    synthesize.add_argument(
        "--format",
        default=AudioFormatType.MP3.value,
        choices=[f.value for f in AudioFormatType],
        help="Audio format (default: mp3)",
    )
    synthesize.add_argument("--description", default=None, help="Acting instructions")
    synthesize.add_argument(
        "--stream",
        action="store_true",
        help="Stream the audio to the output file as it is generated",
    )
    return parser.parse_args(argv)


def _utterance(args: argparse.Namespace) -> dict:
    utterance = {"text": args.text}
    if args.voice:
        utterance["voice"] = {"name": args.voice, "provider": args.provider}
    if args.description:
        utterance["description"] = args.description
    return utterance


def list_voices(client: HumeClient, args: argparse.Namespace) -> None:
    for voice in client.voices.list(provider=args.provider):
        print(f"{voice.name}\t{voice.id or ''}")


def synthesize(client: HumeClient, args: argparse.Namespace, logger) -> None:
    utterances = [_utterance(args)]
    if not args.stream:
        with client.tts.synthesize_file(utterances, format=args.format) as audio:
            with open(args.output, "wb") as out:
                shutil.copyfileobj(audio, out)
        logger.info(f"Wrote audio to {args.output}")
        return

    # The output is only replaced once the whole stream has arrived
    output_dir = os.path.dirname(os.path.abspath(args.output))
    partial = tempfile.NamedTemporaryFile(dir=output_dir, suffix=".partial", delete=False)
    try:
        with partial:
            client.tts.stream_file(utterances, format=args.format, chunk_callback=partial.write)
        os.replace(partial.name, args.output)
    except BaseException:
        os.unlink(partial.name)
        raise
    logger.info(f"Wrote audio to {args.output}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command line tool."""
    args = parse_args(argv)
    logger = configure_logging(args.log_level, args.log_file)

    with HumeClient(env_file=args.env_file) as client:
        try:
            if args.command == "voices":
                list_voices(client, args)
            else:
                synthesize(client, args, logger)
        except HumeAPIError as e:
            logger.error(f"Request failed: {e}")
            print(f"Error: {e}", file=sys.stderr)
            return 1
    return 0
