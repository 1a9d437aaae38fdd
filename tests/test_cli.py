"""
Unit tests for the command line tool.
"""

from unittest.mock import MagicMock, patch

import pytest

from hume_voice.cli import main, parse_args
from hume_voice.exceptions import HumeAPIError
from hume_voice.models.tts_schemas import Voice


@pytest.fixture
def logging_setup():
    with patch("hume_voice.cli.configure_logging") as configure:
        yield configure


@pytest.fixture
def mock_client(logging_setup):
    """Patch HumeClient in the CLI and hand back the instance."""
    with patch("hume_voice.cli.HumeClient") as client_cls:
        client = MagicMock()
        client_cls.return_value.__enter__.return_value = client
        yield client


def test_parse_args_defaults():
    args = parse_args(["synthesize", "Hello", "--output", "out.mp3"])

    assert args.command == "synthesize"
    assert args.format == "mp3"
    assert args.provider == "HUME_AI"
    assert args.stream is False


def test_parse_args_requires_command():
    with pytest.raises(SystemExit):
        parse_args([])


def test_voices_command(mock_client, capsys):
    mock_client.voices.list.return_value = [Voice(id="v-1", name="Ava Song")]

    assert main(["voices", "--provider", "CUSTOM_VOICE"]) == 0

    mock_client.voices.list.assert_called_once_with(provider="CUSTOM_VOICE")
    assert "Ava Song\tv-1" in capsys.readouterr().out


def test_synthesize_stream_command(mock_client, tmp_path):
    output = tmp_path / "hello.wav"

    def fake_stream(utterances, format, chunk_callback):
        for chunk in (b"RIFF", b"data"):
            chunk_callback(chunk)

    mock_client.tts.stream_file.side_effect = fake_stream

    code = main(
        ["synthesize", "Hello", "--output", str(output), "--voice", "Kora", "--format", "wav", "--stream"]
    )

    assert code == 0
    assert output.read_bytes() == b"RIFFdata"
    utterances = mock_client.tts.stream_file.call_args.args[0]
    assert utterances == [{"text": "Hello", "voice": {"name": "Kora", "provider": "HUME_AI"}}]


def test_synthesize_file_command(mock_client, tmp_path):
    output = tmp_path / "hello.mp3"
    audio = tmp_path / "spooled.mp3"
    audio.write_bytes(b"ID3audio")
    mock_client.tts.synthesize_file.side_effect = lambda utterances, format: open(audio, "rb")

    assert main(["synthesize", "Hello", "--output", str(output)]) == 0

    assert output.read_bytes() == b"ID3audio"


def test_api_error_exit_code(mock_client, capsys):
    mock_client.voices.list.side_effect = HumeAPIError(401, "unauthorized")

    assert main(["voices"]) == 1

    assert "401" in capsys.readouterr().err


def test_failed_synthesis_keeps_existing_output(mock_client, tmp_path):
    output = tmp_path / "keep.mp3"
    output.write_bytes(b"previous audio")
    mock_client.tts.synthesize_file.side_effect = HumeAPIError(401, "unauthorized")

    assert main(["synthesize", "Hello", "--output", str(output)]) == 1

    assert output.read_bytes() == b"previous audio"


def test_failed_stream_keeps_existing_output(mock_client, tmp_path):
    output = tmp_path / "keep.mp3"
    output.write_bytes(b"previous audio")

    def failing_stream(utterances, format, chunk_callback):
        chunk_callback(b"half")
        raise HumeAPIError(500, "generation failed")

    mock_client.tts.stream_file.side_effect = failing_stream

    assert main(["synthesize", "Hello", "--output", str(output), "--stream"]) == 1

    assert output.read_bytes() == b"previous audio"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["keep.mp3"]


def test_failed_synthesis_creates_no_output(mock_client, tmp_path):
    output = tmp_path / "new.mp3"
    mock_client.tts.synthesize_file.side_effect = HumeAPIError(404, "voice not found")

    assert main(["synthesize", "Hello", "--output", str(output), "--voice", "Nobody"]) == 1

    assert not output.exists()


def test_logging_options(mock_client, logging_setup, tmp_path):
    log_file = str(tmp_path / "cli.log")
    mock_client.voices.list.return_value = []

    assert main(["--log-level", "DEBUG", "--log-file", log_file, "voices"]) == 0

    logging_setup.assert_called_once_with("DEBUG", log_file)
