"""
Unit tests for the EVI chat WebSocket session.
"""

import base64
import json
from urllib.parse import parse_qs, urlsplit

import pytest
from websockets.exceptions import ConnectionClosedOK

from hume_voice.exceptions import HumeStreamError, SessionClosedError, SessionNotConnectedError
from hume_voice.models.evi_schemas import (
    AssistantEnd,
    AssistantMessage,
    AudioOutput,
    ChatMetadata,
    EviErrorMessage,
    EviEvent,
    SessionSettings,
)
from hume_voice.realtime.evi_chat import EVIChat


@pytest.fixture
def chat(config):
    return EVIChat(config)


@pytest.mark.asyncio
async def test_connect_query_params(config, mock_connect):
    chat = EVIChat(
        config,
        config_id="cfg-1",
        config_version=3,
        resumed_chat_group_id="group-9",
        verbose_transcription=False,
    )

    await chat.connect()

    parts = urlsplit(mock_connect.call_args.args[0])
    assert parts.path == "/v0/evi/chat"
    assert parse_qs(parts.query) == {
        "api_key": ["test-api-key"],
        "config_id": ["cfg-1"],
        "config_version": ["3"],
        "resumed_chat_group_id": ["group-9"],
        "verbose_transcription": ["false"],
    }


@pytest.mark.asyncio
async def test_send_user_input(chat, mock_connect, sent_frames):
    await chat.connect()

    await chat.send_user_input("How are you?")

    assert sent_frames() == [{"type": "user_input", "text": "How are you?"}]


@pytest.mark.asyncio
async def test_send_user_input_sends_text_as_given(chat, mock_connect, sent_frames):
    await chat.connect()

    await chat.send_user_input("   ")

    assert sent_frames() == [{"type": "user_input", "text": "   "}]


@pytest.mark.asyncio
async def test_send_audio_input(chat, mock_connect, sent_frames):
    await chat.connect()

    await chat.send_audio_input("UklGRg==")

    assert sent_frames() == [{"type": "audio_input", "data": "UklGRg=="}]


@pytest.mark.asyncio
@pytest.mark.parametrize("content", [b"\x00", b"RIFF....WAVEfmt " + bytes(range(256)), b"x" * 10000])
async def test_send_audio_file_encodes_contents(chat, mock_connect, sent_frames, tmp_path, content):
    """The audio frame carries the base64 of the whole file."""
    path = tmp_path / "question.wav"
    path.write_bytes(content)
    await chat.connect()

    await chat.send_audio_file(path)

    frames = sent_frames()
    assert len(frames) == 1
    assert frames[0]["type"] == "audio_input"
    assert frames[0]["data"] == base64.b64encode(content).decode("utf-8")


@pytest.mark.asyncio
async def test_send_audio_file_missing(chat, mock_connect, mock_ws, tmp_path):
    await chat.connect()

    with pytest.raises(FileNotFoundError):
        await chat.send_audio_file(tmp_path / "missing.wav")
    mock_ws.send.assert_not_called()


@pytest.mark.asyncio
async def test_control_messages(chat, mock_connect, sent_frames):
    await chat.connect()

    await chat.send_session_settings(system_prompt="Be brief")
    await chat.send_session_settings(SessionSettings(custom_session_id="s-1"))
    await chat.send_assistant_input("Let me check.")
    await chat.pause_assistant()
    await chat.resume_assistant()
    await chat.send_tool_response("t-1", '{"temp": 20}')
    await chat.send_tool_error("t-2", "timeout")

    assert sent_frames() == [
        {"type": "session_settings", "system_prompt": "Be brief"},
        {"type": "session_settings", "custom_session_id": "s-1"},
        {"type": "assistant_input", "text": "Let me check."},
        {"type": "pause_assistant_message"},
        {"type": "resume_assistant_message"},
        {"type": "tool_response", "tool_call_id": "t-1", "content": '{"temp": 20}'},
        {"type": "tool_error", "tool_call_id": "t-2", "error": "timeout"},
    ]


@pytest.mark.asyncio
async def test_sends_require_open_session(chat, mock_connect):
    with pytest.raises(SessionNotConnectedError):
        await chat.send_user_input("Hi")

    await chat.connect()
    await chat.close()

    with pytest.raises(SessionClosedError):
        await chat.send_user_input("Hi")
    with pytest.raises(SessionClosedError):
        await chat.send_audio_input("AAAA")


@pytest.mark.asyncio
async def test_listen_delivers_events_in_order(config, mock_connect, mock_ws):
    events = []
    errors = []
    mock_ws.recv.side_effect = [
        json.dumps({"type": "chat_metadata", "chat_id": "chat-1", "chat_group_id": "group-1"}),
        json.dumps({"type": "assistant_message", "message": {"role": "assistant", "content": "Hi"}}),
        json.dumps({"type": "audio_output", "id": "a-1", "data": "AAAA"}),
        json.dumps({"type": "error", "code": "I0100", "slug": "uncaught", "message": "oops"}),
        json.dumps({"type": "some_future_event", "detail": 1}),
        json.dumps({"type": "assistant_end"}),
        ConnectionClosedOK(None, None),
    ]
    chat = EVIChat(config, on_event=events.append, on_error=errors.append)

    await chat.connect()
    await chat.listen()

    assert [type(e) for e in events] == [
        ChatMetadata,
        AssistantMessage,
        AudioOutput,
        EviErrorMessage,
        EviEvent,
        AssistantEnd,
    ]
    assert errors == []
    assert chat.chat_id == "chat-1"
    assert chat.chat_group_id == "group-1"


@pytest.mark.asyncio
async def test_listen_invalid_event_goes_to_error_callback(config, mock_connect, mock_ws):
    events = []
    errors = []
    mock_ws.recv.side_effect = [
        json.dumps({"type": "assistant_message"}),
        json.dumps(["not", "an", "object"]),
        json.dumps({"type": "assistant_end"}),
        ConnectionClosedOK(None, None),
    ]
    chat = EVIChat(config, on_event=events.append, on_error=errors.append)

    await chat.connect()
    await chat.listen()

    assert [type(e) for e in events] == [AssistantEnd]
    assert [type(e) for e in errors] == [HumeStreamError, HumeStreamError]


@pytest.mark.asyncio
async def test_on_event_property(config):
    handler = lambda event: None  # noqa: E731
    chat = EVIChat(config)

    chat.on_event = handler

    assert chat.on_message is handler
