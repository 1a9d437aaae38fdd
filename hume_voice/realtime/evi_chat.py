"""
Bidirectional Empathic Voice Interface (EVI) chat over a WebSocket.

The client sends user text or audio and receives chat events (transcripts,
assistant messages, audio output, metadata). Events are delivered as parsed
models; their contents are not interpreted here.
"""

import base64
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from hume_voice.config.constants import EVI_CHAT_PATH, LOGGER_NAME
from hume_voice.config.settings import HumeConfig
from hume_voice.exceptions import HumeStreamError
from hume_voice.models.evi_schemas import (
    AssistantInput,
    AudioInput,
    ChatMetadata,
    EviEvent,
    PauseAssistantMessage,
    ResumeAssistantMessage,
    SessionSettings,
    ToolErrorMessage,
    ToolResponseMessage,
    UserInput,
    parse_evi_event,
)
from hume_voice.realtime.session import Callback, WebSocketSession

logger = logging.getLogger(LOGGER_NAME)


class EVIChat(WebSocketSession):
    """
    EVI chat session.

    Example:
        async with EVIChat(config, on_event=print) as chat:
            listener = asyncio.create_task(chat.listen())
            await chat.send_user_input("Hi, how are you?")
            await chat.send_audio_file("question.wav")
            ...
    """

    path = EVI_CHAT_PATH
    session_name = "EVI chat"

    def __init__(
        self,
        config: HumeConfig,
        on_event: Optional[Callback] = None,
        on_error: Optional[Callback] = None,
        access_token: Optional[str] = None,
        config_id: Optional[str] = None,
        config_version: Optional[int] = None,
        resumed_chat_group_id: Optional[str] = None,
        verbose_transcription: Optional[bool] = None,
    ):
        super().__init__(config, on_message=on_event, on_error=on_error, access_token=access_token)
        self.config_id = config_id
        self.config_version = config_version
        self.resumed_chat_group_id = resumed_chat_group_id
        self.verbose_transcription = verbose_transcription
        self.chat_id: Optional[str] = None
        self.chat_group_id: Optional[str] = None

    @property
    def on_event(self) -> Optional[Callback]:
        return self.on_message

    @on_event.setter
    def on_event(self, callback: Optional[Callback]) -> None:
        self.on_message = callback

    def _extra_params(self) -> Dict[str, Any]:
        return {
            "config_id": self.config_id,
            "config_version": self.config_version,
            "resumed_chat_group_id": self.resumed_chat_group_id,
            "verbose_transcription": self.verbose_transcription,
        }

    def _parse_frame(self, data: Dict[str, Any]) -> EviEvent:
        try:
            event = parse_evi_event(data)
        except ValidationError as e:
            raise HumeStreamError(f"Invalid EVI event: {e}", data) from e

        if isinstance(event, ChatMetadata):
            self.chat_id = event.chat_id
            self.chat_group_id = event.chat_group_id
            logger.info(f"EVI chat {event.chat_id} started in group {event.chat_group_id}")
        return event

    async def send_user_input(self, text: str) -> None:
        """Send a text message as the user."""
        await self._send_model(UserInput(text=text))

    async def send_audio_input(self, data: str) -> None:
        """
        Send a chunk of user audio.

        Args:
            data: Audio already encoded as base64
        """
        await self._send_model(AudioInput(data=data))

    async def send_audio_file(self, path: Union[str, Path]) -> None:
        """Read a local audio file, base64-encode it and send it as user audio."""
        audio = Path(path).read_bytes()
        logger.debug(f"Sending {len(audio)} bytes of audio from {path}")
        await self.send_audio_input(base64.b64encode(audio).decode("utf-8"))

    async def send_session_settings(
        self, settings: Optional[SessionSettings] = None, **fields: Any
    ) -> None:
        """Update session settings, from a model or from keyword fields."""
        if settings is None:
            settings = SessionSettings(**fields)
        await self._send_model(settings)

    async def send_assistant_input(self, text: str) -> None:
        """Have the assistant speak the given text."""
        await self._send_model(AssistantInput(text=text))

    async def pause_assistant(self) -> None:
        await self._send_model(PauseAssistantMessage())

    async def resume_assistant(self) -> None:
        await self._send_model(ResumeAssistantMessage())

    async def send_tool_response(self, tool_call_id: str, content: str) -> None:
        """Answer a tool call with its result."""
        await self._send_model(ToolResponseMessage(tool_call_id=tool_call_id, content=content))

    async def send_tool_error(
        self, tool_call_id: str, error: str, content: Optional[str] = None
    ) -> None:
        """Report that a tool call failed."""
        await self._send_model(
            ToolErrorMessage(tool_call_id=tool_call_id, error=error, content=content)
        )
