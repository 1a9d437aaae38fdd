"""
Low-latency text-to-speech over a WebSocket.

Text is pushed incrementally with send_input, flush asks the server to generate
audio for what it has buffered, and audio comes back as TTSChunk frames.
"""

import logging
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from hume_voice.config.constants import LOGGER_NAME, TTS_STREAM_INPUT_PATH
from hume_voice.config.settings import HumeConfig
from hume_voice.exceptions import HumeStreamError
from hume_voice.models.tts_schemas import (
    TTSChunk,
    TTSStreamClose,
    TTSStreamFlush,
    TTSStreamInput,
    VoiceRef,
)
from hume_voice.realtime.session import Callback, WebSocketSession

logger = logging.getLogger(LOGGER_NAME)

VoiceInput = Union[VoiceRef, Dict[str, Any], str, None]


def _voice_ref(voice: VoiceInput) -> Optional[VoiceRef]:
    if voice is None or isinstance(voice, VoiceRef):
        return voice
    if isinstance(voice, str):
        return VoiceRef(name=voice)
    return VoiceRef.model_validate(voice)


class TTSStream(WebSocketSession):
    """
    Streaming TTS session.

    Example:
        async with TTSStream(config, on_chunk=handle_chunk) as stream:
            listener = asyncio.create_task(stream.listen())
            await stream.send_input("Hello there.", voice="Ava Song")
            await stream.flush()
            await stream.end_input()
            await listener
    """

    path = TTS_STREAM_INPUT_PATH
    session_name = "TTS stream"

    def __init__(
        self,
        config: HumeConfig,
        on_chunk: Optional[Callback] = None,
        on_error: Optional[Callback] = None,
        access_token: Optional[str] = None,
        format_type: Optional[str] = None,
        instant_mode: Optional[bool] = None,
        strip_headers: Optional[bool] = None,
        no_binary: bool = True,
    ):
        super().__init__(config, on_message=on_chunk, on_error=on_error, access_token=access_token)
        self.format_type = format_type
        self.instant_mode = instant_mode
        self.strip_headers = strip_headers
        self.no_binary = no_binary

    @property
    def on_chunk(self) -> Optional[Callback]:
        return self.on_message

    @on_chunk.setter
    def on_chunk(self, callback: Optional[Callback]) -> None:
        self.on_message = callback

    def _extra_params(self) -> Dict[str, Any]:
        return {
            "format_type": self.format_type,
            "instant_mode": self.instant_mode,
            "strip_headers": self.strip_headers,
            "no_binary": self.no_binary,
        }

    def _parse_frame(self, data: Dict[str, Any]) -> TTSChunk:
        if data.get("type") == "error":
            raise HumeStreamError(data.get("message") or "TTS stream error", data)
        try:
            return TTSChunk.model_validate(data)
        except ValidationError as e:
            raise HumeStreamError(f"Invalid TTS chunk: {e}", data) from e

    async def send_input(
        self,
        text: str,
        voice: VoiceInput = None,
        description: Optional[str] = None,
        speed: Optional[float] = None,
        trailing_silence: Optional[float] = None,
    ) -> None:
        """
        Send a piece of text to speak. May be called repeatedly to stream text.

        Args:
            text: Text to append to the input
            voice: VoiceRef, dict, or voice name
            description: Acting instructions
            speed: Speaking rate
            trailing_silence: Seconds of silence after the text
        """
        message = TTSStreamInput(
            text=text,
            voice=_voice_ref(voice),
            description=description,
            speed=speed,
            trailing_silence=trailing_silence,
        )
        await self._send_model(message)

    async def flush(self) -> None:
        """Ask the server to generate audio for all buffered input."""
        await self._send_model(TTSStreamFlush())
        logger.debug("Flushed TTS stream input")

    async def end_input(self) -> None:
        """Tell the server no more input follows; it closes once audio is done."""
        await self._send_model(TTSStreamClose())
        logger.debug("Ended TTS stream input")
