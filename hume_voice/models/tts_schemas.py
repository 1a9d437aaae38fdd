"""
Pydantic models for the text-to-speech and voice management payloads.

Request models validate caller input at the boundary and serialize to the JSON
bodies the REST endpoints expect. Response models keep any extra fields the
service returns so nothing is lost when the API grows.
"""

import base64
from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from hume_voice.config.constants import AUDIO_FORMAT_MP3, AUDIO_FORMAT_PCM, AUDIO_FORMAT_WAV


class VoiceProvider(str, Enum):
    """Where a voice lives: the shared library or the caller's saved voices."""
    HUME_AI = "HUME_AI"
    CUSTOM_VOICE = "CUSTOM_VOICE"


class AudioFormatType(str, Enum):
    """Audio encodings the service can return."""
    MP3 = AUDIO_FORMAT_MP3
    WAV = AUDIO_FORMAT_WAV
    PCM = AUDIO_FORMAT_PCM


# Request models
class VoiceRef(BaseModel):
    """Reference to a voice by name or id, embedded in utterances."""

    name: Optional[str] = Field(None, description="Voice name")
    id: Optional[str] = Field(None, description="Voice id")
    provider: VoiceProvider = Field(
        VoiceProvider.HUME_AI, description="Library the voice belongs to"
    )

    @model_validator(mode="after")
    def check_name_or_id(self):
        """Require at least one of name and id."""
        if not self.name and not self.id:
            raise ValueError("A voice reference needs a name or an id")
        return self


class Utterance(BaseModel):
    """One unit of text plus voice selection submitted for synthesis."""

    text: str = Field(..., description="Text to speak")
    voice: Optional[VoiceRef] = Field(None, description="Voice to speak with")
    description: Optional[str] = Field(
        None, description="Acting instructions or a prompt for a generated voice"
    )
    speed: Optional[float] = Field(None, ge=0.25, le=3.0, description="Speaking rate")
    trailing_silence: Optional[float] = Field(
        None, ge=0.0, le=5.0, description="Seconds of silence appended"
    )


class Format(BaseModel):
    """Output audio format."""

    type: AudioFormatType = Field(AudioFormatType.MP3, description="Audio encoding")


class Context(BaseModel):
    """Prior generation or utterances used to keep prosody consistent."""

    generation_id: Optional[str] = None
    utterances: Optional[List[Utterance]] = None


class SynthesisRequest(BaseModel):
    """Body of every TTS synthesis endpoint."""

    utterances: List[Utterance] = Field(..., description="Ordered utterances")
    format: Format = Field(default_factory=Format)
    num_generations: Optional[int] = Field(None, ge=1, le=5)
    context: Optional[Context] = None
    split_utterances: Optional[bool] = None
    strip_headers: Optional[bool] = None
    instant_mode: Optional[bool] = None

    @field_validator("utterances")
    def validate_utterances(cls, v):
        """Validate that there is at least one utterance."""
        if not v:
            raise ValueError("At least one utterance required")
        return v

    @field_validator("format", mode="before")
    def coerce_format(cls, v):
        """Accept a bare format name such as "wav"."""
        if isinstance(v, (str, AudioFormatType)):
            return {"type": v}
        return v

    def payload(self) -> Dict[str, Any]:
        """Return the JSON body, leaving out unset options."""
        return self.model_dump(mode="json", exclude_none=True)


# Response models
class Voice(BaseModel):
    """A voice record returned by the voices endpoints."""

    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    name: str
    provider: Optional[VoiceProvider] = None


class VoicesPage(BaseModel):
    """One page of the voice listing."""

    model_config = ConfigDict(extra="allow")

    voices_page: List[Voice] = Field(default_factory=list)
    page_number: int = 0
    page_size: Optional[int] = None
    total_pages: int = 1


def _decode(audio: Optional[str]) -> Optional[bytes]:
    if audio is None:
        return None
    return base64.b64decode(audio)


class Snippet(BaseModel):
    """Sub-segment of a generation's audio."""

    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    text: Optional[str] = None
    generation_id: Optional[str] = None
    utterance_index: Optional[int] = None
    audio: Optional[str] = None

    def decode_audio(self) -> Optional[bytes]:
        return _decode(self.audio)


class Generation(BaseModel):
    """One synthesis result with its audio inline as base64."""

    model_config = ConfigDict(extra="allow")

    generation_id: str
    audio: str = Field(..., description="Base64-encoded audio")
    duration: Optional[float] = None
    file_size: Optional[int] = None
    encoding: Optional[Dict[str, Any]] = None
    snippets: List[List[Snippet]] = Field(default_factory=list)

    def decode_audio(self) -> bytes:
        """Return the raw audio bytes of the generation."""
        return base64.b64decode(self.audio)


class SynthesisResult(BaseModel):
    """Response of the JSON synthesis endpoint."""

    model_config = ConfigDict(extra="allow")

    generations: List[Generation]
    request_id: Optional[str] = None


class TTSChunk(BaseModel):
    """One streamed piece of audio, from the JSON stream or the TTS WebSocket."""

    model_config = ConfigDict(extra="allow")

    type: Optional[str] = None
    generation_id: Optional[str] = None
    snippet_id: Optional[str] = None
    audio: Optional[str] = Field(None, description="Base64-encoded audio, if any")
    audio_format: Optional[str] = None
    is_last_chunk: bool = False
    chunk_index: Optional[int] = None
    text: Optional[str] = None
    utterance_index: Optional[int] = None

    def decode_audio(self) -> Optional[bytes]:
        """Return the chunk's audio bytes, or None when it carries none."""
        return _decode(self.audio)


# TTS WebSocket frames
class TTSStreamInput(BaseModel):
    """Text frame sent on the TTS input stream."""

    text: str
    voice: Optional[VoiceRef] = None
    description: Optional[str] = None
    speed: Optional[float] = Field(None, ge=0.25, le=3.0)
    trailing_silence: Optional[float] = Field(None, ge=0.0, le=5.0)


class TTSStreamFlush(BaseModel):
    """Control frame asking the server to generate audio for buffered text."""

    flush: Literal[True] = True


class TTSStreamClose(BaseModel):
    """Control frame marking the end of input."""

    close: Literal[True] = True


UtteranceInput = Union[Utterance, Dict[str, Any]]
FormatInput = Union[Format, AudioFormatType, str, Dict[str, Any], None]


def build_synthesis_request(
    utterances: Sequence[UtteranceInput],
    format: FormatInput = None,
    **options: Any,
) -> SynthesisRequest:
    """
    Validate caller input into a SynthesisRequest.

    Args:
        utterances: Utterance models or plain dicts
        format: Format model, format name, dict or None for mp3
        **options: num_generations, context, split_utterances, strip_headers, instant_mode

    Returns:
        SynthesisRequest: The validated request
    """
    if format is None:
        format = AUDIO_FORMAT_MP3
    options = {k: v for k, v in options.items() if v is not None}
    return SynthesisRequest(utterances=list(utterances), format=format, **options)
