"""
Pydantic models for the Empathic Voice Interface (EVI) chat protocol.

Outgoing messages are tagged by a literal ``type`` field. Incoming events are
parsed into the model registered for their tag; unknown tags still parse into
the generic EviEvent so the chat keeps delivering them untouched.
"""

import logging
from typing import Any, Dict, List, Literal, Optional, Type

from pydantic import BaseModel, ConfigDict, Field

from hume_voice.config.constants import (
    EVI_EVENT_ASSISTANT_END,
    EVI_EVENT_ASSISTANT_MESSAGE,
    EVI_EVENT_AUDIO_OUTPUT,
    EVI_EVENT_CHAT_METADATA,
    EVI_EVENT_ERROR,
    EVI_EVENT_TOOL_CALL,
    EVI_EVENT_USER_INTERRUPTION,
    EVI_EVENT_USER_MESSAGE,
    LOGGER_NAME,
)

logger = logging.getLogger(LOGGER_NAME)


# Outgoing messages
class UserInput(BaseModel):
    """Text the user typed, spoken to the assistant as if said aloud."""

    type: Literal["user_input"] = "user_input"
    text: str = Field(..., description="User text")


class AudioInput(BaseModel):
    """A chunk of user audio, base64-encoded."""

    type: Literal["audio_input"] = "audio_input"
    data: str = Field(..., description="Base64-encoded audio data")


class AssistantInput(BaseModel):
    """Text the assistant should speak verbatim."""

    type: Literal["assistant_input"] = "assistant_input"
    text: str


class AudioSettings(BaseModel):
    """Format of the audio the client streams in."""

    encoding: str = "linear16"
    sample_rate: int
    channels: int = 1


class SessionSettings(BaseModel):
    """Per-session overrides of the chat configuration."""

    type: Literal["session_settings"] = "session_settings"
    system_prompt: Optional[str] = None
    context: Optional[Dict[str, Any]] = None
    audio: Optional[AudioSettings] = None
    language_model_api_key: Optional[str] = None
    tools: Optional[List[Dict[str, Any]]] = None
    builtin_tools: Optional[List[Dict[str, Any]]] = None
    variables: Optional[Dict[str, Any]] = None
    custom_session_id: Optional[str] = None


class PauseAssistantMessage(BaseModel):
    """Stop the assistant from responding until resumed."""

    type: Literal["pause_assistant_message"] = "pause_assistant_message"


class ResumeAssistantMessage(BaseModel):
    """Let a paused assistant respond again."""

    type: Literal["resume_assistant_message"] = "resume_assistant_message"


class ToolResponseMessage(BaseModel):
    """Result of a tool the assistant asked the client to run."""

    type: Literal["tool_response"] = "tool_response"
    tool_call_id: str
    content: str


class ToolErrorMessage(BaseModel):
    """Failure of a tool the assistant asked the client to run."""

    type: Literal["tool_error"] = "tool_error"
    tool_call_id: str
    error: str
    content: Optional[str] = None


# Incoming events
class EviEvent(BaseModel):
    """Any event received on the chat socket, fields kept as sent."""

    model_config = ConfigDict(extra="allow")

    type: str


class ChatMessage(BaseModel):
    """Role and text of a transcript message."""

    model_config = ConfigDict(extra="allow")

    role: str
    content: Optional[str] = None


class ChatMetadata(EviEvent):
    type: Literal["chat_metadata"] = "chat_metadata"
    chat_id: str
    chat_group_id: str
    request_id: Optional[str] = None


class UserMessage(EviEvent):
    type: Literal["user_message"] = "user_message"
    message: ChatMessage
    models: Optional[Dict[str, Any]] = None
    from_text: bool = False
    interim: bool = False


class AssistantMessage(EviEvent):
    type: Literal["assistant_message"] = "assistant_message"
    id: Optional[str] = None
    message: ChatMessage
    models: Optional[Dict[str, Any]] = None
    from_text: bool = False


class AudioOutput(EviEvent):
    """Assistant speech; ``data`` is base64-encoded audio."""

    type: Literal["audio_output"] = "audio_output"
    id: Optional[str] = None
    index: Optional[int] = None
    data: str


class AssistantEnd(EviEvent):
    type: Literal["assistant_end"] = "assistant_end"


class UserInterruption(EviEvent):
    type: Literal["user_interruption"] = "user_interruption"
    time: Optional[int] = None


class ToolCallMessage(EviEvent):
    type: Literal["tool_call"] = "tool_call"
    name: str
    tool_call_id: str
    parameters: str = "{}"
    response_required: bool = True


class EviErrorMessage(EviEvent):
    type: Literal["error"] = "error"
    code: Optional[str] = None
    slug: Optional[str] = None
    message: Optional[str] = None


EVENT_MODELS: Dict[str, Type[EviEvent]] = {
    EVI_EVENT_CHAT_METADATA: ChatMetadata,
    EVI_EVENT_USER_MESSAGE: UserMessage,
    EVI_EVENT_ASSISTANT_MESSAGE: AssistantMessage,
    EVI_EVENT_AUDIO_OUTPUT: AudioOutput,
    EVI_EVENT_ASSISTANT_END: AssistantEnd,
    EVI_EVENT_USER_INTERRUPTION: UserInterruption,
    EVI_EVENT_TOOL_CALL: ToolCallMessage,
    EVI_EVENT_ERROR: EviErrorMessage,
}


def parse_evi_event(data: Dict[str, Any]) -> EviEvent:
    """
    Parse a decoded chat frame into its event model.

    Args:
        data: The decoded JSON object

    Returns:
        EviEvent: The model registered for the frame's type, or a generic
        EviEvent for types without one

    Raises:
        pydantic.ValidationError: If the frame has no type, or a known type
        is missing required fields
    """
    model = EVENT_MODELS.get(data.get("type"))
    if model is None:
        logger.debug(f"No model for EVI event type {data.get('type')!r}, using EviEvent")
        return EviEvent.model_validate(data)
    return model.model_validate(data)
