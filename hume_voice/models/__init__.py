"""
Models module for the request, response and frame payloads of the SDK.

Key components:
- tts_schemas: Pydantic models for voices, utterances, synthesis requests and
  results, streamed audio chunks and the TTS WebSocket frames.
- evi_schemas: Pydantic models for the EVI chat messages the client sends and
  the events it receives, with parse_evi_event to pick a model by type.

Usage examples:
```python
from hume_voice.models import Utterance, VoiceRef, VoiceProvider

utterance = Utterance(
    text="Hello there",
    voice=VoiceRef(name="Ava Song", provider=VoiceProvider.HUME_AI),
)

from hume_voice.models import parse_evi_event
event = parse_evi_event({"type": "assistant_end"})
```
"""

from hume_voice.models.evi_schemas import (
    AssistantEnd,
    AssistantInput,
    AssistantMessage,
    AudioInput,
    AudioOutput,
    AudioSettings,
    ChatMetadata,
    EviErrorMessage,
    EviEvent,
    PauseAssistantMessage,
    ResumeAssistantMessage,
    SessionSettings,
    ToolCallMessage,
    ToolErrorMessage,
    ToolResponseMessage,
    UserInput,
    UserInterruption,
    UserMessage,
    parse_evi_event,
)
from hume_voice.models.tts_schemas import (
    AudioFormatType,
    Context,
    Format,
    Generation,
    Snippet,
    SynthesisRequest,
    SynthesisResult,
    TTSChunk,
    TTSStreamInput,
    Utterance,
    Voice,
    VoiceProvider,
    VoiceRef,
    VoicesPage,
    build_synthesis_request,
)
