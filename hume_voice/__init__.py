"""
Hume voice SDK - client for the Hume text-to-speech and EVI APIs

This package wraps the Hume REST endpoints for voice management and speech
synthesis, and the two WebSocket protocols for low-latency streaming TTS and the
bidirectional Empathic Voice Interface (EVI) chat.

Key Components:
- config: HumeConfig (explicit credentials), constants and logging setup
- models: Pydantic models for requests, responses and WebSocket frames
- services: HTTP transport, response streams and the Voices / TTS resources
- realtime: TTSStream and EVIChat WebSocket sessions
- client: HumeClient, building a configuration from the environment and
  exposing every resource

Getting Started:
1. Set up environment variables (or a .env file):
   - HUME_API_KEY: Your Hume API key
   - HUME_SECRET_KEY: Your secret key (only needed for access tokens)
   - LOG_LEVEL: Logging level for the command line (default INFO)

2. Use the client:
   ```python
   from hume_voice import HumeClient

   with HumeClient() as client:
       audio = client.tts.synthesize_file(
           [{"text": "Hello!", "voice": {"name": "Ava Song", "provider": "HUME_AI"}}],
           format="wav",
       )
   ```

3. Or the command line:
   ```bash
   python -m hume_voice synthesize "Hello!" --voice "Ava Song" --output hello.mp3
   ```
"""

from hume_voice.client import HumeClient
from hume_voice.config.settings import HumeConfig
from hume_voice.exceptions import (
    HumeAPIError,
    HumeConnectionError,
    HumeError,
    HumeSessionError,
    HumeStreamError,
    SessionClosedError,
    SessionNotConnectedError,
    StreamConsumedError,
)
from hume_voice.models.tts_schemas import Utterance, VoiceProvider, VoiceRef
from hume_voice.realtime.evi_chat import EVIChat
from hume_voice.realtime.tts_stream import TTSStream

__version__ = "1.0.0"
