"""
Services module for the Hume REST API.

Key components:
- http_client: HttpTransport, which authenticates requests, turns non-success
  responses into HumeAPIError and reads bodies as JSON, temp files or streams.
- streaming: ResponseStream, a single-pass iterator over streamed bodies with a
  push-style for_each and cancellation through close().
- voices: The Voices resource (list, create, delete custom voices).
- tts: The TTS resource (synthesize_json, synthesize_file, stream_file, stream_json).
- auth: fetch_access_token for the OAuth client-credentials exchange.

Usage examples:
```python
from hume_voice.config import HumeConfig
from hume_voice.services import HttpTransport, TTS

config = HumeConfig.from_env()
with HttpTransport(config) as transport:
    tts = TTS(transport)
    with open("hello.mp3", "wb") as out:
        tts.stream_file(
            [{"text": "Hello", "voice": {"name": "Ava Song"}}],
            chunk_callback=out.write,
        )
```
"""

from hume_voice.services.auth import fetch_access_token
from hume_voice.services.http_client import HttpTransport
from hume_voice.services.streaming import ResponseStream
from hume_voice.services.tts import TTS
from hume_voice.services.voices import Voices
