"""
Realtime module for the WebSocket streaming protocols.

Key components:
- session: WebSocketSession, the shared unconnected/connected/closed lifecycle,
  frame decoding, pull-style iteration and the callback dispatch loop.
- tts_stream: TTSStream, pushing text in and receiving audio chunks out.
- evi_chat: EVIChat, the bidirectional Empathic Voice Interface chat.

Usage examples:
```python
import asyncio
from hume_voice.config import HumeConfig
from hume_voice.realtime import EVIChat

async def chat():
    async with EVIChat(HumeConfig.from_env()) as session:
        await session.send_user_input("Hello!")
        async for event in session:
            print(event.type)
            if event.type == "assistant_end":
                break

asyncio.run(chat())
```
"""

from hume_voice.realtime.evi_chat import EVIChat
from hume_voice.realtime.session import SessionState, WebSocketSession
from hume_voice.realtime.tts_stream import TTSStream
