"""
Entry point tying configuration, REST resources and streaming sessions together.

HumeClient is the one place a default configuration is built from the
environment; everything it creates receives that configuration explicitly.
"""

import logging
from pathlib import Path
from typing import Any, Optional, Union

from hume_voice.config.constants import LOGGER_NAME
from hume_voice.config.settings import HumeConfig
from hume_voice.realtime.evi_chat import EVIChat
from hume_voice.realtime.tts_stream import TTSStream
from hume_voice.services.auth import fetch_access_token
from hume_voice.services.http_client import HttpTransport
from hume_voice.services.tts import TTS
from hume_voice.services.voices import Voices

logger = logging.getLogger(LOGGER_NAME)


class HumeClient:
    """
    Client for the Hume voice APIs.

    Example:
        with HumeClient(api_key="...") as client:
            voices = client.voices.list(provider="CUSTOM_VOICE")
            result = client.tts.synthesize_json([{"text": "Hi", "voice": {"name": voices[0].name}}])
    """

    def __init__(
        self,
        config: Optional[HumeConfig] = None,
        env_file: Optional[Union[str, Path]] = None,
        **overrides: Optional[str],
    ):
        """
        Initialize the client.

        Args:
            config: Configuration to use; built from the environment when omitted
            env_file: .env file to load when building the configuration
            **overrides: Config fields (api_key, secret_key, ...) taking precedence
                over the environment
        """
        if config is None:
            config = HumeConfig.from_env(env_file=env_file, **overrides)
        elif overrides:
            values = config.model_dump()
            values.update({k: v for k, v in overrides.items() if v is not None})
            config = HumeConfig.model_validate(values)
        self.config = config
        self.transport = HttpTransport(config)
        self.voices = Voices(self.transport)
        self.tts = TTS(self.transport)
        logger.debug(f"HumeClient created with {config!r}")

    def tts_stream(self, **kwargs: Any) -> TTSStream:
        """Create an unconnected TTSStream bound to this client's configuration."""
        return TTSStream(self.config, **kwargs)

    def evi_chat(self, **kwargs: Any) -> EVIChat:
        """Create an unconnected EVIChat bound to this client's configuration."""
        return EVIChat(self.config, **kwargs)

    def fetch_access_token(self) -> str:
        """Exchange the API key and secret key for an access token."""
        return fetch_access_token(self.transport)

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> "HumeClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
