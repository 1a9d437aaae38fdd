"""
Client configuration for the Hume voice SDK.

HumeConfig is an explicit, immutable settings object handed to every resource
and session. The environment is only consulted by HumeConfig.from_env, which is
the single place a default configuration gets built.
"""

import logging
import os
from pathlib import Path
from typing import Dict, Optional, Union

import dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from hume_voice.config.constants import (
    API_KEY_HEADER,
    DEFAULT_BASE_URL,
    DEFAULT_WS_BASE_URL,
    ENV_API_KEY,
    ENV_BASE_URL,
    ENV_SECRET_KEY,
    ENV_WS_BASE_URL,
    LOGGER_NAME,
)

logger = logging.getLogger(LOGGER_NAME)


class HumeConfig(BaseModel):
    """Credentials and service locations shared by REST resources and WebSocket sessions."""

    model_config = ConfigDict(frozen=True)

    api_key: Optional[str] = Field(None, description="API key sent with every request")
    secret_key: Optional[str] = Field(
        None, description="Secret key, used only for the access token exchange"
    )
    base_url: str = Field(DEFAULT_BASE_URL, description="Root URL of the REST API")
    ws_base_url: str = Field(
        DEFAULT_WS_BASE_URL, description="Root URL of the WebSocket endpoints"
    )

    @field_validator("base_url", "ws_base_url")
    def strip_trailing_slash(cls, v):
        """Normalize service URLs so paths can be appended directly."""
        return v.rstrip("/")

    @classmethod
    def from_env(
        cls,
        env_file: Optional[Union[str, Path]] = None,
        **overrides: Optional[str],
    ) -> "HumeConfig":
        """
        Build a configuration from the environment.

        A .env file is loaded first when present (without overriding variables
        already set), then the HUME_* variables are read. Keyword arguments with
        a value other than None win over the environment.

        Args:
            env_file: Path of the .env file to load (default: ./.env)
            **overrides: Explicit field values

        Returns:
            HumeConfig: The resulting configuration
        """
        env_path = Path(env_file) if env_file else Path(".") / ".env"
        if env_path.exists():
            dotenv.load_dotenv(env_path)
            logger.debug(f"Loaded environment from {env_path}")

        values = {
            "api_key": os.getenv(ENV_API_KEY),
            "secret_key": os.getenv(ENV_SECRET_KEY),
            "base_url": os.getenv(ENV_BASE_URL, DEFAULT_BASE_URL),
            "ws_base_url": os.getenv(ENV_WS_BASE_URL, DEFAULT_WS_BASE_URL),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})

        config = cls(**values)
        if not config.api_key:
            # Not an error locally: the service rejects the request instead
            logger.warning(f"No API key configured ({ENV_API_KEY} is not set)")
        return config

    def auth_headers(self) -> Dict[str, str]:
        """Return the authentication headers for REST requests."""
        if not self.api_key:
            return {}
        return {API_KEY_HEADER: self.api_key}

    def url(self, path: str) -> str:
        """Join a REST endpoint path onto the base URL."""
        return f"{self.base_url}{path}"

    def ws_url(self, path: str) -> str:
        """Join a WebSocket endpoint path onto the WebSocket base URL."""
        return f"{self.ws_base_url}{path}"

    def __repr__(self) -> str:
        # Keep credentials out of logs and tracebacks
        return (
            f"HumeConfig(api_key={'***' if self.api_key else None}, "
            f"secret_key={'***' if self.secret_key else None}, "
            f"base_url={self.base_url!r}, ws_base_url={self.ws_base_url!r})"
        )
