"""
Shared WebSocket session lifecycle for the streaming TTS and EVI chat clients.

A session moves from UNCONNECTED to CONNECTED to CLOSED and never back. It owns
its connection exclusively. Frames can be pulled one at a time (``receive`` or
``async for``) or pushed to callbacks by ``listen``, which runs each callback
inline as frames arrive.
"""

import asyncio
import inspect
import json
import logging
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Optional, Union
from urllib.parse import urlencode

import websockets
from pydantic import BaseModel
from websockets.exceptions import ConnectionClosed, ConnectionClosedOK, WebSocketException

from hume_voice.config.constants import (
    ACCESS_TOKEN_QUERY_PARAM,
    API_KEY_QUERY_PARAM,
    LOGGER_NAME,
)
from hume_voice.config.settings import HumeConfig
from hume_voice.exceptions import (
    HumeConnectionError,
    HumeSessionError,
    HumeStreamError,
    SessionClosedError,
    SessionNotConnectedError,
)

logger = logging.getLogger(LOGGER_NAME)

# Large enough for audio frames carried as base64
WS_MAX_SIZE = 16 * 1024 * 1024  # 16MB

Callback = Callable[[Any], Union[None, Awaitable[None]]]


class SessionState(str, Enum):
    """Lifecycle of a WebSocket session."""
    UNCONNECTED = "unconnected"
    CONNECTED = "connected"
    CLOSED = "closed"


class WebSocketSession:
    """
    Base class for a single WebSocket connection to a Hume streaming endpoint.

    Subclasses set ``path`` and implement ``_parse_frame`` to turn a decoded JSON
    frame into the object handed to callers.
    """

    path = ""
    session_name = "WebSocket session"

    def __init__(
        self,
        config: HumeConfig,
        on_message: Optional[Callback] = None,
        on_error: Optional[Callback] = None,
        access_token: Optional[str] = None,
    ):
        """
        Initialize the session without connecting.

        Args:
            config: Credentials and WebSocket base URL
            on_message: Called with every parsed frame during listen()
            on_error: Called with protocol and transport errors during listen()
            access_token: Token to authenticate with instead of the API key
        """
        self.config = config
        self.on_message = on_message
        self.on_error = on_error
        self.access_token = access_token
        self.websocket = None
        self.state = SessionState.UNCONNECTED

    @property
    def is_connected(self) -> bool:
        return self.state == SessionState.CONNECTED

    @property
    def is_closed(self) -> bool:
        return self.state == SessionState.CLOSED

    def _extra_params(self) -> Dict[str, Any]:
        """Endpoint-specific query parameters; None values are left out."""
        return {}

    def _query_params(self) -> Dict[str, str]:
        params: Dict[str, str] = {}
        if self.access_token:
            params[ACCESS_TOKEN_QUERY_PARAM] = self.access_token
        elif self.config.api_key:
            params[API_KEY_QUERY_PARAM] = self.config.api_key

        for key, value in self._extra_params().items():
            if value is None:
                continue
            if isinstance(value, bool):
                value = "true" if value else "false"
            params[key] = str(value)
        return params

    def build_url(self) -> str:
        """Return the full connection URL, credentials included."""
        params = self._query_params()
        url = self.config.ws_url(self.path)
        return f"{url}?{urlencode(params)}" if params else url

    def _redacted_url(self) -> str:
        params = {
            k: ("***" if k in (API_KEY_QUERY_PARAM, ACCESS_TOKEN_QUERY_PARAM) else v)
            for k, v in self._query_params().items()
        }
        url = self.config.ws_url(self.path)
        return f"{url}?{urlencode(params)}" if params else url

    async def connect(self) -> None:
        """
        Open the WebSocket connection.

        Raises:
            SessionClosedError: If the session was already closed
            HumeSessionError: If the session is already connected
            HumeConnectionError: If the handshake is rejected or the network fails
        """
        if self.state == SessionState.CLOSED:
            raise SessionClosedError(f"{self.session_name} is closed and cannot reconnect")
        if self.state == SessionState.CONNECTED:
            raise HumeSessionError(f"{self.session_name} is already connected")

        try:
            self.websocket = await websockets.connect(self.build_url(), max_size=WS_MAX_SIZE)
        except (WebSocketException, OSError, asyncio.TimeoutError) as e:
            logger.error(f"Failed to connect {self.session_name} to {self._redacted_url()}: {e}")
            raise HumeConnectionError(f"Could not connect {self.session_name}: {e}") from e

        self.state = SessionState.CONNECTED
        logger.info(f"Connected {self.session_name} to {self._redacted_url()}")

    def _require_open(self) -> None:
        if self.state == SessionState.UNCONNECTED:
            raise SessionNotConnectedError(f"{self.session_name} is not connected")
        if self.state == SessionState.CLOSED:
            raise SessionClosedError(f"{self.session_name} is closed")

    async def _send_model(self, message: BaseModel) -> None:
        """Serialize and transmit one frame."""
        self._require_open()
        payload = message.model_dump_json(exclude_none=True)
        try:
            await self.websocket.send(payload)
        except ConnectionClosed as e:
            logger.warning(f"{self.session_name} connection closed while sending: {e}")
            raise HumeConnectionError(f"{self.session_name} connection closed: {e}") from e
        logger.debug(f"Sent {type(message).__name__} frame ({len(payload)} chars)")

    def _parse_frame(self, data: Dict[str, Any]) -> Any:
        return data

    async def receive(self) -> Optional[Any]:
        """
        Wait for the next frame.

        Returns:
            The parsed frame, or None once the server has closed the connection normally

        Raises:
            SessionNotConnectedError / SessionClosedError: On a session that is not open
            HumeConnectionError: If the connection dropped abnormally
            HumeStreamError: If the frame could not be decoded or reports an error
        """
        self._require_open()
        try:
            raw = await self.websocket.recv()
        except ConnectionClosedOK:
            logger.info(f"{self.session_name} connection closed")
            return None
        except ConnectionClosed as e:
            raise HumeConnectionError(f"{self.session_name} connection lost: {e}") from e

        try:
            data = json.loads(raw)
        except ValueError as e:
            raise HumeStreamError(f"Could not decode {self.session_name} frame", raw) from e
        if not isinstance(data, dict):
            raise HumeStreamError(f"Unexpected {self.session_name} frame", data)

        logger.debug(f"Received {self.session_name} frame of type {data.get('type')!r}")
        return self._parse_frame(data)

    async def __aiter__(self):
        """Yield frames until the connection closes."""
        while self.state == SessionState.CONNECTED:
            frame = await self.receive()
            if frame is None:
                return
            yield frame

    async def listen(self) -> None:
        """
        Dispatch incoming frames to the callbacks until the connection closes.

        Frames reach ``on_message`` one at a time in arrival order. Bad frames are
        passed to ``on_error`` and listening continues; a dropped connection is
        passed to ``on_error`` and ends the loop. The session state is left as is,
        callers still call close().
        """
        while self.state == SessionState.CONNECTED:
            try:
                frame = await self.receive()
            except HumeStreamError as e:
                await self._emit_error(e)
                continue
            except HumeConnectionError as e:
                await self._emit_error(e)
                break
            except SessionClosedError:
                break

            if frame is None:
                break
            if self.on_message is not None:
                await self._emit(self.on_message, frame)

    @staticmethod
    async def _emit(callback: Callback, value: Any) -> None:
        result = callback(value)
        if inspect.isawaitable(result):
            await result

    async def _emit_error(self, error: Exception) -> None:
        if self.on_error is None:
            logger.error(f"{self.session_name} error: {error}")
            return
        await self._emit(self.on_error, error)

    async def close(self) -> None:
        """Close the connection. Closing twice, or before connecting, is a no-op."""
        if self.state == SessionState.CLOSED:
            return
        self.state = SessionState.CLOSED
        if self.websocket is None:
            return
        try:
            await self.websocket.close()
        finally:
            self.websocket = None
        logger.info(f"Closed {self.session_name}")

    async def __aenter__(self):
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
