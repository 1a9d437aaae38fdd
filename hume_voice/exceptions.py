"""
Exception hierarchy for the Hume voice SDK.

REST failures are raised synchronously as HumeAPIError. WebSocket sessions raise
HumeSessionError subclasses for misuse (sending before connect or after close)
and hand transport or protocol failures to the session's error callback.
"""

from typing import Any, Optional


class HumeError(Exception):
    """Base class for every error raised by the package."""


class HumeAPIError(HumeError):
    """A REST call returned a non-success status."""

    def __init__(self, status: int, body: str):
        self.status = status
        self.body = body
        super().__init__(f"Hume API returned {status}: {body}")


class StreamConsumedError(HumeError):
    """A response stream was iterated after it had already been consumed."""


class HumeSessionError(HumeError):
    """Base class for WebSocket session errors."""


class SessionNotConnectedError(HumeSessionError):
    """An operation needed an open connection but connect() was never called."""


class SessionClosedError(HumeSessionError):
    """An operation was attempted on a session that has been closed."""


class HumeConnectionError(HumeSessionError):
    """The WebSocket handshake was rejected or the connection failed."""


class HumeStreamError(HumeSessionError):
    """The server sent an error frame or a frame that could not be decoded."""

    def __init__(self, message: str, payload: Optional[Any] = None):
        self.payload = payload
        super().__init__(message)
