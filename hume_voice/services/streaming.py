"""
Lazy, single-pass iteration over streamed HTTP responses.

A ResponseStream wraps a ``requests`` response opened with ``stream=True``. It can
be consumed pull-style (``for chunk in stream``) or push-style
(``stream.for_each(callback)``), and closing it cancels the transfer.
"""

import json
import logging
from typing import Any, Callable, Iterator, Optional

import requests

from hume_voice.config.constants import LOGGER_NAME
from hume_voice.exceptions import StreamConsumedError

logger = logging.getLogger(LOGGER_NAME)

STREAM_MODE_BYTES = "bytes"
STREAM_MODE_JSON = "json"


class ResponseStream:
    """
    Finite, non-restartable sequence of chunks from a streamed response.

    In bytes mode each item is a raw chunk as it arrived on the wire. In json mode
    the body is read as newline-delimited JSON and each item is one parsed object,
    optionally passed through ``decoder``.
    """

    def __init__(
        self,
        response: requests.Response,
        mode: str = STREAM_MODE_BYTES,
        decoder: Optional[Callable[[Any], Any]] = None,
    ):
        if mode not in (STREAM_MODE_BYTES, STREAM_MODE_JSON):
            raise ValueError(f"Unknown stream mode: {mode}")
        self.response = response
        self.mode = mode
        self.decoder = decoder
        self._started = False
        self._closed = False

    def __iter__(self) -> Iterator[Any]:
        if self._started:
            raise StreamConsumedError("Response stream can only be iterated once")
        self._started = True
        return self._iterate()

    def _iterate(self) -> Iterator[Any]:
        count = 0
        try:
            for item in self._raw_items():
                if self._closed:
                    break
                count += 1
                yield item
        finally:
            logger.debug(f"Response stream finished after {count} {self.mode} chunk(s)")
            self.close()

    def _raw_items(self) -> Iterator[Any]:
        if self.mode == STREAM_MODE_BYTES:
            for chunk in self.response.iter_content(chunk_size=None):
                # Skip keep-alive chunks
                if chunk:
                    yield chunk
            return

        for line in self.response.iter_lines():
            if not line or not line.strip():
                continue
            obj = json.loads(line)
            yield self.decoder(obj) if self.decoder else obj

    def for_each(self, callback: Callable[[Any], Any]) -> int:
        """
        Invoke the callback once per chunk, in arrival order.

        Args:
            callback: Function called with each chunk

        Returns:
            int: Number of chunks delivered
        """
        delivered = 0
        for item in self:
            callback(item)
            delivered += 1
        return delivered

    def close(self) -> None:
        """Stop the stream and release the connection."""
        if self._closed:
            return
        self._closed = True
        self.response.close()

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self) -> "ResponseStream":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
