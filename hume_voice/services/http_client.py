"""
Authenticated HTTP transport for the Hume REST API.

HttpTransport issues requests with the configured API key and checks every
response; a non-success status is raised as HumeAPIError carrying the status and
body. Responses can be read as JSON, spooled to a temporary file, or streamed.
"""

import logging
import tempfile
from typing import IO, Any, Callable, Dict, Optional

import requests

from hume_voice.config.constants import FILE_CHUNK_SIZE, LOGGER_NAME
from hume_voice.config.settings import HumeConfig
from hume_voice.exceptions import HumeAPIError
from hume_voice.services.streaming import STREAM_MODE_BYTES, ResponseStream

logger = logging.getLogger(LOGGER_NAME)

JSON_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


class HttpTransport:
    """
    REST transport bound to one configuration.

    This class owns a ``requests.Session`` and supports three response modes:
    buffered JSON, buffered binary written to a temporary file, and streaming.
    No retries or timeouts are applied; every failure reaches the caller.
    """

    def __init__(self, config: HumeConfig, session: Optional[requests.Session] = None):
        """
        Initialize the transport.

        Args:
            config: Credentials and base URL to use
            session: Session to send requests with (a new one by default)
        """
        self.config = config
        self.session = session or requests.Session()

    def _send(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
        stream: bool = False,
    ) -> requests.Response:
        headers = dict(JSON_HEADERS)
        headers.update(self.config.auth_headers())
        url = self.config.url(path)

        logger.debug(f"{method} {url} params={params} stream={stream}")
        response = self.session.request(
            method,
            url,
            params=params,
            json=json,
            headers=headers,
            stream=stream,
        )
        self._raise_for_status(method, path, response)
        return response

    @staticmethod
    def _raise_for_status(method: str, path: str, response: requests.Response) -> None:
        if 200 <= response.status_code < 300:
            return
        try:
            body = response.text
        finally:
            response.close()
        logger.error(f"{method} {path} failed with status {response.status_code}: {body}")
        raise HumeAPIError(response.status_code, body)

    def request_json(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
    ) -> Any:
        """
        Send a request and parse the JSON response body.

        Returns:
            The decoded JSON value, or None when the body is empty

        Raises:
            HumeAPIError: If the response status is not 2xx
        """
        response = self._send(method, path, params=params, json=json)
        if not response.content:
            return None
        return response.json()

    def request_file(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
        suffix: Optional[str] = None,
    ) -> IO[bytes]:
        """
        Send a request and write the binary response body to a temporary file.

        The returned file is open for reading and positioned at the start; it is
        removed when closed.

        Raises:
            HumeAPIError: If the response status is not 2xx
        """
        response = self._send(method, path, params=params, json=json, stream=True)
        handle = tempfile.NamedTemporaryFile(suffix=suffix)
        try:
            written = 0
            for chunk in response.iter_content(chunk_size=FILE_CHUNK_SIZE):
                if chunk:
                    handle.write(chunk)
                    written += len(chunk)
            handle.flush()
            handle.seek(0)
        except BaseException:
            handle.close()
            raise
        finally:
            response.close()
        logger.debug(f"Wrote {written} bytes to {handle.name}")
        return handle

    def request_stream(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
        mode: str = STREAM_MODE_BYTES,
        decoder: Optional[Callable[[Any], Any]] = None,
    ) -> ResponseStream:
        """
        Send a request and return a stream over the response body.

        Raises:
            HumeAPIError: If the response status is not 2xx
        """
        response = self._send(method, path, params=params, json=json, stream=True)
        return ResponseStream(response, mode=mode, decoder=decoder)

    def close(self) -> None:
        """Release the underlying session."""
        self.session.close()

    def __enter__(self) -> "HttpTransport":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
