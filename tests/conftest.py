import json
import logging
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
import requests

from hume_voice.config.constants import (
    ENV_API_KEY,
    ENV_BASE_URL,
    ENV_SECRET_KEY,
    ENV_WS_BASE_URL,
)
from hume_voice.config.settings import HumeConfig
from hume_voice.services.http_client import HttpTransport


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset logging configuration before each test"""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    logging.basicConfig(level=logging.NOTSET)
    yield


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Remove HUME_* variables (restored afterwards) and run from an empty directory."""
    for name in (ENV_API_KEY, ENV_SECRET_KEY, ENV_BASE_URL, ENV_WS_BASE_URL):
        # setenv first so the deletion, and anything dotenv writes, is undone
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def config():
    """Provide a configuration with test credentials."""
    return HumeConfig(
        api_key="test-api-key",
        secret_key="test-secret-key",
        base_url="https://api.test.hume",
        ws_base_url="wss://api.test.hume",
    )


@pytest.fixture
def make_response():
    """Build mock requests responses."""

    def _make(status=200, json_data=None, text=None, chunks=None, lines=None):
        response = MagicMock(spec=requests.Response)
        response.status_code = status
        if text is None:
            text = json.dumps(json_data) if json_data is not None else ""
        response.text = text
        response.content = text.encode("utf-8") if chunks is None else b"".join(chunks)
        response.json.return_value = json_data
        response.iter_content.side_effect = lambda chunk_size=None: iter(chunks or [])
        response.iter_lines.side_effect = lambda: iter(lines or [])
        return response

    return _make


@pytest.fixture
def http_session():
    """Mock requests session."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def transport(config, http_session):
    """Transport sending through the mock session."""
    return HttpTransport(config, session=http_session)


@pytest.fixture
def mock_ws():
    """Mock WebSocket connection."""
    return AsyncMock()


@pytest.fixture
def mock_connect(mock_ws):
    """Patch websockets.connect to hand out the mock connection."""
    with patch("websockets.connect", new=AsyncMock(return_value=mock_ws)) as connect:
        yield connect


@pytest.fixture
def sent_frames(mock_ws):
    """Return the JSON frames sent on the mock connection so far."""

    def _frames():
        return [json.loads(c.args[0]) for c in mock_ws.send.call_args_list]

    return _frames
