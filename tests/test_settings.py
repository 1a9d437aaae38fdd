import pytest
from pydantic import ValidationError

from hume_voice.config.constants import API_KEY_HEADER, DEFAULT_BASE_URL, DEFAULT_WS_BASE_URL
from hume_voice.config.settings import HumeConfig


def test_from_env_reads_api_key(clean_env, monkeypatch):
    """The environment variable supplies the API key."""
    monkeypatch.setenv("HUME_API_KEY", "env-key")

    config = HumeConfig.from_env()

    assert config.api_key == "env-key"
    assert config.secret_key is None
    assert config.base_url == DEFAULT_BASE_URL
    assert config.ws_base_url == DEFAULT_WS_BASE_URL


def test_from_env_explicit_values_win(clean_env, monkeypatch):
    """Keyword arguments override the environment; None does not."""
    monkeypatch.setenv("HUME_API_KEY", "env-key")
    monkeypatch.setenv("HUME_SECRET_KEY", "env-secret")

    config = HumeConfig.from_env(api_key="explicit-key", secret_key=None)

    assert config.api_key == "explicit-key"
    assert config.secret_key == "env-secret"


def test_from_env_loads_env_file(clean_env):
    """A .env file is loaded when given."""
    env_file = clean_env / "hume.env"
    env_file.write_text("HUME_API_KEY=file-key\nHUME_BASE_URL=https://example.test/\n")

    config = HumeConfig.from_env(env_file=env_file)

    assert config.api_key == "file-key"
    assert config.base_url == "https://example.test"


def test_from_env_without_key_is_not_an_error(clean_env):
    """A missing key is left for the service to reject."""
    config = HumeConfig.from_env()

    assert config.api_key is None
    assert config.auth_headers() == {}


def test_auth_headers(config):
    assert config.auth_headers() == {API_KEY_HEADER: "test-api-key"}


def test_urls(config):
    assert config.url("/v0/tts") == "https://api.test.hume/v0/tts"
    assert config.ws_url("/v0/evi/chat") == "wss://api.test.hume/v0/evi/chat"


def test_repr_hides_credentials(config):
    text = repr(config)
    assert "test-api-key" not in text
    assert "test-secret-key" not in text
    assert "api.test.hume" in text


def test_config_is_immutable(config):
    with pytest.raises(ValidationError):
        config.api_key = "other"
