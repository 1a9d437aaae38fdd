"""
Constants and configuration values used throughout the SDK.

This module defines constants that are used across different parts of the package,
providing a centralized location for endpoint paths, header names and message types
so the REST and WebSocket clients stay consistent with the remote API.
"""

# Logger name used throughout the package
LOGGER_NAME = "hume_voice"

# Default service locations
DEFAULT_BASE_URL = "https://api.hume.ai"
DEFAULT_WS_BASE_URL = "wss://api.hume.ai"

# Environment variables read by HumeConfig.from_env
ENV_API_KEY = "HUME_API_KEY"
ENV_SECRET_KEY = "HUME_SECRET_KEY"
ENV_BASE_URL = "HUME_BASE_URL"
ENV_WS_BASE_URL = "HUME_WS_BASE_URL"

# Authentication
API_KEY_HEADER = "X-Hume-Api-Key"
API_KEY_QUERY_PARAM = "api_key"
ACCESS_TOKEN_QUERY_PARAM = "access_token"

# REST endpoint paths
VOICES_PATH = "/v0/tts/voices"
TTS_JSON_PATH = "/v0/tts"
TTS_FILE_PATH = "/v0/tts/file"
TTS_STREAM_FILE_PATH = "/v0/tts/stream/file"
TTS_STREAM_JSON_PATH = "/v0/tts/stream/json"
OAUTH_TOKEN_PATH = "/oauth2-cc/token"

# WebSocket endpoint paths
TTS_STREAM_INPUT_PATH = "/v0/tts/stream/input"
EVI_CHAT_PATH = "/v0/evi/chat"

# Chunk size used when spooling binary responses to disk
FILE_CHUNK_SIZE = 64 * 1024

# Audio format constants
AUDIO_FORMAT_MP3 = "mp3"
AUDIO_FORMAT_WAV = "wav"
AUDIO_FORMAT_PCM = "pcm"

# EVI incoming event types
EVI_EVENT_CHAT_METADATA = "chat_metadata"
EVI_EVENT_USER_MESSAGE = "user_message"
EVI_EVENT_ASSISTANT_MESSAGE = "assistant_message"
EVI_EVENT_AUDIO_OUTPUT = "audio_output"
EVI_EVENT_ASSISTANT_END = "assistant_end"
EVI_EVENT_USER_INTERRUPTION = "user_interruption"
EVI_EVENT_TOOL_CALL = "tool_call"
EVI_EVENT_ERROR = "error"
