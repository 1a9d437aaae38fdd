"""
Configuration module for the Hume voice SDK.

Key components:
- constants: Endpoint paths, header names, environment variable names and
  message type identifiers shared by the REST and WebSocket clients.
- settings: The HumeConfig object passed explicitly to every client, with
  HumeConfig.from_env as the one place the environment is read.
- logging_config: Console and rotating-file logging used by the command line.

Usage examples:
```python
from hume_voice.config import HumeConfig
config = HumeConfig.from_env()

from hume_voice.config.logging_config import configure_logging
logger = configure_logging()
logger.info("Application started")
```
"""

from hume_voice.config.settings import HumeConfig

__all__ = ["HumeConfig"]
