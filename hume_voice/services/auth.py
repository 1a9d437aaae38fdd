"""
Access token exchange for clients that should not hold the API key.

The token comes from the OAuth client-credentials flow, authenticated with the
API key and secret key, and can be passed to the WebSocket sessions in place of
the key.
"""

import logging

from hume_voice.config.constants import LOGGER_NAME, OAUTH_TOKEN_PATH
from hume_voice.exceptions import HumeAPIError
from hume_voice.services.http_client import HttpTransport

logger = logging.getLogger(LOGGER_NAME)


def fetch_access_token(transport: HttpTransport) -> str:
    """
    Exchange the configured API key and secret key for an access token.

    Args:
        transport: Transport whose configuration holds both keys

    Returns:
        str: The access token

    Raises:
        ValueError: If the API key or secret key is missing
        HumeAPIError: If the service rejects the exchange
    """
    config = transport.config
    if not config.api_key or not config.secret_key:
        raise ValueError("Both api_key and secret_key are required to fetch an access token")

    response = transport.session.post(
        config.url(OAUTH_TOKEN_PATH),
        data={"grant_type": "client_credentials"},
        auth=(config.api_key, config.secret_key),
    )
    if not 200 <= response.status_code < 300:
        logger.error(f"Access token request failed with status {response.status_code}")
        raise HumeAPIError(response.status_code, response.text)

    token = response.json().get("access_token")
    if not token:
        raise HumeAPIError(response.status_code, response.text)
    logger.info("Fetched access token")
    return token
