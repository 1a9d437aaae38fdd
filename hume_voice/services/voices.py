"""
Voice management resource.

Lists voices from the shared library or the caller's saved custom voices, saves a
prior generation as a custom voice, and deletes custom voices by name.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional, Union

from hume_voice.config.constants import LOGGER_NAME, VOICES_PATH
from hume_voice.models.tts_schemas import Voice, VoiceProvider, VoicesPage
from hume_voice.services.http_client import HttpTransport

logger = logging.getLogger(LOGGER_NAME)


class Voices:
    """Thin method set over the voices endpoints."""

    def __init__(self, transport: HttpTransport):
        self.transport = transport

    def list_page(
        self,
        provider: Union[VoiceProvider, str] = VoiceProvider.HUME_AI,
        page_number: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> VoicesPage:
        """
        Fetch one page of voices.

        Args:
            provider: HUME_AI for the shared library, CUSTOM_VOICE for saved voices
            page_number: Zero-based page to fetch
            page_size: Number of voices per page

        Returns:
            VoicesPage: The voices plus paging metadata
        """
        params: Dict[str, Any] = {"provider": VoiceProvider(provider).value}
        if page_number is not None:
            params["page_number"] = page_number
        if page_size is not None:
            params["page_size"] = page_size

        data = self.transport.request_json("GET", VOICES_PATH, params=params)
        page = VoicesPage.model_validate(data or {})
        logger.info(f"Listed {len(page.voices_page)} {params['provider']} voice(s)")
        return page

    def list(
        self,
        provider: Union[VoiceProvider, str] = VoiceProvider.HUME_AI,
        page_number: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> List[Voice]:
        """Return the voices of one page, in the order the service sent them."""
        return self.list_page(provider, page_number, page_size).voices_page

    def iter_all(
        self,
        provider: Union[VoiceProvider, str] = VoiceProvider.HUME_AI,
        page_size: Optional[int] = None,
    ) -> Iterator[Voice]:
        """Yield every voice of a provider, fetching pages as needed."""
        page_number = 0
        while True:
            page = self.list_page(provider, page_number=page_number, page_size=page_size)
            yield from page.voices_page
            page_number += 1
            if page_number >= page.total_pages or not page.voices_page:
                break

    def create(self, generation_id: str, name: str) -> Voice:
        """
        Save the voice of a prior generation as a custom voice.

        Args:
            generation_id: Id of the generation whose voice to keep
            name: Name to save the voice under

        Returns:
            Voice: The created voice record
        """
        data = self.transport.request_json(
            "POST",
            VOICES_PATH,
            json={"generation_id": generation_id, "name": name},
        )
        voice = Voice.model_validate(data)
        logger.info(f"Created custom voice {voice.name!r}")
        return voice

    def delete(self, name: str) -> None:
        """Delete a saved custom voice by name."""
        self.transport.request_json("DELETE", VOICES_PATH, params={"name": name})
        logger.info(f"Deleted custom voice {name!r}")
