"""
Lookup client for the Free Dictionary API
"""
from typing import Any, List
from urllib.parse import quote
from loguru import logger

from config import config
from utils.errors import NetworkFailureError, WordNotFoundError
from utils.models import Entry, parse_entries
from .base_client import BaseClient, TRANSPORT_ERRORS


class DictionaryClient(BaseClient):
    """Issues one GET per lookup and maps failures onto the lookup error kinds"""

    def __init__(self, base_url: str = None):
        super().__init__(base_url or config.DICTIONARY_API_URL, "Dictionary")

    def word_url(self, word: str) -> str:
        return f"{self.base_url}/{quote(word, safe='')}"

    async def _fetch(self, word: str) -> List[Any]:
        """Fetch the decoded JSON array for a word"""
        url = self.word_url(word)
        logger.info(f"Dictionary: looking up '{word}'")

        try:
            async with self._session() as session:
                async with session.get(url) as response:
                    self._log_response(url, response.status)

                    if response.status == 404:
                        raise WordNotFoundError()
                    if not 200 <= response.status < 300:
                        error_text = await response.text(errors="replace")
                        logger.warning(f"Dictionary: API error {response.status}: {error_text[:200]}")
                        raise NetworkFailureError()

                    try:
                        data = await response.json(content_type=None)
                    except ValueError as e:
                        logger.error(f"Dictionary: response body is not JSON: {e}")
                        raise NetworkFailureError()
        except TRANSPORT_ERRORS as e:
            logger.error(f"Dictionary: transport failure for '{word}': {e!r}")
            raise NetworkFailureError()

        if not isinstance(data, list) or not any(isinstance(item, dict) for item in data):
            logger.error(f"Dictionary: unexpected response shape for '{word}': {type(data).__name__}")
            raise NetworkFailureError()
        return data

    async def lookup(self, word: str) -> List[Entry]:
        """Look up a word; the first entry is the primary one"""
        data = await self._fetch(word)
        entries = parse_entries(data, word)
        logger.info(f"Dictionary: {len(entries)} entries for '{word}'")
        return entries

    def get_description(self) -> str:
        return f"Word definitions, phonetics and pronunciation audio from {config.DICTIONARY_SOURCE_NAME}"
