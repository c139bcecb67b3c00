"""
Fetches pronunciation recordings for playback
"""
from dataclasses import dataclass
from loguru import logger

from utils.errors import AudioPlaybackError
from .base_client import BaseClient, TRANSPORT_ERRORS

DEFAULT_AUDIO_TYPE = "audio/mpeg"


@dataclass
class AudioClip:
    content: bytes
    content_type: str = DEFAULT_AUDIO_TYPE


class AudioClient(BaseClient):
    """Downloads an audio file; any failure is an AudioPlaybackError"""

    def __init__(self):
        super().__init__("", "Audio")

    async def fetch(self, url: str) -> AudioClip:
        if not url:
            raise AudioPlaybackError()

        try:
            async with self._session() as session:
                async with session.get(url) as response:
                    self._log_response(url, response.status)
                    if not 200 <= response.status < 300:
                        raise AudioPlaybackError()
                    content = await response.read()
                    content_type = response.content_type or DEFAULT_AUDIO_TYPE
        except TRANSPORT_ERRORS as e:
            logger.warning(f"Audio: could not fetch {url}: {e!r}")
            raise AudioPlaybackError()

        if not content:
            logger.warning(f"Audio: empty recording at {url}")
            raise AudioPlaybackError()
        # Servers that don't label the file get the usual mp3 type
        if content_type == "application/octet-stream":
            content_type = DEFAULT_AUDIO_TYPE
        return AudioClip(content=content, content_type=content_type)

    def get_description(self) -> str:
        return "Pronunciation audio playback"
