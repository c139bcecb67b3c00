"""
Query controller: every user action goes through here
"""
from typing import Optional
from loguru import logger

from clients.audio_client import AudioClient, AudioClip
from clients.dictionary_client import DictionaryClient
from utils.errors import AudioPlaybackError, DictionaryLookupError, EmptyQueryError
from utils.favorites_store import FavoritesStore
from utils.html_renderer import HtmlRenderer
from .view_state import ViewState


class QueryController:
    """Turns user actions into state changes; the page is rendered from that state.

    Lookups are numbered. When an older lookup finishes after a newer one has
    started, its result is dropped, so the most recent submission is the one
    on screen.
    """

    def __init__(self, client: DictionaryClient, favorites: FavoritesStore,
                 renderer: Optional[HtmlRenderer] = None,
                 audio_client: Optional[AudioClient] = None,
                 dark_mode: bool = False):
        self.client = client
        self.favorites = favorites
        self.renderer = renderer or HtmlRenderer()
        self.audio_client = audio_client or AudioClient()
        self.state = ViewState(dark_mode=dark_mode)
        self._generation = 0
        self._theme_resolved = False

    # ---------- search ----------
    async def submit(self, raw_input: str) -> None:
        """Validate and normalize the search box value, then look it up"""
        self.state.query = raw_input or ""
        word = (raw_input or "").strip()
        if not word:
            error = EmptyQueryError()
            logger.info(f"QueryController: rejected empty query ({error.message})")
            self.state.set_status(error.message, is_error=True)
            return
        await self._lookup(word.lower())

    async def open_favorite(self, word: str) -> None:
        """Re-run a lookup for a word from the favorites list"""
        await self.submit(word)

    async def _lookup(self, word: str) -> None:
        self._generation += 1
        generation = self._generation

        self.state.clear_result()
        self.state.set_status("Searching...")

        try:
            entries = await self.client.lookup(word)
        except DictionaryLookupError as e:
            if self._is_stale(generation, word):
                return
            logger.warning(f"QueryController: lookup for '{word}' failed: {e.kind}")
            self.state.searched_word = word
            self.state.error = e
            self.state.set_status(e.message, is_error=True)
            return

        if self._is_stale(generation, word):
            return
        self.state.searched_word = word
        self.state.entries = entries
        self.state.set_status("")

    def _is_stale(self, generation: int, word: str) -> bool:
        if generation != self._generation:
            logger.info(f"QueryController: dropping stale response for '{word}'")
            return True
        return False

    # ---------- favorites ----------
    def toggle_favorite(self) -> Optional[bool]:
        """Save or unsave the displayed word; returns the new membership"""
        word = self.state.headline_word
        if not word:
            logger.debug("QueryController: nothing displayed, ignoring save toggle")
            return None
        if self.favorites.is_favorite(word):
            self.favorites.remove(word)
        else:
            self.favorites.add(word)
        return self.favorites.is_favorite(word)

    def remove_favorite(self, word: str) -> None:
        self.favorites.remove(word)

    def clear_favorites(self) -> None:
        self.favorites.clear()

    def is_saved(self) -> bool:
        word = self.state.headline_word
        return bool(word) and self.favorites.is_favorite(word)

    # ---------- audio ----------
    async def play_audio(self) -> Optional[AudioClip]:
        """Fetch the primary entry's recording; failures only touch the status line"""
        primary = self.state.primary
        url = primary.audio_url() if primary else None
        try:
            if not url:
                raise AudioPlaybackError()
            return await self.audio_client.fetch(url)
        except AudioPlaybackError as e:
            logger.warning(f"QueryController: audio playback failed for {url}")
            self.state.set_status(e.message, is_error=True)
            return None

    # ---------- theme ----------
    def resolve_theme(self, prefers_dark: bool) -> None:
        """Take the host's display-mode preference, once"""
        if self._theme_resolved:
            return
        self._theme_resolved = True
        self.state.dark_mode = prefers_dark

    def lock_theme(self) -> None:
        """Ignore host preference, e.g. when the theme is forced by configuration"""
        self._theme_resolved = True

    def toggle_theme(self) -> bool:
        self._theme_resolved = True
        self.state.dark_mode = not self.state.dark_mode
        return self.state.dark_mode

    # ---------- rendering ----------
    def render_page(self) -> str:
        return self.renderer.render_page(self.state, self.favorites.words(), self.is_saved())

    def page_context(self) -> dict:
        """Template variables for the full page"""
        return self.renderer.page_context(self.state, self.favorites.words(), self.is_saved())
