"""
Favorite words, persisted through key-value storage
"""
import json
from typing import Dict, Iterator, List
from loguru import logger

from config import config
from .storage import KeyValueStorage


def normalize_word(word: str) -> str:
    return word.strip().lower() if isinstance(word, str) else ""


class FavoritesStore:
    """Ordered set of favorite words.

    Words are kept oldest-first, which is also the persisted order, and handed
    out most-recent-first for display. Every change is written back to storage
    immediately.
    """

    def __init__(self, storage: KeyValueStorage, key: str = config.FAVORITES_STORAGE_KEY):
        self.storage = storage
        self.key = key
        # dict keeps insertion order and gives O(1) membership
        self._words: Dict[str, None] = {}
        self.load()

    def load(self) -> None:
        """Replace in-memory state with the persisted list; bad data yields an empty set"""
        self._words = {}
        raw = self.storage.get_item(self.key)
        if raw is None:
            logger.info("Favorites: nothing persisted yet")
            return

        try:
            data = json.loads(raw)
        except ValueError as e:
            logger.warning(f"Favorites: persisted value is not valid JSON, starting empty: {e}")
            return

        if not isinstance(data, list):
            logger.warning(f"Favorites: expected a list, got {type(data).__name__}, starting empty")
            return

        for item in data:
            word = normalize_word(item)
            if word:
                self._words.setdefault(word, None)
        logger.info(f"Favorites: loaded {len(self._words)} words")

    def _save(self) -> None:
        try:
            self.storage.set_item(self.key, json.dumps(list(self._words), ensure_ascii=False))
        except OSError as e:
            logger.error(f"Favorites: could not persist favorites: {e}")

    def add(self, word: str) -> bool:
        """Add a word; returns False if it was empty or already present"""
        word = normalize_word(word)
        if not word or word in self._words:
            return False
        self._words[word] = None
        self._save()
        logger.info(f"Favorites: added '{word}'")
        return True

    def remove(self, word: str) -> bool:
        word = normalize_word(word)
        if word not in self._words:
            return False
        del self._words[word]
        self._save()
        logger.info(f"Favorites: removed '{word}'")
        return True

    def clear(self) -> None:
        self._words = {}
        self._save()
        logger.info("Favorites: cleared")

    def is_favorite(self, word: str) -> bool:
        return normalize_word(word) in self._words

    def words(self) -> List[str]:
        """Favorites, most recently added first"""
        return list(reversed(list(self._words)))

    def __contains__(self, word: str) -> bool:
        return self.is_favorite(word)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words())
