"""
HTML rendering for lookup results, favorites and the page shell

Markup lives in utils/templates and is rendered with Jinja2 with autoescaping
on, so untrusted dictionary content is always entity-escaped. This module only
turns entries and view state into template variables.
"""
import os
from typing import TYPE_CHECKING, Any, Dict, List, Sequence
from jinja2 import Environment, FileSystemLoader, select_autoescape

from config import config
from .errors import DictionaryLookupError
from .models import Entry

if TYPE_CHECKING:
    from controllers.view_state import ViewState

TEMPLATE_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates")


def create_environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(TEMPLATE_DIR),
        autoescape=select_autoescape(["html"]),
    )


class HtmlRenderer:
    """Builds template variables and renders the widget's templates"""

    def __init__(self, synonym_limit: int = None, phonetic_separator: str = None,
                 source_name: str = None):
        self.synonym_limit = synonym_limit if synonym_limit is not None else config.SYNONYM_LIMIT
        self.phonetic_separator = phonetic_separator if phonetic_separator is not None else config.PHONETIC_SEPARATOR
        self.source_name = source_name or config.DICTIONARY_SOURCE_NAME
        self.env = create_environment()

    def _render(self, template: str, **context: Any) -> str:
        return self.env.get_template(template).render(**context)

    # ---------- template variables ----------
    def result_context(self, searched_word: str, entries: Sequence[Entry], is_saved: bool = False) -> Dict[str, Any]:
        """Variables for the primary entry's cards"""
        primary = entries[0]
        return {
            "word": primary.word or searched_word,
            "transcriptions": primary.transcriptions(),
            "separator": self.phonetic_separator,
            "audio_url": primary.audio_url(),
            "is_saved": is_saved,
            "meanings": primary.meanings,
            "synonym_limit": self.synonym_limit,
            "source_name": self.source_name,
        }

    @staticmethod
    def error_context(searched_word: str, error: DictionaryLookupError) -> Dict[str, Any]:
        return {"searched_word": searched_word, "error_kind": error.kind}

    def page_context(self, state: "ViewState", favorites: List[str], is_saved: bool = False) -> Dict[str, Any]:
        """Variables for the full page"""
        context = {
            "dark_mode": state.dark_mode,
            "query": state.query,
            "status": state.status,
            "status_is_error": state.status_is_error,
            "favorites": favorites,
        }
        if state.error is not None:
            context.update(self.error_context(state.searched_word, state.error))
        elif state.entries:
            context.update(self.result_context(state.searched_word, state.entries, is_saved))
        return context

    # ---------- fragments ----------
    def render(self, searched_word: str, entries: Sequence[Entry], is_saved: bool = False) -> str:
        """Render the primary entry: headline card, one card per meaning, source card"""
        if not entries:
            return ""
        return self._render("_result.html", **self.result_context(searched_word, entries, is_saved))

    def render_error(self, searched_word: str, error: DictionaryLookupError) -> str:
        """Placeholder block shown in place of results after a failed lookup"""
        return self._render("_error.html", **self.error_context(searched_word, error))

    def render_favorites(self, words: List[str]) -> str:
        """Favorites list, most recent first; a single placeholder row when empty"""
        return self._render("_favorites.html", favorites=words)

    def render_status(self, message: str, is_error: bool = False) -> str:
        return self._render("_status.html", status=message, status_is_error=is_error)

    def render_page(self, state: "ViewState", favorites: List[str], is_saved: bool = False) -> str:
        """Full document for the current state"""
        return self._render("index.html", **self.page_context(state, favorites, is_saved))
