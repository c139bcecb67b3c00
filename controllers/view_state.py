"""
Display state for the widget, rendered after every action
"""
from dataclasses import dataclass, field
from typing import List, Optional

from utils.errors import DictionaryLookupError
from utils.models import Entry


@dataclass
class ViewState:
    query: str = ""
    searched_word: str = ""
    entries: List[Entry] = field(default_factory=list)
    error: Optional[DictionaryLookupError] = None
    status: str = ""
    status_is_error: bool = False
    dark_mode: bool = False

    @property
    def primary(self) -> Optional[Entry]:
        return self.entries[0] if self.entries else None

    @property
    def headline_word(self) -> Optional[str]:
        """Word shown in the headline: the primary entry's word, else the searched word"""
        if self.primary is None:
            return None
        return self.primary.word or self.searched_word

    def set_status(self, message: str, is_error: bool = False) -> None:
        self.status = message
        self.status_is_error = is_error

    def clear_result(self) -> None:
        self.searched_word = ""
        self.entries = []
        self.error = None
