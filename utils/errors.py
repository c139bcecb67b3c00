"""
Error taxonomy for lookups, validation and audio playback
"""


class WordlyError(Exception):
    """Base class for all user-facing widget errors"""

    default_message = "An error occurred"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class EmptyQueryError(WordlyError):
    """Raised when the search box is empty after trimming"""

    default_message = "Please enter a word to search."


class DictionaryLookupError(WordlyError):
    """A failed dictionary lookup, tagged by kind"""

    kind = "lookup_error"


class WordNotFoundError(DictionaryLookupError):
    kind = "not_found"
    default_message = "Word not found."


class NetworkFailureError(DictionaryLookupError):
    kind = "network_failure"
    default_message = "Network error."


class AudioPlaybackError(WordlyError):
    """Non-fatal: pronunciation audio could not be played"""

    default_message = "Unable to play audio"
