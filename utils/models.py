"""
Data model for Free Dictionary API responses

The API omits fields freely, so every field has a fallback value and items of
the wrong JSON type are skipped instead of raising.
"""
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional


def _text(value: Any) -> Optional[str]:
    """Return a non-empty string or None"""
    if isinstance(value, str) and value.strip():
        return value
    return None


def _objects(value: Any) -> List[Dict[str, Any]]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


@dataclass
class Phonetic:
    """A single phonetic transcription and/or audio recording"""
    text: Optional[str] = None
    audio_url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Phonetic":
        return cls(text=_text(data.get("text")), audio_url=_text(data.get("audio")))


@dataclass
class Definition:
    text: str = ""
    example: Optional[str] = None
    synonyms: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Definition":
        synonyms = data.get("synonyms")
        return cls(
            text=_text(data.get("definition")) or "",
            example=_text(data.get("example")),
            synonyms=[s for s in synonyms if _text(s)] if isinstance(synonyms, list) else [],
        )


@dataclass
class Meaning:
    part_of_speech: str = ""
    definitions: List[Definition] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Meaning":
        return cls(
            part_of_speech=_text(data.get("partOfSpeech")) or "",
            definitions=[Definition.from_dict(d) for d in _objects(data.get("definitions"))],
        )


@dataclass
class Entry:
    """One parsed dictionary result for a searched word"""
    word: str
    phonetic: Optional[str] = None
    phonetics: List[Phonetic] = field(default_factory=list)
    meanings: List[Meaning] = field(default_factory=list)
    source_urls: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], fallback_word: str) -> "Entry":
        """Build an entry from one API object, using fallback_word when it has no word"""
        source_urls = data.get("sourceUrls")
        return cls(
            word=_text(data.get("word")) or fallback_word,
            phonetic=_text(data.get("phonetic")),
            phonetics=[Phonetic.from_dict(p) for p in _objects(data.get("phonetics"))],
            meanings=[Meaning.from_dict(m) for m in _objects(data.get("meanings"))],
            source_urls=[u for u in source_urls if _text(u)] if isinstance(source_urls, list) else [],
        )

    def transcriptions(self) -> List[str]:
        """Phonetic texts in order, falling back to the entry-level transcription"""
        texts = [p.text for p in self.phonetics if p.text]
        if not texts and self.phonetic:
            texts = [self.phonetic]
        return texts

    def audio_url(self) -> Optional[str]:
        """First phonetic that carries a recording"""
        for phonetic in self.phonetics:
            if phonetic.audio_url:
                return phonetic.audio_url
        return None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def parse_entries(data: Any, fallback_word: str) -> List[Entry]:
    """Parse the API's top-level array; non-object items are skipped"""
    return [Entry.from_dict(item, fallback_word) for item in _objects(data)]
