"""
Shared fixtures: temp storage, a scripted dictionary client, Flask test client.
"""

import pytest

from clients.audio_client import AudioClip
from controllers.query_controller import QueryController
from utils.errors import AudioPlaybackError, WordNotFoundError
from utils.favorites_store import FavoritesStore
from utils.html_renderer import HtmlRenderer
from utils.models import parse_entries
from utils.storage import KeyValueStorage
from wordly_server import create_app


HELLO_PAYLOAD = [
    {
        "word": "hello",
        "phonetics": [
            {"text": "/həˈləʊ/", "audio": "https://audio.example/hello-uk.mp3"},
            {"text": "/həˈloʊ/", "audio": ""},
        ],
        "meanings": [
            {
                "partOfSpeech": "noun",
                "definitions": [{"definition": "a greeting", "synonyms": ["greeting"]}],
            }
        ],
    }
]


class FakeDictionaryClient:
    """Scripted stand-in for DictionaryClient: word -> payload or exception"""

    name = "Dictionary"

    def __init__(self, responses=None):
        self.responses = responses or {}
        self.calls = []

    async def lookup(self, word):
        self.calls.append(word)
        response = self.responses.get(word)
        if isinstance(response, Exception):
            raise response
        if response is None:
            raise WordNotFoundError()
        return parse_entries(response, word)

    def get_description(self):
        return "fake dictionary"


class FakeAudioClient:
    name = "Audio"

    def __init__(self, clip=None):
        self.clip = clip
        self.calls = []

    async def fetch(self, url):
        self.calls.append(url)
        if self.clip is None:
            raise AudioPlaybackError()
        return self.clip

    def get_description(self):
        return "fake audio"


@pytest.fixture
def storage(tmp_path):
    return KeyValueStorage(str(tmp_path / "storage.json"))


@pytest.fixture
def favorites(storage):
    return FavoritesStore(storage)


@pytest.fixture
def dictionary():
    return FakeDictionaryClient({"hello": HELLO_PAYLOAD})


@pytest.fixture
def audio():
    return FakeAudioClient(AudioClip(content=b"ID3fake", content_type="audio/mpeg"))


@pytest.fixture
def controller(dictionary, favorites, audio):
    return QueryController(dictionary, favorites, HtmlRenderer(), audio_client=audio)


@pytest.fixture
def client(controller):
    app = create_app(controller)
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture
def hello_payload():
    return HELLO_PAYLOAD


@pytest.fixture
def hello_entries():
    return parse_entries(HELLO_PAYLOAD, "hello")
