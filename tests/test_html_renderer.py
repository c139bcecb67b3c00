"""
HTML rendering of results, errors and favorites.
"""

import pytest

from utils.errors import NetworkFailureError, WordNotFoundError
from utils.html_renderer import HtmlRenderer
from utils.models import parse_entries


@pytest.fixture
def renderer():
    return HtmlRenderer(synonym_limit=8, phonetic_separator=" • ")


class TestRenderResult:
    def test_hello_scenario(self, renderer, hello_entries):
        html = renderer.render("hello", hello_entries, is_saved=False)

        assert '<h3 class="word-title">hello</h3>' in html
        assert '<span class="pos">noun</span>' in html
        assert "a greeting" in html
        assert ">Save</button>" in html
        assert ">Saved</button>" not in html

    def test_saved_label(self, renderer, hello_entries):
        html = renderer.render("hello", hello_entries, is_saved=True)
        assert ">Saved</button>" in html

    def test_phonetics_joined(self, renderer, hello_entries):
        html = renderer.render("hello", hello_entries)
        assert "/həˈləʊ/ • /həˈloʊ/" in html

    def test_play_control_only_with_audio(self, renderer, hello_entries):
        with_audio = renderer.render("hello", hello_entries)
        without_audio = renderer.render("bare", parse_entries([{"word": "bare"}], "bare"))

        assert 'id="playAudio"' in with_audio
        assert 'id="playAudio"' not in without_audio

    def test_headline_falls_back_to_searched_word(self, renderer):
        html = renderer.render("lonely", parse_entries([{"meanings": []}], "lonely"))
        assert '<h3 class="word-title">lonely</h3>' in html

    def test_only_primary_entry_rendered(self, renderer):
        entries = parse_entries([
            {"word": "bank", "meanings": [{"partOfSpeech": "noun", "definitions": [{"definition": "river side"}]}]},
            {"word": "bank", "meanings": [{"partOfSpeech": "verb", "definitions": [{"definition": "tilt a plane"}]}]},
        ], "bank")
        html = renderer.render("bank", entries)

        assert "river side" in html
        assert "tilt a plane" not in html

    def test_example_and_synonyms_truncated(self, renderer):
        synonyms = [f"syn{i}" for i in range(12)]
        entries = parse_entries([{
            "word": "big",
            "meanings": [{"partOfSpeech": "adjective", "definitions": [
                {"definition": "large", "example": "a big house", "synonyms": synonyms},
            ]}],
        }], "big")
        html = renderer.render("big", entries)

        assert '<div class="example">“a big house”</div>' in html
        assert "Synonyms: " + ", ".join(synonyms[:8]) in html
        assert "syn8" not in html

    def test_no_synonym_line_without_synonyms(self, renderer):
        html = renderer.render("x", parse_entries([{"meanings": [{"definitions": [{"definition": "d"}]}]}], "x"))
        assert "Synonyms" not in html

    def test_source_card(self, renderer, hello_entries):
        html = renderer.render("hello", hello_entries)
        assert "Source: Free Dictionary API" in html

    def test_no_entries_renders_nothing(self, renderer):
        assert renderer.render("hello", []) == ""


class TestEscaping:
    def test_script_in_definition_is_escaped(self, renderer):
        entries = parse_entries([{
            "word": "evil",
            "meanings": [{"partOfSpeech": "noun", "definitions": [
                {"definition": "<script>alert(1)</script>", "example": "<script>x</script>", "synonyms": ["<script>"]},
            ]}],
        }], "evil")
        html = renderer.render("evil", entries)

        assert "<script>" not in html
        assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html

    def test_all_special_characters(self, renderer):
        entries = parse_entries([{"word": "a&b<c>d\"e'f"}], "x")
        html = renderer.render("x", entries)

        assert "a&amp;b&lt;c&gt;d&#34;e&#39;f" in html

    def test_error_placeholder_escapes_word(self, renderer):
        html = renderer.render_error('<b>"x"</b>', WordNotFoundError())
        assert "<b>" not in html
        assert "No results for" in html

    def test_favorite_word_escaped_in_attributes(self, renderer):
        html = renderer.render_favorites(['"><img src=x>'])
        assert "<img" not in html
        assert 'value="&#34;&gt;&lt;img src=x&gt;"' in html


class TestRenderError:
    def test_names_searched_word(self, renderer):
        html = renderer.render_error("zzzqx", WordNotFoundError())
        assert 'No results for "zzzqx".' in html

    def test_error_kind_marks_block(self, renderer):
        assert 'class="card no-results not_found"' in renderer.render_error("zzzqx", WordNotFoundError())
        assert 'class="card no-results network_failure"' in renderer.render_error("hello", NetworkFailureError())


class TestRenderFavorites:
    def test_empty_has_single_placeholder(self, renderer):
        html = renderer.render_favorites([])

        assert html.count("<li") == 1
        assert "No favorites yet." in html
        assert "<button" not in html

    def test_rows_have_open_and_remove(self, renderer):
        html = renderer.render_favorites(["beta", "alpha"])

        assert html.count('<li class="fav-item">') == 2
        assert html.index("beta") < html.index("alpha")
        assert 'formaction="/favorites/open" name="word" value="beta"' in html
        assert 'formaction="/favorites/remove" name="word" value="alpha"' in html


class TestRenderStatus:
    def test_error_state_marked(self, renderer):
        assert 'class="status error"' in renderer.render_status("Word not found.", is_error=True)
        assert 'class="status"' in renderer.render_status("Searching...")
