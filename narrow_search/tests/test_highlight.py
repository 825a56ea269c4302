"""Tests for query highlighting in suggestion descriptions."""

from narrow_search.models.person import Person
from narrow_search.services.highlight import highlight_person, highlight_query_in_phrase
from narrow_search.services.phrase import matches

ALICE = Person(full_name="Alice A", email="alice@x.com")


class TestHighlight:
    """Tests for highlight helpers."""

    def test_highlights_word_prefix(self):
        assert highlight_query_in_phrase("te", "stream test") == "stream [b]te[/b]st"

    def test_keeps_original_case(self):
        assert highlight_query_in_phrase("gen", "General") == "[b]Gen[/b]eral"

    def test_every_matching_word(self):
        assert highlight_query_in_phrase("a", "ant and bee") == "[b]a[/b]nt [b]a[/b]nd bee"

    def test_empty_query_no_markup(self):
        assert highlight_query_in_phrase("", "general") == "general"

    def test_escapes_markup_in_phrase(self):
        assert highlight_query_in_phrase("x", "[red]alert") == "\\[red]alert"

    def test_highlight_person(self):
        assert highlight_person("ali", ALICE) == "[b]Ali[/b]ce A <[b]ali[/b]ce@x.com>"

    def test_tab_separated_words(self):
        """Words split on any whitespace, the same way matching does."""
        phrase = "stream\ttest"
        assert matches(phrase, "te")
        assert highlight_query_in_phrase("te", phrase) == "stream [b]te[/b]st"

    def test_repeated_spaces_collapse(self):
        assert highlight_query_in_phrase("b", "a  b") == "a [b]b[/b]"
