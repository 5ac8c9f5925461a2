"""Tests for description word wrapping."""

import pytest

from autodoc.constants import WORD_BREAK
from autodoc.render.wrap import wrap


@pytest.mark.unit
class TestWrap:
    """Tests for wrap()."""

    def test_two_words_per_line(self):
        """Test four words wrap into two lines of two."""
        assert wrap("one two three four", 2) == "one two <br>three four"

    def test_lines_joined_with_word_break(self):
        """Test wrapped lines are joined with the configured break sequence."""
        assert wrap("a b c", 1) == f"a{WORD_BREAK}b{WORD_BREAK}c"
        assert WORD_BREAK == " <br>"

    def test_uneven_last_line(self):
        """Test the last line holds the remainder."""
        assert wrap("a b c d e", 2) == "a b <br>c d <br>e"

    def test_short_text_is_single_line(self):
        """Test text under the limit has no break."""
        assert wrap("GitHub token", 6) == "GitHub token"

    @pytest.mark.parametrize("max_words", [0, -1])
    def test_non_positive_is_passthrough(self, max_words):
        """Test zero or negative word counts disable wrapping."""
        text = "keep   this\nas is"
        assert wrap(text, max_words) == text

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_blank_text_unchanged(self, text):
        """Test empty and whitespace-only text do not crash."""
        assert wrap(text, 3) == text

    def test_whitespace_is_normalized(self):
        """Test runs of whitespace and newlines collapse to single spaces."""
        assert wrap("a  b\nc", 5) == "a b c"

    def test_words_kept_in_order(self):
        """Test no word is dropped or reordered."""
        text = "the quick brown fox jumps over the lazy dog"
        wrapped = wrap(text, 3)
        assert wrapped.replace(" <br>", " ").split() == text.split()
        assert wrapped.count("<br>") == 2
