"""
Unit tests for the dictionary index.
"""

import pytest

from tweet_secret.dictionary import DictionaryIndex
from tweet_secret.errors import LineOutOfRangeError, WordNotFoundError


class TestDictionaryIndex:
    """Test cases for forward and reverse dictionary lookups."""

    def setup_method(self):
        self.index = DictionaryIndex(["apple", "Banana", "cherry", "banana", "date"])

    def test_forward_lookup_is_one_based(self):
        assert self.index.forward_lookup("apple") == 1
        assert self.index.forward_lookup("cherry") == 3

    def test_first_and_last_lines(self):
        assert self.index.forward_lookup("apple") == 1
        assert self.index.forward_lookup("date") == 5

    def test_forward_lookup_ignores_case(self):
        assert self.index.forward_lookup("APPLE") == 1
        assert self.index.forward_lookup("CheRRy") == 3

    def test_duplicates_resolve_to_first_line(self):
        assert self.index.forward_lookup("banana") == 2
        assert self.index.forward_lookup("BANANA") == 2

    def test_duplicates_keep_their_line_numbers(self):
        assert len(self.index) == 5
        assert self.index.reverse_lookup(4) == "banana"
        assert self.index.reverse_lookup(2) == "Banana"

    def test_whole_line_match_only(self):
        with pytest.raises(WordNotFoundError):
            self.index.forward_lookup("app")
        with pytest.raises(WordNotFoundError):
            self.index.forward_lookup("apple pie")

    def test_missing_word(self):
        with pytest.raises(WordNotFoundError, match="fig"):
            self.index.forward_lookup("fig")
        # Also a KeyError for callers that treat the index like a mapping
        with pytest.raises(KeyError):
            self.index.forward_lookup("fig")

    def test_reverse_lookup_out_of_range(self):
        for line_number in (0, -1, 6):
            with pytest.raises(LineOutOfRangeError):
                self.index.reverse_lookup(line_number)
        with pytest.raises(IndexError):
            self.index.reverse_lookup(6)

    def test_symmetry(self):
        words = ["the", "quick", "brown", "fox", "jumps"]
        index = DictionaryIndex(words)
        for number, word in enumerate(words, start=1):
            assert index.forward_lookup(word) == number
            assert index.reverse_lookup(number) == word

    def test_contains(self):
        assert "Apple" in self.index
        assert "fig" not in self.index

    def test_from_text(self):
        index = DictionaryIndex.from_text("alpha\nbeta\r\ngamma\n")
        assert len(index) == 3
        assert index.lines == ["alpha", "beta", "gamma"]
        assert index.forward_lookup("gamma") == 3

    def test_phrases_are_lines(self):
        index = DictionaryIndex.from_text("ice cream\nsundae")
        assert index.forward_lookup("Ice Cream") == 1
