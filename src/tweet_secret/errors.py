"""
Exceptions and per-item failure tags for tweet-secret.

Run-level errors abort a run before any item is processed. The lookup and
mapping errors are raised by the building blocks and turned into ``Failure``
tags by the encoder and decoder, so a batch always completes.
"""

from enum import Enum


class TweetSecretError(Exception):
    """Base class for all tweet-secret errors."""


class ConfigurationError(TweetSecretError):
    """The configuration cannot be used (bad tweet size, marker or plugin name)."""


class NoCorpusError(TweetSecretError):
    """No corpus source was supplied."""


class CorpusTooSmallError(TweetSecretError):
    """The eligible tweets cannot address every dictionary line."""

    def __init__(self, total_length: int, dictionary_size: int):
        self.total_length = total_length
        self.dictionary_size = dictionary_size
        super().__init__(
            f"Corpus addresses {total_length} positions but the dictionary "
            f"has {dictionary_size} lines"
        )


class WordNotFoundError(TweetSecretError, KeyError):
    """No dictionary line matches the word."""

    def __str__(self):
        return f"Word not in dictionary: {self.args[0]!r}"


class LineOutOfRangeError(TweetSecretError, IndexError):
    """A line number lies outside the dictionary."""


class UnaddressableError(TweetSecretError):
    """An address lies outside the virtual address space."""


class MissingMarkerError(TweetSecretError):
    """A received text carries no marker."""


class UnrecognizedTweetError(TweetSecretError):
    """A received text matches no eligible tweet once the marker is removed."""


class Failure(Enum):
    """Why a single encode or decode item could not be processed."""

    WORD_NOT_IN_DICTIONARY = "word not in dictionary"
    ADDRESS_OUT_OF_RANGE = "address out of range"
    MISSING_MARKER = "missing marker"
    UNRECOGNIZED_TWEET = "unrecognized tweet"
