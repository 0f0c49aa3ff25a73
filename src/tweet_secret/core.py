"""
Core tweet-secret implementation.

This module contains the main TweetSecret class that encodes message words
into marked corpus tweets and decodes marked tweets back into words.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from .config import TweetSecretConfig
from .corpus import load_corpus, load_dictionary_text
from .dictionary import DictionaryIndex
from .errors import (
    CorpusTooSmallError,
    Failure,
    LineOutOfRangeError,
    MissingMarkerError,
    NoCorpusError,
    UnaddressableError,
    UnrecognizedTweetError,
    WordNotFoundError,
)
from .mapper import AddressMapper, select_eligible_tweets
from .segmenters import get_segmenter, get_tokenizer

logger = logging.getLogger("tweet_secret.core")


@dataclass(frozen=True)
class CodingResult:
    """Outcome of encoding one word or decoding one tweet."""

    source: str
    value: Optional[str] = None
    failure: Optional[Failure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None


class TweetSecret:
    """Main class for tweet-secret encoding and decoding."""

    def __init__(
        self,
        dictionary: DictionaryIndex,
        tweets: Sequence[str],
        config: Optional[TweetSecretConfig] = None,
    ):
        """Initialize the encoder/decoder over already prepared structures.

        Args:
            dictionary: The shared word list
            tweets: Eligible tweets in corpus order
            config: Configuration object. If None, uses default configuration

        Raises:
            ConfigurationError: the configuration is invalid
        """
        self.config = (config or TweetSecretConfig()).validate()
        self.dictionary = dictionary
        self.mapper = AddressMapper(tweets, self.config.excess_marker)
        self.tokenizer = get_tokenizer(self.config.tokenize_fn)

        # Set up logger
        self.logger = logger

    @classmethod
    def from_sources(
        cls,
        corpus_sources: Iterable[str],
        config: Optional[TweetSecretConfig] = None,
        dictionary_text: Optional[str] = None,
    ) -> "TweetSecret":
        """Build a TweetSecret from corpus sources and the configured dictionary.

        Args:
            corpus_sources: URLs or file paths of the shared corpus texts
            config: Configuration object. If None, uses default configuration
            dictionary_text: Dictionary contents; read from ``config.dictionary_files`` if None

        Raises:
            ConfigurationError: the configuration is invalid
            NoCorpusError: ``corpus_sources`` is empty
            CorpusTooSmallError: the corpus cannot address every dictionary line
        """
        config = (config or TweetSecretConfig()).validate()
        corpus_sources = list(corpus_sources)
        if not corpus_sources:
            raise NoCorpusError("At least one corpus source is required")

        if dictionary_text is None:
            dictionary_text = load_dictionary_text(config.dictionary_files)
        dictionary = DictionaryIndex.from_text(dictionary_text)

        sentences = get_segmenter(config.corpus_parse_fn).segment(load_corpus(corpus_sources))
        tweets = select_eligible_tweets(sentences, config.effective_tweet_size)
        logger.info(
            f"{len(tweets)} of {len(sentences)} sentences fit in {config.effective_tweet_size} characters"
        )
        stego = cls(dictionary, tweets, config)
        stego.check_capacity()
        return stego

    def check_capacity(self) -> None:
        """Make sure every dictionary line has an address in the corpus.

        Raises:
            CorpusTooSmallError: the eligible tweets are shorter in total than the dictionary
        """
        if self.mapper.total_length < len(self.dictionary):
            raise CorpusTooSmallError(self.mapper.total_length, len(self.dictionary))

    @property
    def tweets(self) -> Sequence[str]:
        return self.mapper.tweets

    def tokenize(self, args: Iterable[str]) -> List[str]:
        """Split raw message arguments into tokens with the configured tokenizer."""
        return self.tokenizer.tokenize(args)

    def encode_word(self, word: str) -> CodingResult:
        """Encode a single word into a marked tweet."""
        try:
            line_number = self.dictionary.forward_lookup(word)
        except WordNotFoundError:
            self.logger.debug(f"{word!r} is not in the dictionary")
            return CodingResult(word, failure=Failure.WORD_NOT_IN_DICTIONARY)
        try:
            index, split_offset = self.mapper.forward(line_number)
        except UnaddressableError as e:
            self.logger.debug(f"{word!r}: {e}")
            return CodingResult(word, failure=Failure.ADDRESS_OUT_OF_RANGE)
        self.logger.debug(
            f"{word!r} -> line {line_number} -> tweet {index}, offset {split_offset}"
        )
        return CodingResult(word, self.mapper.embed(index, split_offset))

    def decode_tweet(self, text: str) -> CodingResult:
        """Decode a single marked tweet into its word."""
        try:
            index, split_offset = self.mapper.extract(text)
        except MissingMarkerError:
            self.logger.debug(f"No marker in {text!r}")
            return CodingResult(text, failure=Failure.MISSING_MARKER)
        except UnrecognizedTweetError:
            self.logger.debug(f"{text!r} matches no eligible tweet")
            return CodingResult(text, failure=Failure.UNRECOGNIZED_TWEET)
        address = self.mapper.inverse(index, split_offset)
        try:
            word = self.dictionary.reverse_lookup(address)
        except LineOutOfRangeError as e:
            self.logger.debug(f"{text!r}: {e}")
            return CodingResult(text, failure=Failure.ADDRESS_OUT_OF_RANGE)
        self.logger.debug(
            f"tweet {index}, offset {split_offset} -> line {address} -> {word!r}"
        )
        return CodingResult(text, word)

    def encode(self, words: Iterable[str]) -> List[CodingResult]:
        """Encode message words into marked tweets.

        Args:
            words: Message tokens, each expected to be a dictionary line

        Returns:
            One result per word, in input order; failed words carry a Failure tag
        """
        words = list(words)
        self.logger.info(f"Encoding {len(words)} word(s)")
        results = [self.encode_word(word) for word in words]
        self._log_failures(results)
        return results

    def decode(self, texts: Iterable[str]) -> List[CodingResult]:
        """Decode marked tweets back into message words.

        Args:
            texts: Received tweets, each carrying one marker

        Returns:
            One result per tweet, in input order; failed tweets carry a Failure tag
        """
        texts = list(texts)
        self.logger.info(f"Decoding {len(texts)} tweet(s)")
        results = [self.decode_tweet(text) for text in texts]
        self._log_failures(results)
        return results

    def _log_failures(self, results: List[CodingResult]) -> None:
        failed = sum(1 for r in results if not r.ok)
        if failed:
            self.logger.info(f"{failed} of {len(results)} item(s) could not be processed")
