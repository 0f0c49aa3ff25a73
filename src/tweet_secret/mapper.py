"""
Address mapping between dictionary line numbers and marked tweets.

The eligible tweets, concatenated in corpus order, form a virtual address
space. Address ``a`` (1-based) is represented by the first tweet whose
cumulative length reaches ``a``, with the marker inserted at the split offset
``P_i - a`` where ``P_i`` is that cumulative length.
"""

import bisect
import itertools
import logging
from typing import Dict, Iterable, List, Tuple

from .errors import MissingMarkerError, UnaddressableError, UnrecognizedTweetError


def select_eligible_tweets(sentences: Iterable[str], tweet_size: int) -> List[str]:
    """Keep the non-empty sentences of at most ``tweet_size`` characters, in order."""
    return [s for s in sentences if 0 < len(s) <= tweet_size]


class AddressMapper:
    """Maps addresses to ``(tweet index, split offset)`` pairs and back.

    Tweet indices are 0-based positions in the eligible tweet sequence.
    """

    def __init__(self, tweets: Iterable[str], marker: str):
        self.tweets: Tuple[str, ...] = tuple(tweets)
        self.marker = marker
        # prefix_sums[i] is P_(i+1): total length of tweets[0..i]
        self.prefix_sums: Tuple[int, ...] = tuple(
            itertools.accumulate(len(t) for t in self.tweets)
        )
        # First occurrence wins when the corpus repeats a sentence
        self._positions: Dict[str, int] = {}
        for i, tweet in enumerate(self.tweets):
            self._positions.setdefault(tweet, i)

        self.logger = logging.getLogger("tweet_secret.mapper")
        self.logger.debug(
            f"{len(self.tweets)} eligible tweets, {self.total_length} addressable positions"
        )

    @property
    def total_length(self) -> int:
        return self.prefix_sums[-1] if self.prefix_sums else 0

    def forward(self, address: int) -> Tuple[int, int]:
        """Return ``(i, split_offset)`` for a 1-based address.

        ``i`` is the smallest index whose cumulative length reaches
        ``address``; ``0 <= split_offset < len(tweets[i])``.

        Raises:
            UnaddressableError: ``address`` is outside ``1..total_length``
        """
        if not 1 <= address <= self.total_length:
            raise UnaddressableError(
                f"Address {address} is outside 1..{self.total_length}"
            )
        i = bisect.bisect_left(self.prefix_sums, address)
        return i, self.prefix_sums[i] - address

    def inverse(self, index: int, split_offset: int) -> int:
        """Return the address that ``forward`` mapped to ``(index, split_offset)``."""
        if not 0 <= index < len(self.tweets):
            raise UnaddressableError(f"Tweet index {index} is outside 0..{len(self.tweets) - 1}")
        return self.prefix_sums[index] - split_offset

    def embed(self, index: int, split_offset: int) -> str:
        """Return tweet ``index`` with the marker inserted at ``split_offset``."""
        text = self.tweets[index]
        return text[:split_offset] + self.marker + text[split_offset:]

    def extract(self, encoded_text: str) -> Tuple[int, int]:
        """Recover ``(index, split_offset)`` from a marked tweet.

        The marker is removed and the remaining text is matched exactly
        against the eligible tweets; the earliest identical tweet is chosen.
        The split offset is where the marker starts in ``encoded_text``.

        Raises:
            MissingMarkerError: the marker does not occur in ``encoded_text``
            UnrecognizedTweetError: no eligible tweet matches the plain text
        """
        split_offset = encoded_text.find(self.marker)
        if split_offset == -1:
            raise MissingMarkerError(f"No marker in {encoded_text!r}")
        plain = encoded_text.replace(self.marker, "")
        try:
            index = self._positions[plain]
        except KeyError:
            raise UnrecognizedTweetError(f"No eligible tweet matches {plain!r}") from None
        return index, split_offset

    def encode_address(self, address: int) -> str:
        return self.embed(*self.forward(address))

    def decode_address(self, encoded_text: str) -> int:
        return self.inverse(*self.extract(encoded_text))
