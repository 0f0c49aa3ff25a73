"""
Dictionary index: a word's line number is its numeric identity.
"""

import logging
from typing import Dict, Iterable, List, Tuple

from .errors import LineOutOfRangeError, WordNotFoundError

logger = logging.getLogger("tweet_secret.dictionary")


class DictionaryIndex:
    """Ordered, 1-indexed word list with case-insensitive reverse lookup.

    Duplicate lines are kept so that line numbers match the shared text; only
    the first occurrence of a word can be looked up.
    """

    def __init__(self, lines: Iterable[str]):
        self._lines: Tuple[str, ...] = tuple(lines)
        self._first: Dict[str, int] = {}
        for number, line in enumerate(self._lines, start=1):
            self._first.setdefault(line.lower(), number)
        logger.debug(
            f"Indexed {len(self._lines)} dictionary lines ({len(self._first)} distinct)"
        )

    @classmethod
    def from_text(cls, text: str) -> "DictionaryIndex":
        return cls(text.splitlines())

    def __len__(self) -> int:
        return len(self._lines)

    def __contains__(self, word: str) -> bool:
        return word.lower() in self._first

    @property
    def lines(self) -> List[str]:
        return list(self._lines)

    def forward_lookup(self, word: str) -> int:
        """Return the number of the first line equal to ``word``, ignoring case.

        Raises:
            WordNotFoundError: no line matches
        """
        try:
            return self._first[word.lower()]
        except KeyError:
            raise WordNotFoundError(word) from None

    def reverse_lookup(self, line_number: int) -> str:
        """Return the word on 1-based ``line_number``.

        Raises:
            LineOutOfRangeError: ``line_number`` is below 1 or past the last line
        """
        if not 1 <= line_number <= len(self._lines):
            raise LineOutOfRangeError(
                f"Line {line_number} is outside the dictionary (1..{len(self._lines)})"
            )
        return self._lines[line_number - 1]
