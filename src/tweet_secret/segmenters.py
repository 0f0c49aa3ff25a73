"""
Sentence segmenters and message tokenizers.

Both sides of a conversation must segment the corpus identically, so the set
of segmenters is closed and chosen by name from configuration.
"""

import re
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List

from .errors import ConfigurationError


class Segmenter(ABC):
    """Splits normalized corpus text into sentences, in corpus order."""

    name = ""

    @abstractmethod
    def segment(self, text: str) -> List[str]:
        ...


class Tokenizer(ABC):
    """Splits raw message arguments into word tokens, in message order."""

    name = ""

    @abstractmethod
    def tokenize(self, args: Iterable[str]) -> List[str]:
        ...


class EnglishSegmenter(Segmenter):
    """Basic English grammar: a sentence ends at ``.``, ``!`` or ``?``.

    Closing quotes and brackets directly after the terminator stay with the
    sentence. Whitespace between sentences is dropped.
    """

    name = "english"
    _BOUNDARY = re.compile(r"(?<=[.!?])[\"')\]]*\s+")

    def segment(self, text: str) -> List[str]:
        sentences = []
        start = 0
        for m in self._BOUNDARY.finditer(text):
            end = m.start() + len(m.group(0).rstrip())
            sentences.append(text[start:end].strip())
            start = m.end()
        sentences.append(text[start:].strip())
        return [s for s in sentences if s]


class LineSegmenter(Segmenter):
    """One sentence per line; for corpora that are already one-per-line."""

    name = "lines"

    def segment(self, text: str) -> List[str]:
        return [line.strip() for line in text.splitlines() if line.strip()]


class WhitespaceTokenizer(Tokenizer):
    """Every whitespace-separated chunk of every argument is a token."""

    name = "whitespace"

    def tokenize(self, args: Iterable[str]) -> List[str]:
        return [tok for arg in args for tok in arg.split()]


class WordTokenizer(Tokenizer):
    """Words only: letters, digits, apostrophes and hyphens; punctuation dropped."""

    name = "words"
    _WORD = re.compile(r"[\w'-]+")

    def tokenize(self, args: Iterable[str]) -> List[str]:
        return [tok for arg in args for tok in self._WORD.findall(arg)]


SEGMENTERS: Dict[str, type] = {cls.name: cls for cls in (EnglishSegmenter, LineSegmenter)}
TOKENIZERS: Dict[str, type] = {cls.name: cls for cls in (WhitespaceTokenizer, WordTokenizer)}


def get_segmenter(name: str) -> Segmenter:
    try:
        return SEGMENTERS[name]()
    except KeyError:
        raise ConfigurationError(f"Unknown segmenter {name!r}") from None


def get_tokenizer(name: str) -> Tokenizer:
    try:
        return TOKENIZERS[name]()
    except KeyError:
        raise ConfigurationError(f"Unknown tokenizer {name!r}") from None
