"""
Configuration management for tweet-secret.

This module contains the configuration class that holds the shared secret
parameters (tweet size, marker, dictionary sources) and the names of the
segmenter and tokenizer used throughout a run.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Union
from dataclasses import dataclass, field, fields, replace

from .errors import ConfigurationError
from .segmenters import SEGMENTERS, TOKENIZERS

logger = logging.getLogger("tweet_secret.config")

# Keys as they appear in a config.properties file
PROPERTY_KEYS = {
    "tweet-size": "tweet_size",
    "excess-marker": "excess_marker",
    "dictionary-files": "dictionary_files",
    "corpus-parse-fn": "corpus_parse_fn",
    "tokenize-fn": "tokenize_fn",
}


@dataclass(frozen=True)
class TweetSecretConfig:
    """Configuration object for tweet-secret parameters."""

    # Maximum length of a broadcast tweet, marker included
    tweet_size: int = 140

    # Inserted into a tweet to pinpoint an address; must never occur in the corpus.
    # NO-BREAK SPACE cannot survive whitespace normalization of the corpus.
    excess_marker: str = "\u00a0"

    # URLs or paths, concatenated line-wise in this order
    dictionary_files: List[str] = field(default_factory=lambda: ["/usr/share/dict/words"])

    # Segmenter and tokenizer names, see segmenters.py
    corpus_parse_fn: str = "english"
    tokenize_fn: str = "whitespace"

    @property
    def effective_tweet_size(self) -> int:
        """Longest sentence that still leaves room for the marker."""
        return self.tweet_size - len(self.excess_marker)

    def validate(self) -> "TweetSecretConfig":
        """Raise ConfigurationError unless this configuration is usable."""
        if not self.excess_marker:
            raise ConfigurationError("The excess marker must not be empty")
        if self.effective_tweet_size < 1:
            raise ConfigurationError(
                f"tweet-size must leave room for the marker: got {self.tweet_size} "
                f"with a {len(self.excess_marker)} character marker"
            )
        if self.corpus_parse_fn not in SEGMENTERS:
            raise ConfigurationError(
                f"Unknown corpus-parse-fn {self.corpus_parse_fn!r}, "
                f"expected one of {sorted(SEGMENTERS)}"
            )
        if self.tokenize_fn not in TOKENIZERS:
            raise ConfigurationError(
                f"Unknown tokenize-fn {self.tokenize_fn!r}, "
                f"expected one of {sorted(TOKENIZERS)}"
            )
        return self

    def with_overrides(self, **changes: Any) -> "TweetSecretConfig":
        """Return a copy with the non-None values in ``changes`` applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "TweetSecretConfig":
        """Create config from dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in config_dict.items():
            if key in known:
                values[key] = value
            else:
                logger.debug(f"Ignoring unknown config key {key!r}")
        return cls(**values)

    @classmethod
    def from_properties(cls, path: Union[str, Path]) -> "TweetSecretConfig":
        """Create config from a ``config.properties`` file.

        Lines are ``key=value`` (or ``key: value``); blank lines and lines
        starting with ``#`` or ``!`` are ignored. ``dictionary-files`` is a
        space separated list. A ``tweet-size`` that is not an integer is read
        as 0 so that validation rejects it.
        """
        raw = parse_properties(Path(path).read_text(encoding="utf-8"))
        values: Dict[str, Any] = {}
        for prop, attr in PROPERTY_KEYS.items():
            if prop not in raw:
                continue
            value = raw[prop]
            if attr != "excess_marker":
                value = value.strip()
            if attr == "tweet_size":
                try:
                    values[attr] = int(value)
                except ValueError:
                    logger.warning(f"tweet-size {value!r} is not an integer")
                    values[attr] = 0
            elif attr == "dictionary_files":
                values[attr] = value.split()
            else:
                values[attr] = value
        return cls.from_dict(values)


def parse_properties(text: str) -> Dict[str, str]:
    """Parse the simple subset of the Java properties format we need."""
    props = {}
    for line in text.splitlines():
        stripped = line.lstrip()
        if not stripped.strip() or stripped[0] in "#!":
            continue
        seps = [i for i in (stripped.find("="), stripped.find(":")) if i != -1]
        if not seps:
            props[stripped.strip()] = ""
            continue
        sep = min(seps)
        key = stripped[:sep].strip()
        # Only leading whitespace is insignificant; a marker may be a space-like character
        value = stripped[sep + 1:].lstrip(" \t")
        props[key] = _unescape(value)
    return props


def _unescape(value: str) -> str:
    """Decode ``\\uXXXX`` escapes, which is how non-ASCII markers are written."""
    if "\\u" not in value:
        return value
    out = []
    i = 0
    while i < len(value):
        if value.startswith("\\u", i) and i + 6 <= len(value):
            try:
                out.append(chr(int(value[i + 2:i + 6], 16)))
                i += 6
                continue
            except ValueError:
                pass
        out.append(value[i])
        i += 1
    return "".join(out)
