"""
Corpus and dictionary acquisition.

Sources are URLs or local paths. A source that cannot be read contributes
nothing; only the later corpus size check can fail the run.
"""

import logging
import re
from pathlib import Path
from typing import Iterable, Optional

import requests

logger = logging.getLogger("tweet_secret.corpus")

REQUEST_TIMEOUT = 30

_WHITESPACE_RUN = re.compile(r"\s{2,}")


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def fetch_text(source: str) -> Optional[str]:
    """Return the text at ``source`` (URL or file path), or None if it cannot be read."""
    try:
        if is_url(source):
            response = requests.get(source, timeout=REQUEST_TIMEOUT)
            response.raise_for_status()
            logger.debug(f"Fetched {len(response.text)} characters from {source}")
            return response.text
        text = Path(source).expanduser().read_text(encoding="utf-8")
        logger.debug(f"Read {len(text)} characters from {source}")
        return text
    except requests.exceptions.RequestException as e:
        logger.warning(f"Could not fetch {source}: {e}")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read {source}: {e}")
    return None


def normalize_whitespace(text: str) -> str:
    """Turn every whitespace character into a space and collapse runs of them."""
    return _WHITESPACE_RUN.sub(" ", re.sub(r"\s", " ", text))


def load_corpus(sources: Iterable[str]) -> str:
    """Normalized text of every readable source, joined by single spaces."""
    texts = []
    for source in sources:
        text = fetch_text(source)
        if text is not None:
            texts.append(normalize_whitespace(text).strip())
    logger.info(f"Loaded {len(texts)} corpus source(s)")
    return " ".join(texts)


def load_dictionary_text(sources: Iterable[str]) -> str:
    """Raw text of every readable dictionary source, joined by newlines."""
    texts = [text for text in (fetch_text(s) for s in sources) if text is not None]
    return "\n".join(t.rstrip("\r\n") for t in texts)
