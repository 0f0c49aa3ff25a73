"""
Text steganography optimized for Twitter.

Each message word is hidden as a position inside a corpus known only to
sender and receiver, and that position is marked by one unobtrusive
character inserted into an ordinary corpus sentence.
"""

from .core import CodingResult, TweetSecret
from .config import TweetSecretConfig
from .dictionary import DictionaryIndex
from .errors import Failure, TweetSecretError
from .mapper import AddressMapper, select_eligible_tweets

__version__ = "0.1.0"
__all__ = [
    "AddressMapper",
    "CodingResult",
    "DictionaryIndex",
    "Failure",
    "TweetSecret",
    "TweetSecretConfig",
    "TweetSecretError",
    "select_eligible_tweets",
]
