import logging

from .config import LOGGER_NAME
from .dispatcher import SHORTENERS, get_shortener, shorten, shorten_url
from .errors import ShortenerError, ShorteningFailedError, TransportError, UnsupportedProviderError
from .logging_utils import setup_logging
from .schemas import Provider, ShortenRequest, ShortenResult
from .shorteners import shorten_with_1pt, shorten_with_cleanuri, shorten_with_isgd

__all__ = [
    "shorten_url",
    "shorten",
    "get_shortener",
    "SHORTENERS",
    "Provider",
    "ShortenRequest",
    "ShortenResult",
    "shorten_with_1pt",
    "shorten_with_cleanuri",
    "shorten_with_isgd",
    "ShortenerError",
    "ShorteningFailedError",
    "TransportError",
    "UnsupportedProviderError",
    "setup_logging",
]
__version__ = "0.1.0"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())
