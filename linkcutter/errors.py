"""Typed exceptions for the shortening adapters (no logic)."""

from __future__ import annotations


class ShortenerError(Exception):
    """Base class for every error raised by linkcutter."""


class UnsupportedProviderError(ShortenerError, ValueError):
    """Provider key is not one of the known services."""

    def __init__(self, provider: object):
        super().__init__("Unsupported shortening service")
        self.provider = provider


class ShorteningFailedError(ShortenerError, RuntimeError):
    """Provider answered, but the payload has no short link in it."""

    def __init__(self, message: str, *, provider: str | None = None, code: int | None = None):
        super().__init__(message)
        self.provider = provider
        self.code = code


class TransportError(ShortenerError, RuntimeError):
    """Network failure, timeout, non-2xx status or unreadable body."""

    def __init__(self, message: str, *, provider: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code
