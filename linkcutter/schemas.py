"""Data contracts (DTO) for a single shortening call. No business logic here."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Provider(str, Enum):
    ONEPT = "1pt"
    CLEANURI = "cleanuri"
    ISGD = "isgd"

    def __str__(self) -> str:
        return self.value


@dataclass(slots=True)
class ShortenRequest:
    """
    What to shorten and where.

    Note: 'long_url' is passed to the provider as-is; the provider validates it.
    'custom_alias' is ignored by providers that do not support aliases (CleanUri).
    """

    long_url: str
    provider: Provider | str = Provider.ISGD
    custom_alias: str | None = None


@dataclass(slots=True, frozen=True)
class ShortenResult:
    short_url: str
    provider: Provider

    def __post_init__(self):
        if not self.short_url:
            raise ValueError("short_url must be non-empty")
