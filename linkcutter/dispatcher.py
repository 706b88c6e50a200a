"""Pick the adapter for a provider and run it once (no fallback to other providers)."""

from __future__ import annotations

import logging
from collections.abc import Callable

from linkcutter.config import LOGGER_NAME
from linkcutter.errors import UnsupportedProviderError
from linkcutter.schemas import Provider, ShortenRequest, ShortenResult
from linkcutter.shorteners import _shorten_with_isgd, shorten_with_1pt, shorten_with_cleanuri, shorten_with_isgd

__all__ = ["SHORTENERS", "get_shortener", "shorten", "shorten_url"]

logger = logging.getLogger(LOGGER_NAME)

ShortenFn = Callable[..., str]

SHORTENERS: dict[Provider, ShortenFn] = {
    Provider.ONEPT: shorten_with_1pt,
    Provider.CLEANURI: shorten_with_cleanuri,
    Provider.ISGD: shorten_with_isgd,
}

# typed API: every adapter raises on failure, is.gd included
_RAISING_SHORTENERS: dict[Provider, ShortenFn] = {**SHORTENERS, Provider.ISGD: _shorten_with_isgd}


def _resolve_provider(provider: Provider | str) -> Provider:
    try:
        return Provider(provider)
    except (ValueError, TypeError):
        raise UnsupportedProviderError(provider) from None


def get_shortener(provider: Provider | str) -> ShortenFn:
    """Return the adapter for `provider` (enum member or its value, e.g. "isgd")."""
    return SHORTENERS[_resolve_provider(provider)]


def _run(  # noqa: PLR0913
    fn: ShortenFn, url: str, provider: Provider, custom_alias: str | None, timeout: float | None, **http
) -> str:
    if not isinstance(url, str) or not url.strip():
        raise ValueError("url must be a non-empty string")

    logger.debug("shorten service=%s alias=%s", provider, custom_alias or "-")
    return fn(url, custom_alias, timeout, **http)


def shorten_url(  # noqa: PLR0913
    url: str,
    provider: Provider | str = Provider.ISGD,
    custom_alias: str | None = None,
    *,
    timeout: float | None = None,
    _get: Callable[..., object] | None = None,
    _post: Callable[..., object] | None = None,
) -> str:
    """Return a short link for `url` made by `provider` (is.gd by default).

    Raises:
      UnsupportedProviderError — unknown provider; no request is made.
      ValueError               — empty url; no request is made.
    Adapter errors pass through unchanged. Note that is.gd reports failures
    as an "Error: ..." string rather than raising.
    """
    resolved = _resolve_provider(provider)
    return _run(SHORTENERS[resolved], url, resolved, custom_alias, timeout=timeout, _get=_get, _post=_post)


def shorten(
    request: ShortenRequest,
    *,
    timeout: float | None = None,
    _get: Callable[..., object] | None = None,
    _post: Callable[..., object] | None = None,
) -> ShortenResult:
    """Typed variant of `shorten_url`: every provider raises on failure.

    Unlike `shorten_url`, an is.gd failure raises ShorteningFailedError or
    TransportError instead of returning an "Error: ..." string, so a
    ShortenResult always holds a real short link.
    """
    resolved = _resolve_provider(request.provider)
    short = _run(
        _RAISING_SHORTENERS[resolved],
        request.long_url,
        resolved,
        request.custom_alias,
        timeout=timeout,
        _get=_get,
        _post=_post,
    )
    return ShortenResult(short_url=short, provider=resolved)
