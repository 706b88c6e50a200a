"""Provider adapters for 1pt, CleanUri and is.gd.

Each adapter makes exactly one HTTP call and turns the provider's answer
into a short link:
  - 1pt      — POST, query params `long`/`short`, token is prefixed with https://1pt.co/
  - CleanUri — POST, form body `url=...`, `result_url` returned as-is (no alias support)
  - is.gd    — GET, query params `url`/`format`/`shorturl`/`logstats`, `shorturl` returned as-is

All adapters share one signature so the dispatcher can call them the same way.
`_get` / `_post` take the place of `requests.get` / `requests.post` in unit tests;
an adapter ignores the one it does not use.

Raises (1pt, CleanUri):
  ShorteningFailedError — provider answered without a short link.
  TransportError        — network error, timeout, non-2xx or non-JSON body.

`shorten_with_isgd` never raises for those two cases: it returns "Error: <message>"
instead. `_shorten_with_isgd` is the same call without that wrapping.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from http import HTTPStatus
from urllib.parse import quote

import requests

from linkcutter.config import (
    CLEANURI_ENDPOINT,
    CLEANURI_SAFE_CHARS,
    DEFAULT_HTTP_TIMEOUT,
    ISGD_ENDPOINT,
    ISGD_FORMAT,
    LOGGER_NAME,
    ONEPT_ENDPOINT,
    ONEPT_SHORT_PREFIX,
)
from linkcutter.errors import ShorteningFailedError, TransportError

__all__ = ["shorten_with_1pt", "shorten_with_cleanuri", "shorten_with_isgd"]

logger = logging.getLogger(LOGGER_NAME)


def _timeout(timeout: float | None) -> float:
    # only None means "default"; an explicit 0 goes to requests unchanged
    return DEFAULT_HTTP_TIMEOUT if timeout is None else timeout


def _request_json(call: Callable[..., object], endpoint: str, *, service: str, **kwargs) -> dict:
    """Send the request and return the decoded JSON object.

    A JSON payload that is not an object is treated as empty, so the caller
    reports it as a missing success field.
    """
    logger.debug("request service=%s endpoint=%s", service, endpoint)
    try:
        resp = call(endpoint, **kwargs)
    except Exception as e:
        raise TransportError(f"{service} request failed: {e}", provider=service) from e

    status = getattr(resp, "status_code", HTTPStatus.OK)
    if not HTTPStatus.OK <= status < HTTPStatus.MULTIPLE_CHOICES:
        raise TransportError(f"{service} HTTP {status}", provider=service, status_code=status)

    try:
        payload = resp.json()
    except ValueError as e:
        raise TransportError(f"{service} returned malformed body", provider=service, status_code=status) from e

    return payload if isinstance(payload, dict) else {}


def shorten_with_1pt(
    url: str,
    custom_alias: str | None = None,
    timeout: float | None = None,
    *,
    _get: Callable[..., object] | None = None,
    _post: Callable[..., object] | None = None,
) -> str:
    post = _post or requests.post
    params = {"long": url}
    if custom_alias:
        params["short"] = custom_alias

    try:
        payload = _request_json(post, ONEPT_ENDPOINT, service="1pt", params=params, timeout=_timeout(timeout))
        token = payload.get("short")
        if not token:
            raise ShorteningFailedError("Failed to shorten URL", provider="1pt")
    except (ShorteningFailedError, TransportError) as e:
        logger.error("shorten_failed service=1pt reason=%s", e)
        raise

    short = f"{ONEPT_SHORT_PREFIX}{token}"
    logger.info("shorten_ok service=1pt short=%s", short)
    return short


def _cleanuri_body(url: str) -> str:
    # кодирование как у encodeURIComponent, а не quote_plus
    try:
        return f"url={quote(url, safe=CLEANURI_SAFE_CHARS)}"
    except UnicodeEncodeError as e:
        raise TransportError(f"cleanuri could not encode url: {e}", provider="cleanuri") from e


def shorten_with_cleanuri(
    url: str,
    custom_alias: str | None = None,
    timeout: float | None = None,
    *,
    _get: Callable[..., object] | None = None,
    _post: Callable[..., object] | None = None,
) -> str:
    """Shorten `url` with CleanUri. `custom_alias` is accepted but never sent."""
    post = _post or requests.post
    if custom_alias:
        logger.debug("alias_ignored service=cleanuri alias=%s", custom_alias)

    try:
        body = _cleanuri_body(url)
        payload = _request_json(
            post,
            CLEANURI_ENDPOINT,
            service="cleanuri",
            data=body,
            headers={"Content-Type": "application/x-www-form-urlencoded"},
            timeout=_timeout(timeout),
        )
        result_url = payload.get("result_url")
        if not result_url:
            if payload.get("error"):
                logger.warning("provider_error service=cleanuri error=%s", payload["error"])
            raise ShorteningFailedError("Failed to shorten URL with CleanUri", provider="cleanuri")
    except (ShorteningFailedError, TransportError) as e:
        logger.error("shorten_failed service=cleanuri reason=%s", e)
        raise

    logger.info("shorten_ok service=cleanuri short=%s", result_url)
    return result_url


def _shorten_with_isgd(  # noqa: PLR0913
    url: str,
    custom_alias: str | None = None,
    timeout: float | None = None,
    *,
    logstats: bool = False,
    _get: Callable[..., object] | None = None,
    _post: Callable[..., object] | None = None,
) -> str:
    """is.gd call that raises like the other adapters (used by `dispatcher.shorten`)."""
    get = _get or requests.get
    params: dict[str, object] = {"url": url, "format": ISGD_FORMAT}
    if custom_alias:
        params["shorturl"] = custom_alias
    if logstats:
        params["logstats"] = 1

    try:
        payload = _request_json(get, ISGD_ENDPOINT, service="isgd", params=params, timeout=_timeout(timeout))
        short = payload.get("shorturl")
        if not short:
            raise ShorteningFailedError(
                payload.get("errormessage") or "Failed to shorten URL with IsGd",
                provider="isgd",
                code=payload.get("errorcode"),
            )
    except (ShorteningFailedError, TransportError) as e:
        logger.warning("shorten_failed service=isgd reason=%s", e)
        raise

    logger.info("shorten_ok service=isgd short=%s", short)
    return short


def shorten_with_isgd(  # noqa: PLR0913
    url: str,
    custom_alias: str | None = None,
    timeout: float | None = None,
    *,
    logstats: bool = False,
    _get: Callable[..., object] | None = None,
    _post: Callable[..., object] | None = None,
) -> str:
    """Shorten `url` with is.gd.

    Failures are not raised: the result is "Error: <message>", where the
    message is is.gd's own `errormessage` when it sent one.
    `logstats=True` asks is.gd to keep click statistics for the link.
    """
    try:
        return _shorten_with_isgd(url, custom_alias, timeout, logstats=logstats, _get=_get, _post=_post)
    except (ShorteningFailedError, TransportError) as e:
        return f"Error: {e}"
