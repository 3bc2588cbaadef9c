"""httpx wrapper.

Why a wrapper:
- Renders a `RequestDescription` into an `httpx.Request` exactly as
  described (header order and duplicates kept, explicit timeout).
- Maps httpx exceptions and statuses onto the transport-error taxonomy, so
  callers get an `Ok`/`Err` value instead of an exception.
- Makes testing easy: any `httpx.Client` works, including one built on
  `httpx.MockTransport`.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx

from rails_http.core.config import AppSettings
from rails_http.core.domain.models import (
    BadPayload,
    BadStatus,
    BadUrl,
    Err,
    InvalidRequest,
    NetworkError,
    Ok,
    Timeout,
    TransportError,
)
from rails_http.core.domain.request import RequestDescription
from rails_http.core.exceptions import DecodeError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def build_client(settings: AppSettings | None = None, **kwargs: Any) -> httpx.Client:
    """Create an `httpx.Client` with the configured base URL and redirects.

    Keyword arguments are passed to `httpx.Client` and win over settings.
    """

    return httpx.Client(**_client_options(settings, kwargs))


def build_async_client(settings: AppSettings | None = None, **kwargs: Any) -> httpx.AsyncClient:
    return httpx.AsyncClient(**_client_options(settings, kwargs))


def _client_options(settings: AppSettings | None, overrides: dict[str, Any]) -> dict[str, Any]:
    settings = settings or AppSettings()
    options: dict[str, Any] = {"follow_redirects": settings.follow_redirects}
    if settings.base_url:
        options["base_url"] = settings.base_url
    options.update(overrides)
    return options


def to_httpx(
    description: RequestDescription[Any],
    client: httpx.Client | httpx.AsyncClient | None = None,
) -> httpx.Request:
    """Render `description` for `client.send`.

    - Relative URLs are resolved against `client.base_url`.
    - The body's `Content-Type` goes after the composed headers.
    - Cookies from the client jar are attached only with `with_credentials`;
      `send` keeps them off redirect hops as well.
    - The timeout is always explicit; `None` means no timeout.
    """

    url = httpx.URL(description.url)
    if client is not None and url.is_relative_url and str(client.base_url):
        url = client.base_url.join(str(url).lstrip("/"))

    headers = list(description.headers)
    body = description.body
    if body.content_type is not None:
        headers.append(("Content-Type", body.content_type))

    cookies = client.cookies if client is not None and description.with_credentials else None

    return httpx.Request(
        description.method,
        url,
        headers=headers,
        content=body.content or None,
        cookies=cookies,
        extensions={"timeout": httpx.Timeout(description.timeout).as_dict()},
    )


def send(client: httpx.Client, description: RequestDescription[T]) -> Ok[T] | Err[TransportError]:
    """Execute `description` with `client`. Never raises for HTTP failures."""

    request = _prepare(client, description)
    if not isinstance(request, httpx.Request):
        return Err(request)
    try:
        if description.with_credentials:
            response = client.send(request)
        else:
            response = client.send(request, follow_redirects=False)
            hops = 0
            while client.follow_redirects and response.next_request is not None:
                hops = _check_hops(hops, client, response)
                response = client.send(_without_cookies(response.next_request), follow_redirects=False)
    except httpx.HTTPError as exc:
        return Err(_transport_failure(exc, description))
    return _interpret(response, description)


async def send_async(
    client: httpx.AsyncClient,
    description: RequestDescription[T],
) -> Ok[T] | Err[TransportError]:
    request = _prepare(client, description)
    if not isinstance(request, httpx.Request):
        return Err(request)
    try:
        if description.with_credentials:
            response = await client.send(request)
        else:
            response = await client.send(request, follow_redirects=False)
            hops = 0
            while client.follow_redirects and response.next_request is not None:
                hops = _check_hops(hops, client, response)
                response = await client.send(_without_cookies(response.next_request), follow_redirects=False)
    except httpx.HTTPError as exc:
        return Err(_transport_failure(exc, description))
    return _interpret(response, description)


def _without_cookies(request: httpx.Request) -> httpx.Request:
    # httpx fills redirect hops from the client jar; without credentials
    # no hop may carry it.
    request.headers.pop("Cookie", None)
    return request


def _check_hops(hops: int, client: httpx.Client | httpx.AsyncClient, response: httpx.Response) -> int:
    if hops >= client.max_redirects:
        raise httpx.TooManyRedirects("Exceeded maximum allowed redirects.", request=response.request)
    return hops + 1


def _prepare(
    client: httpx.Client | httpx.AsyncClient,
    description: RequestDescription[Any],
) -> httpx.Request | BadUrl | InvalidRequest:
    try:
        request = to_httpx(description, client)
    except httpx.InvalidURL:
        return BadUrl(description.url)
    except (UnicodeEncodeError, TypeError) as exc:
        logger.debug("request not encodable", extra={"method": description.method, "url": description.url})
        return InvalidRequest(str(exc) or type(exc).__name__)
    # Relative URL and no base_url to resolve it against.
    if not request.url.scheme or not request.url.host:
        return BadUrl(description.url)
    return request


def _transport_failure(exc: httpx.HTTPError, description: RequestDescription[Any]) -> TransportError:
    logger.debug(
        "transport failure",
        extra={"method": description.method, "url": description.url, "error": type(exc).__name__},
    )
    if isinstance(exc, httpx.UnsupportedProtocol):
        return BadUrl(description.url)
    if isinstance(exc, httpx.TimeoutException):
        return Timeout()
    return NetworkError(str(exc) or type(exc).__name__)


def _interpret(response: httpx.Response, description: RequestDescription[T]) -> Ok[T] | Err[TransportError]:
    status = response.status_code
    logger.debug("response", extra={"method": description.method, "url": description.url, "status": status})

    text = response.text
    if not 200 <= status < 300:
        return Err(BadStatus(status=status, body=text, headers=tuple(response.headers.multi_items())))

    try:
        return Ok(description.decoder.decode_string(response.content))
    except DecodeError as exc:
        return Err(BadPayload(message=str(exc), status=status, body=text))
