"""Module-level API backed by a default builder.

The default builder reads its CSRF token from `AppSettings` (env var or a
saved page). It is created on first use and cached; `reset_default_builder`
drops it so a changed environment is read again.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TypeVar

from rails_http.adapters.token_sources import SettingsTokenProvider
from rails_http.core.decoding import Decoder
from rails_http.core.domain.body import Body
from rails_http.core.domain.models import TokenResult
from rails_http.core.domain.request import RequestConfig, RequestDescription
from rails_http.core.services.builder import RequestBuilder

T = TypeVar("T")


@lru_cache(maxsize=1)
def default_builder() -> RequestBuilder:
    return RequestBuilder(SettingsTokenProvider())


def reset_default_builder() -> None:
    default_builder.cache_clear()


def csrf_token() -> TokenResult:
    return default_builder().token_provider.get_token()


def request(config: RequestConfig[T]) -> RequestDescription[T]:
    return default_builder().request(config)


def get(url: str, decoder: Decoder[T]) -> RequestDescription[T]:
    return default_builder().get(url, decoder)


def post(url: str, body: Body, decoder: Decoder[T]) -> RequestDescription[T]:
    return default_builder().post(url, body, decoder)


def put(url: str, body: Body, decoder: Decoder[T]) -> RequestDescription[T]:
    return default_builder().put(url, body, decoder)


def patch(url: str, body: Body, decoder: Decoder[T]) -> RequestDescription[T]:
    return default_builder().patch(url, body, decoder)


def delete(url: str, body: Body, decoder: Decoder[T]) -> RequestDescription[T]:
    return default_builder().delete(url, body, decoder)
