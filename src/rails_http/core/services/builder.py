"""Request builder and verb helpers."""

from __future__ import annotations

from typing import TypeVar

from rails_http.core.decoding import Decoder
from rails_http.core.domain.body import EMPTY, Body
from rails_http.core.domain.convention import RAILS, Convention
from rails_http.core.domain.request import RequestConfig, RequestDescription
from rails_http.core.interfaces.token import TokenProvider
from rails_http.core.services.headers import compose_headers

T = TypeVar("T")


class RequestBuilder:
    """Builds request descriptions with the convention's headers.

    The token provider is injected, so the CSRF behavior is decided by the
    caller (settings, saved page, fixed value, or a fake in tests).
    """

    def __init__(self, token_provider: TokenProvider, convention: Convention = RAILS) -> None:
        self._token_provider = token_provider
        self._convention = convention

    @property
    def token_provider(self) -> TokenProvider:
        return self._token_provider

    @property
    def convention(self) -> Convention:
        return self._convention

    def request(self, config: RequestConfig[T]) -> RequestDescription[T]:
        headers = compose_headers(
            config.method,
            config.headers,
            self._token_provider,
            self._convention,
        )
        return RequestDescription(
            method=config.method,
            url=config.url,
            headers=tuple(headers),
            body=config.body,
            decoder=config.decoder,
            timeout=config.timeout,
            with_credentials=config.with_credentials,
        )

    def get(self, url: str, decoder: Decoder[T]) -> RequestDescription[T]:
        return self.request(RequestConfig(method="GET", url=url, decoder=decoder, body=EMPTY))

    def post(self, url: str, body: Body, decoder: Decoder[T]) -> RequestDescription[T]:
        return self.request(RequestConfig(method="POST", url=url, decoder=decoder, body=body))

    def put(self, url: str, body: Body, decoder: Decoder[T]) -> RequestDescription[T]:
        return self.request(RequestConfig(method="PUT", url=url, decoder=decoder, body=body))

    def patch(self, url: str, body: Body, decoder: Decoder[T]) -> RequestDescription[T]:
        return self.request(RequestConfig(method="PATCH", url=url, decoder=decoder, body=body))

    def delete(self, url: str, body: Body, decoder: Decoder[T]) -> RequestDescription[T]:
        return self.request(RequestConfig(method="DELETE", url=url, decoder=decoder, body=body))
