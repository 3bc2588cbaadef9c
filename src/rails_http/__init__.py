"""rails-http: XHR-style requests for Rails backends on top of httpx.

- Adds `Accept` / `X-Requested-With` to every request.
- Adds `X-CSRF-Token` to non-GET requests when a token is available.
- Decodes Rails JSON error bodies from bad-status responses.
"""

from __future__ import annotations

import logging

from rails_http.adapters.http_client import (
    build_async_client,
    build_client,
    send,
    send_async,
    to_httpx,
)
from rails_http.adapters.token_sources import (
    MetaTagTokenProvider,
    SettingsTokenProvider,
    StaticTokenProvider,
)
from rails_http.api import (
    csrf_token,
    default_builder,
    delete,
    get,
    patch,
    post,
    put,
    request,
    reset_default_builder,
)
from rails_http.core.config import AppSettings
from rails_http.core.decoding import Decoder, at, field, rails_errors
from rails_http.core.domain.body import EMPTY, Body, empty_body, json_body, string_body
from rails_http.core.domain.convention import RAILS, Convention
from rails_http.core.domain.models import (
    BadPayload,
    BadStatus,
    BadUrl,
    CompositeError,
    Err,
    InvalidRequest,
    NetworkError,
    Ok,
    Outcome,
    Timeout,
    TokenAbsent,
    TokenPresent,
    TokenResult,
    TransportError,
)
from rails_http.core.domain.request import RequestConfig, RequestDescription
from rails_http.core.exceptions import DecodeError, RailsHttpError
from rails_http.core.interfaces.token import TokenProvider
from rails_http.core.services.builder import RequestBuilder
from rails_http.core.services.errors import decode_errors
from rails_http.core.services.headers import compose_headers

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AppSettings",
    "BadPayload",
    "BadStatus",
    "BadUrl",
    "Body",
    "CompositeError",
    "Convention",
    "DecodeError",
    "Decoder",
    "EMPTY",
    "Err",
    "InvalidRequest",
    "MetaTagTokenProvider",
    "NetworkError",
    "Ok",
    "Outcome",
    "RAILS",
    "RailsHttpError",
    "RequestBuilder",
    "RequestConfig",
    "RequestDescription",
    "SettingsTokenProvider",
    "StaticTokenProvider",
    "Timeout",
    "TokenAbsent",
    "TokenPresent",
    "TokenProvider",
    "TokenResult",
    "TransportError",
    "at",
    "build_async_client",
    "build_client",
    "compose_headers",
    "csrf_token",
    "decode_errors",
    "default_builder",
    "delete",
    "empty_body",
    "field",
    "get",
    "json_body",
    "patch",
    "post",
    "put",
    "rails_errors",
    "request",
    "reset_default_builder",
    "send",
    "send_async",
    "string_body",
    "to_httpx",
]
