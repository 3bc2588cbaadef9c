"""Error decoding for completed requests.

Two tiers:
- transport errors are always kept as they are;
- server-declared errors are best-effort, only for bad-status responses.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from rails_http.core.decoding import Decoder
from rails_http.core.domain.models import BadStatus, CompositeError, Err, Ok
from rails_http.core.exceptions import DecodeError

logger = logging.getLogger(__name__)

T = TypeVar("T")
S = TypeVar("S")


def decode_errors(
    error_decoder: Decoder[S],
    outcome: Ok[T] | Err[Any],
) -> Ok[T] | Err[CompositeError[S]]:
    """Fold a request outcome into `Ok` or `Err(CompositeError)`.

    `Ok` is returned unchanged. For `BadStatus`, the raw body is decoded with
    `error_decoder`; a body that does not match leaves `server_error` empty.
    Other failures never reach the decoder.
    """

    if isinstance(outcome, Ok):
        return outcome

    failure = outcome.error
    if not isinstance(failure, BadStatus):
        return Err(CompositeError(transport_error=failure))

    try:
        server_error = error_decoder.decode_string(failure.body)
    except DecodeError as exc:
        logger.debug(
            "error body did not match decoder",
            extra={"status": failure.status, "reason": exc.message},
        )
        return Err(CompositeError(transport_error=failure))
    return Err(CompositeError(transport_error=failure, server_error=server_error))
