"""Result values of the domain.

Why tagged values instead of exceptions:
- Every operation of the library is total: it always returns something.
- The caller branches with `isinstance` (or `match`) on a closed set of
  variants, the same way for the token read, a transport failure, or a
  decoded server error.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")
S = TypeVar("S")


# ---------------------------------------------------------------------------
# Token result
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TokenPresent:
    """A CSRF token was found."""

    value: str


@dataclass(frozen=True)
class TokenAbsent:
    """No CSRF token is available. A normal outcome, not an error."""


TokenResult = Union[TokenPresent, TokenAbsent]


# ---------------------------------------------------------------------------
# Outcome
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

    @property
    def is_ok(self) -> bool:
        return False


Outcome = Union[Ok[T], Err[E]]


# ---------------------------------------------------------------------------
# Transport errors (taxonomy of the HTTP layer)
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BadUrl:
    """The URL could not be used to build or route the request."""

    url: str


@dataclass(frozen=True)
class Timeout:
    """The request did not complete within its timeout."""


@dataclass(frozen=True)
class NetworkError:
    """Connection-level failure (DNS, refused, reset, TLS...)."""

    reason: str = ""


@dataclass(frozen=True)
class BadStatus:
    """The server answered with a status outside 200-299.

    `body` is the raw response text, kept so that a server-declared error
    payload can be decoded later.
    """

    status: int
    body: str
    headers: tuple[tuple[str, str], ...] = field(default=(), compare=False)


@dataclass(frozen=True)
class BadPayload:
    """A 2xx response whose body did not match the response decoder."""

    message: str
    status: int
    body: str


@dataclass(frozen=True)
class InvalidRequest:
    """The request could not be encoded (e.g. a non-ASCII header value)."""

    reason: str


TransportError = Union[BadUrl, InvalidRequest, Timeout, NetworkError, BadStatus, BadPayload]


@dataclass(frozen=True)
class CompositeError(Generic[S]):
    """Transport failure plus, for bad-status responses, the decoded body.

    Invariant: `server_error` is only set when `transport_error` is a
    `BadStatus`.
    """

    transport_error: TransportError
    server_error: S | None = None

    def __post_init__(self) -> None:
        if self.transport_error is None:
            raise ValueError("CompositeError requires a transport_error")
        if self.server_error is not None and not isinstance(self.transport_error, BadStatus):
            raise ValueError("server_error requires a BadStatus transport_error")

    @property
    def status(self) -> int | None:
        """HTTP status when the server answered, `None` otherwise."""

        if isinstance(self.transport_error, (BadStatus, BadPayload)):
            return self.transport_error.status
        return None
