"""Request values.

`RequestConfig` is what the caller asks for; `RequestDescription` is what
the builder produces once headers are composed. Neither performs I/O:
execution belongs to the HTTP adapter.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

from rails_http.core.decoding import Decoder
from rails_http.core.domain.body import EMPTY, Body

T = TypeVar("T")


@dataclass(frozen=True)
class RequestConfig(Generic[T]):
    method: str
    url: str
    decoder: Decoder[T]
    body: Body = EMPTY
    headers: Sequence[tuple[str, str]] = ()
    timeout: float | None = None
    with_credentials: bool = False


@dataclass(frozen=True)
class RequestDescription(Generic[T]):
    """Immutable, not-yet-executed request."""

    method: str
    url: str
    headers: tuple[tuple[str, str], ...]
    body: Body
    decoder: Decoder[T]
    timeout: float | None = None
    with_credentials: bool = False

    def header_values(self, name: str) -> list[str]:
        """All values sent for `name` (case-insensitive), in order."""

        lowered = name.lower()
        return [value for key, value in self.headers if key.lower() == lowered]
