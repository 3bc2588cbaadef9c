"""JSON decoders.

A `Decoder[T]` turns a response body into a `T` or raises `DecodeError`.
Type validation is delegated to pydantic (`TypeAdapter`), so models,
containers and scalars are all supported with the same constructor.

Example, reading the messages for one attribute of a Rails error payload:

    at(["errors", "name"], Decoder.of(list[str]))
"""

from __future__ import annotations

import json
from typing import Any, Callable, Generic, Hashable, Iterable, Mapping, TypeVar

from pydantic import TypeAdapter, ValidationError

from rails_http.core.exceptions import DecodeError

T = TypeVar("T")
U = TypeVar("U")
F = TypeVar("F", bound=Hashable)


class Decoder(Generic[T]):
    def __init__(self, run: Callable[[Any], T], *, parse_body: bool = True) -> None:
        self._run = run
        self._parse_body = parse_body

    # -- constructors -------------------------------------------------------

    @classmethod
    def of(cls, type_: Any) -> "Decoder[Any]":
        """Validate the JSON value against any type pydantic understands."""

        adapter = TypeAdapter(type_)
        return cls(adapter.validate_python)

    @classmethod
    def raw(cls) -> "Decoder[Any]":
        return cls(lambda value: value)

    @classmethod
    def succeed(cls, value: U) -> "Decoder[U]":
        """Ignore the body entirely (e.g. `204 No Content`)."""

        return cls(lambda _value: value, parse_body=False)

    # -- running ------------------------------------------------------------

    def decode_value(self, value: Any) -> T:
        try:
            return self._run(value)
        except DecodeError:
            raise
        except ValidationError as exc:
            raise DecodeError(_summarize(exc)) from exc
        # Mapping functions are caller code; any failure in them is a failed decode.
        except Exception as exc:
            raise DecodeError(str(exc) or type(exc).__name__) from exc

    def decode_string(self, raw: str | bytes) -> T:
        if not self._parse_body:
            return self.decode_value(None)
        try:
            value = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise DecodeError(f"invalid JSON: {exc}") from exc
        return self.decode_value(value)

    # -- combinators --------------------------------------------------------

    def map(self, fn: Callable[[T], U]) -> "Decoder[U]":
        return Decoder(lambda value: fn(self.decode_value(value)), parse_body=self._parse_body)


def _summarize(exc: ValidationError) -> str:
    first = exc.errors()[0] if exc.error_count() else {}
    loc = ".".join(str(p) for p in first.get("loc", ()))
    msg = first.get("msg", "validation failed")
    return f"{msg} at {loc}" if loc else msg


def field(name: str, inner: Decoder[T]) -> Decoder[T]:
    def run(value: Any) -> T:
        if not isinstance(value, dict) or name not in value:
            raise DecodeError(f"expected an object with field '{name}'", path=(name,))
        try:
            return inner.decode_value(value[name])
        except DecodeError as exc:
            raise DecodeError(exc.message, path=(name, *exc.path)) from exc

    return Decoder(run)


def at(path: Iterable[str], inner: Decoder[T]) -> Decoder[T]:
    decoder = inner
    for name in reversed(list(path)):
        decoder = field(name, decoder)
    return decoder


def rails_errors(fields: Mapping[str, F] | None = None) -> Decoder[dict[Any, list[str]]]:
    """Decode `{"errors": {"<attribute>": ["message", ...]}}`.

    Without `fields`, attribute names stay strings. With it, each attribute
    is translated through the mapping and an unmapped attribute fails.
    """

    messages = field("errors", Decoder.of(dict[str, list[str]]))

    def run(value: Any) -> dict[Any, list[str]]:
        errors = messages.decode_value(value)
        if fields is None:
            return errors
        out: dict[Any, list[str]] = {}
        for attribute, texts in errors.items():
            if attribute not in fields:
                raise DecodeError(f"unknown attribute '{attribute}'", path=("errors", attribute))
            out[fields[attribute]] = texts
        return out

    return Decoder(run)
