"""Request bodies.

A body carries its own `Content-Type`: the request builder never forces or
inspects it.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, TypeAdapter


_ANY = TypeAdapter(Any)


@dataclass(frozen=True)
class Body:
    content_type: str | None = None
    content: bytes = b""

    @property
    def is_empty(self) -> bool:
        return self.content_type is None and not self.content


EMPTY = Body()


def empty_body() -> Body:
    return EMPTY


def json_body(value: Any) -> Body:
    """Serialize `value` as JSON (pydantic models included)."""

    if isinstance(value, BaseModel):
        payload = value.model_dump(mode="json")
    else:
        payload = _ANY.dump_python(value, mode="json")
    text = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    return Body(content_type="application/json", content=text.encode("utf-8"))


def string_body(content_type: str, text: str) -> Body:
    return Body(content_type=content_type, content=text.encode("utf-8"))
