"""Backend conventions (header table).

Why a table:
- The fixed header values and the CSRF rule belong to one backend framework
  (Rails). Isolating them lets another backend be supported by passing a
  different `Convention`, without touching the composer.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Convention(BaseModel):
    """Headers sent on every request plus the CSRF rule."""

    model_config = ConfigDict(frozen=True)

    default_headers: tuple[tuple[str, str], ...] = Field(
        default=(),
        description="Headers prepended to every request, in order.",
    )
    csrf_header: str = Field(
        default="X-CSRF-Token",
        min_length=1,
        description="Header carrying the CSRF token on state-changing requests.",
    )
    csrf_exempt_methods: frozenset[str] = Field(
        default=frozenset({"GET"}),
        description="Methods (upper case) that never carry the CSRF header.",
    )

    def is_csrf_exempt(self, method: str) -> bool:
        return method.upper() in self.csrf_exempt_methods


RAILS = Convention(
    default_headers=(
        ("Accept", "application/json, text/javascript, */*; q=0.01"),
        ("X-Requested-With", "XMLHttpRequest"),
    ),
    csrf_header="X-CSRF-Token",
    csrf_exempt_methods=frozenset({"GET"}),
)
