"""CSRF token source contract.

Why Protocol:
- Structural contract (duck typing) without rigid inheritance.
- Lets the ambient read (env, saved page, fixed value) be swapped for a
  fake in tests, instead of living as hidden global state.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from rails_http.core.domain.models import TokenResult


@runtime_checkable
class TokenProvider(Protocol):
    """Minimal contract for a token source.

    Rules:
    - Absence is returned as `TokenAbsent`, never raised.
    - Repeated calls give the same outcome; implementations may cache.
    """

    def get_token(self) -> TokenResult:
        ...
