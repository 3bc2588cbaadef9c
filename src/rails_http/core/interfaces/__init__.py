"""Core interfaces.

Why:
- Defines contracts (Protocol) implemented by concrete adapters.
- Inverts dependencies: the core depends on abstractions.
"""

from rails_http.core.interfaces.token import TokenProvider

__all__ = ["TokenProvider"]
