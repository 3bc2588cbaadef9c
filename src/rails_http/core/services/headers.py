"""Header composition.

Order of the result:
1) the convention's default headers
2) the CSRF header, unless the method is exempt or no token is available
3) caller headers, as given

Nothing is deduplicated: a caller `Accept` is sent next to the default one.
"""

from __future__ import annotations

import logging
from typing import Iterable

from rails_http.core.domain.convention import RAILS, Convention
from rails_http.core.domain.models import TokenPresent
from rails_http.core.interfaces.token import TokenProvider

logger = logging.getLogger(__name__)

Header = tuple[str, str]


def compose_headers(
    method: str,
    caller_headers: Iterable[Header],
    token_provider: TokenProvider,
    convention: Convention = RAILS,
) -> list[Header]:
    headers: list[Header] = list(convention.default_headers)

    if not convention.is_csrf_exempt(method):
        token = token_provider.get_token()
        if isinstance(token, TokenPresent):
            headers.append((convention.csrf_header, token.value))
        else:
            logger.debug("no csrf token available", extra={"method": method})

    headers.extend((name, value) for name, value in caller_headers)
    return headers
