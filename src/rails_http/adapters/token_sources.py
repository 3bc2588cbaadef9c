"""CSRF token providers.

Rails renders the token into the page layout with `csrf_meta_tags`:

    <meta name="csrf-token" content="...">

Outside a browser, the same value reaches us either through configuration
(env var) or through a saved copy of such a page.
"""

from __future__ import annotations

import logging
from pathlib import Path

from bs4 import BeautifulSoup

from rails_http.core.config import AppSettings
from rails_http.core.domain.models import TokenAbsent, TokenPresent, TokenResult

logger = logging.getLogger(__name__)

_ABSENT = TokenAbsent()


def _result(value: str | None) -> TokenResult:
    if value:
        return TokenPresent(value)
    return _ABSENT


def extract_meta_token(html: str, meta_name: str = "csrf-token") -> str | None:
    """Return the `content` of `<meta name=meta_name>`, or `None`."""

    if not html:
        return None
    soup = BeautifulSoup(html, "html.parser")
    tag = soup.find("meta", attrs={"name": meta_name})
    if tag is None or not tag.get("content"):
        return None
    return str(tag.get("content")).strip() or None


class StaticTokenProvider:
    """Fixed token; `None` or empty string means absent."""

    def __init__(self, value: str | None = None) -> None:
        self._result = _result(value)

    def get_token(self) -> TokenResult:
        return self._result


class MetaTagTokenProvider:
    """Token read from a page's csrf meta tag. The page is parsed once."""

    def __init__(self, html: str, meta_name: str = "csrf-token") -> None:
        self._html = html
        self._meta_name = meta_name
        self._cached: TokenResult | None = None

    def get_token(self) -> TokenResult:
        if self._cached is None:
            self._cached = _result(extract_meta_token(self._html, self._meta_name))
        return self._cached


class SettingsTokenProvider:
    """Ambient token from `AppSettings`.

    Order:
    1) `csrf_token` (env `RAILS_HTTP_CSRF_TOKEN`)
    2) meta tag in the page at `csrf_page_path`
    3) absent

    The read happens once; the outcome is fixed for the provider's lifetime.
    """

    def __init__(self, settings: AppSettings | None = None) -> None:
        self._settings = settings or AppSettings()
        self._cached: TokenResult | None = None

    def get_token(self) -> TokenResult:
        if self._cached is None:
            self._cached = self._read()
        return self._cached

    def _read(self) -> TokenResult:
        if self._settings.csrf_token:
            return TokenPresent(self._settings.csrf_token)

        path = self._settings.csrf_page_path
        if path is None:
            return _ABSENT
        html = _read_page(path)
        if html is None:
            return _ABSENT
        return _result(extract_meta_token(html, self._settings.csrf_meta_name))


def _read_page(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("csrf page unreadable, token absent", extra={"path": str(path), "error": str(exc)})
        return None
