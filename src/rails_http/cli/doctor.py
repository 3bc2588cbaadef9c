"""Doctor command for configuration diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from rails_http.adapters.http_client import build_client, send
from rails_http.adapters.token_sources import SettingsTokenProvider, extract_meta_token
from rails_http.cli.ui_components import describe_token, describe_transport_error
from rails_http.core.config import AppSettings
from rails_http.core.decoding import Decoder
from rails_http.core.domain.models import BadStatus, Ok
from rails_http.core.domain.request import RequestConfig
from rails_http.core.services.builder import RequestBuilder

_console = Console()


def _check_page(settings: AppSettings) -> tuple[str, str]:
    path = settings.csrf_page_path
    if path is None:
        return "SKIP", "RAILS_HTTP_CSRF_PAGE_PATH not set"
    try:
        html = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        return "FAIL", str(exc)
    if extract_meta_token(html, settings.csrf_meta_name) is None:
        return "FAIL", f'no <meta name="{settings.csrf_meta_name}"> with content in {path}'
    return "OK", str(path)


def _check_http(settings: AppSettings) -> tuple[str, str]:
    if not settings.base_url:
        return "SKIP", "RAILS_HTTP_BASE_URL not set"
    builder = RequestBuilder(SettingsTokenProvider(settings))
    description = builder.request(
        RequestConfig(method="GET", url="/", decoder=Decoder.succeed(None), timeout=10.0)
    )
    with build_client(settings) as client:
        outcome = send(client, description)
    if isinstance(outcome, Ok):
        return "OK", settings.base_url
    # Any answer from the server means it is reachable.
    status = "OK" if isinstance(outcome.error, BadStatus) else "FAIL"
    return status, describe_transport_error(outcome.error)


def run() -> None:
    """Show configuration, token detection and connectivity."""

    settings = AppSettings()

    table = Table(title="rails-http Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    token = SettingsTokenProvider(settings).get_token()
    table.add_row("CSRF token", "OK", describe_token(token))
    table.add_row("Token from env", "OK" if settings.csrf_token else "SKIP", "RAILS_HTTP_CSRF_TOKEN")

    page_status, page_detail = _check_page(settings)
    table.add_row("Token page", page_status, page_detail)

    http_status, http_detail = _check_http(settings)
    table.add_row("HTTP connectivity", http_status, http_detail)

    _console.print(table)

    if page_status == "FAIL" or http_status == "FAIL":
        raise typer.Exit(code=1)
