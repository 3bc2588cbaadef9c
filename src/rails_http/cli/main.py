"""rails-http CLI.

A debugging aid: preview the headers a request would carry, or send one
and read the Rails error list the server answered with.
"""

from __future__ import annotations

import json

import typer
from rich.console import Console

from rails_http.adapters.http_client import build_client, send
from rails_http.adapters.token_sources import SettingsTokenProvider, StaticTokenProvider
from rails_http.cli import doctor
from rails_http.cli.ui_components import build_error_panel, build_headers_table, describe_token
from rails_http.core.config import AppSettings
from rails_http.core.decoding import Decoder, rails_errors
from rails_http.core.domain.body import EMPTY, Body, json_body
from rails_http.core.domain.models import Ok
from rails_http.core.domain.request import RequestConfig
from rails_http.core.interfaces.token import TokenProvider
from rails_http.core.logging import configure_logging
from rails_http.core.services.builder import RequestBuilder
from rails_http.core.services.errors import decode_errors

app = typer.Typer(no_args_is_help=True, help="Rails-flavored XHR requests over httpx.")
app.command(name="doctor")(doctor.run)

_console = Console()


def parse_header(raw: str) -> tuple[str, str]:
    name, sep, value = raw.partition(":")
    if not sep or not name.strip():
        raise typer.BadParameter(f"expected 'Name: value', got {raw!r}")
    return name.strip(), value.strip()


def _provider(token: str | None, settings: AppSettings) -> TokenProvider:
    if token is not None:
        return StaticTokenProvider(token)
    return SettingsTokenProvider(settings)


def _body(raw_json: str | None) -> Body:
    if raw_json is None:
        return EMPTY
    try:
        return json_body(json.loads(raw_json))
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"invalid JSON body: {exc.msg} at position {exc.pos}") from exc


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging to stderr."),
) -> None:
    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level)


@app.command()
def headers(
    method: str = typer.Argument(..., help="HTTP method, e.g. GET or POST."),
    header: list[str] | None = typer.Option(None, "--header", "-H", help="Extra header 'Name: value'."),
    token: str | None = typer.Option(None, "--token", help="CSRF token (overrides configuration)."),
) -> None:
    """Print the headers a request would carry, in send order."""

    settings = AppSettings()
    provider = _provider(token, settings)
    builder = RequestBuilder(provider)
    description = builder.request(
        RequestConfig(
            method=method.upper(),
            url="/",
            decoder=Decoder.raw(),
            headers=[parse_header(h) for h in header or []],
        )
    )
    _console.print(build_headers_table(description.headers, title=f"{description.method} headers"))
    _console.print(f"CSRF token: {describe_token(provider.get_token())}", style="dim")


@app.command(name="send")
def send_command(
    method: str = typer.Argument(..., help="HTTP method."),
    url: str = typer.Argument(..., help="Absolute URL, or path relative to RAILS_HTTP_BASE_URL."),
    data: str | None = typer.Option(None, "--json", help="JSON request body."),
    header: list[str] | None = typer.Option(None, "--header", "-H", help="Extra header 'Name: value'."),
    timeout: float | None = typer.Option(None, "--timeout", min=0, help="Timeout in seconds."),
    with_credentials: bool = typer.Option(False, "--with-credentials", help="Send the cookie jar."),
    token: str | None = typer.Option(None, "--token", help="CSRF token (overrides configuration)."),
) -> None:
    """Send a request and show the JSON answer or the Rails errors."""

    settings = AppSettings()
    builder = RequestBuilder(_provider(token, settings))
    description = builder.request(
        RequestConfig(
            method=method.upper(),
            url=url,
            decoder=Decoder.raw(),
            body=_body(data),
            headers=[parse_header(h) for h in header or []],
            timeout=timeout,
            with_credentials=with_credentials,
        )
    )

    with build_client(settings) as client:
        outcome = decode_errors(rails_errors(), send(client, description))

    if isinstance(outcome, Ok):
        _console.print_json(json.dumps(outcome.value))
        return

    _console.print(build_error_panel(outcome.error))
    raise typer.Exit(code=1)


def run() -> None:
    app()
