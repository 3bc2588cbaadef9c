"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from presentation details.
- Tables/panels are reused by several commands.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from rails_http.core.domain.models import (
    BadPayload,
    BadStatus,
    BadUrl,
    CompositeError,
    InvalidRequest,
    NetworkError,
    Timeout,
    TokenPresent,
    TokenResult,
    TransportError,
)


def mask_token(token: str) -> str:
    """Show only the first 6 chars of a token."""

    return token[:6] + "..." if len(token) > 6 else token


def describe_token(result: TokenResult) -> str:
    if isinstance(result, TokenPresent):
        return f"present ({mask_token(result.value)})"
    return "absent"


def build_headers_table(headers: Iterable[tuple[str, str]], *, title: str = "Headers") -> Table:
    """Headers in send order; duplicates are listed as sent."""

    table = Table(title=title)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    for index, (name, value) in enumerate(headers, start=1):
        table.add_row(str(index), name, value)
    return table


def describe_transport_error(error: TransportError) -> str:
    if isinstance(error, BadStatus):
        return f"bad status {error.status}"
    if isinstance(error, BadPayload):
        return f"bad payload ({error.message})"
    if isinstance(error, Timeout):
        return "timeout"
    if isinstance(error, NetworkError):
        return f"network error ({error.reason})"
    if isinstance(error, BadUrl):
        return f"bad url ({error.url})"
    if isinstance(error, InvalidRequest):
        return f"invalid request ({error.reason})"
    return repr(error)


def build_error_panel(error: CompositeError[Mapping[Any, list[str]]]) -> Panel:
    """Panel for a failed request, with the Rails error list when decoded."""

    body = Text()
    body.append(describe_transport_error(error.transport_error) + "\n", style="bold red")
    if error.server_error:
        body.append("\n")
        for attribute, messages in error.server_error.items():
            for message in messages:
                body.append(f"- {attribute}: ", style="bold")
                body.append(f"{message}\n")
    elif isinstance(error.transport_error, BadStatus) and error.transport_error.body:
        body.append("\n")
        body.append(error.transport_error.body[:500], style="dim")

    return Panel(body, title=Text("Request failed", style="bold red"), border_style="red")
