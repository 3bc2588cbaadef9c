import httpx
import pytest
import typer
from typer.testing import CliRunner

from rails_http.cli import main as cli_main
from rails_http.cli.main import app, parse_header

runner = CliRunner()


def _mock_client(handler):
    return lambda settings: httpx.Client(transport=httpx.MockTransport(handler))


def test_parse_header():
    assert parse_header("X-Trace: 1:2") == ("X-Trace", "1:2")
    with pytest.raises(typer.BadParameter):
        parse_header("no-colon")


def test_headers_post_with_token():
    result = runner.invoke(app, ["headers", "post", "--token", "abcdefgh", "-H", "X-Extra: 1"])

    assert result.exit_code == 0, result.output
    assert "X-CSRF-Token" in result.output
    assert "X-Extra" in result.output
    assert "abcdef..." in result.output


def test_headers_get_has_no_token():
    result = runner.invoke(app, ["headers", "GET", "--token", "abc"])

    assert result.exit_code == 0, result.output
    assert "X-CSRF-Token" not in result.output
    assert "X-Requested-With" in result.output


def test_send_success(monkeypatch):
    monkeypatch.setattr(cli_main, "build_client", _mock_client(lambda r: httpx.Response(200, json={"id": 7})))

    result = runner.invoke(app, ["send", "GET", "https://example.com/users/7"])

    assert result.exit_code == 0, result.output
    assert '"id": 7' in result.output


def test_send_shows_rails_errors(monkeypatch):
    body = {"errors": {"name": ["can't be blank"]}}
    monkeypatch.setattr(cli_main, "build_client", _mock_client(lambda r: httpx.Response(422, json=body)))

    result = runner.invoke(app, ["send", "POST", "https://example.com/users", "--json", "{}"])

    assert result.exit_code == 1
    assert "bad status 422" in result.output
    assert "can't be blank" in result.output


def test_send_non_ascii_header_is_reported(monkeypatch):
    monkeypatch.setattr(cli_main, "build_client", _mock_client(lambda r: httpx.Response(200, json={})))

    result = runner.invoke(app, ["send", "GET", "https://example.com/users", "-H", "X-Name: é"])

    assert result.exit_code == 1
    assert "invalid request" in result.output


def test_send_rejects_invalid_json():
    result = runner.invoke(app, ["send", "POST", "https://example.com/users", "--json", "{nope"])

    assert result.exit_code != 0


def test_doctor_without_configuration():
    result = runner.invoke(app, ["doctor"])

    assert result.exit_code == 0, result.output
    assert "CSRF token" in result.output
    assert "absent" in result.output


def test_doctor_reports_missing_page(monkeypatch, tmp_path):
    monkeypatch.setenv("RAILS_HTTP_CSRF_PAGE_PATH", str(tmp_path / "missing.html"))

    result = runner.invoke(app, ["doctor"])

    assert result.exit_code == 1
