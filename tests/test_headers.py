import pytest

from rails_http.adapters.token_sources import StaticTokenProvider
from rails_http.core.domain.convention import RAILS, Convention
from rails_http.core.domain.models import TokenAbsent
from rails_http.core.services.headers import compose_headers

DEFAULTS = [
    ("Accept", "application/json, text/javascript, */*; q=0.01"),
    ("X-Requested-With", "XMLHttpRequest"),
]


class CountingProvider:
    def __init__(self, result):
        self.result = result
        self.calls = 0

    def get_token(self):
        self.calls += 1
        return self.result


@pytest.mark.parametrize("method", ["POST", "put", "Delete", "PATCH", "HEAD", "OPTIONS"])
def test_csrf_header_on_non_get_methods(method):
    headers = compose_headers(method, [], StaticTokenProvider("abc"))

    assert headers == DEFAULTS + [("X-CSRF-Token", "abc")]


@pytest.mark.parametrize("method", ["GET", "get", "Get", "gEt"])
def test_no_csrf_header_on_get(method):
    headers = compose_headers(method, [], StaticTokenProvider("abc"))

    assert headers == DEFAULTS
    assert all(name != "X-CSRF-Token" for name, _ in headers)


def test_get_never_queries_the_provider():
    provider = CountingProvider(TokenAbsent())

    compose_headers("GET", [], provider)

    assert provider.calls == 0


@pytest.mark.parametrize("method", ["GET", "POST", "DELETE"])
def test_no_csrf_header_when_token_absent(method):
    headers = compose_headers(method, [], StaticTokenProvider(None))

    assert headers == DEFAULTS


def test_empty_token_counts_as_absent():
    assert compose_headers("POST", [], StaticTokenProvider("")) == DEFAULTS


def test_caller_headers_follow_defaults_and_token_in_order():
    caller = [("X-B", "2"), ("X-A", "1"), ("X-B", "3")]

    headers = compose_headers("POST", caller, StaticTokenProvider("abc"))

    assert headers[:3] == DEFAULTS + [("X-CSRF-Token", "abc")]
    assert headers[3:] == caller


def test_caller_headers_are_not_deduplicated():
    headers = compose_headers("GET", [("Accept", "text/html")], StaticTokenProvider(None))

    accepts = [value for name, value in headers if name == "Accept"]
    assert accepts == ["application/json, text/javascript, */*; q=0.01", "text/html"]


def test_exactly_one_csrf_header():
    headers = compose_headers("POST", [("X-Other", "1")], StaticTokenProvider("abc"))

    assert [h for h in headers if h[0] == "X-CSRF-Token"] == [("X-CSRF-Token", "abc")]


def test_caller_iterable_is_consumed_once():
    caller = iter([("X-One", "1")])

    assert compose_headers("GET", caller, StaticTokenProvider(None))[-1] == ("X-One", "1")


def test_custom_convention():
    convention = Convention(
        default_headers=(("Accept", "application/vnd.api+json"),),
        csrf_header="X-XSRF-TOKEN",
        csrf_exempt_methods=frozenset({"GET", "HEAD"}),
    )

    assert compose_headers("HEAD", [], StaticTokenProvider("t"), convention) == [
        ("Accept", "application/vnd.api+json"),
    ]
    assert compose_headers("post", [], StaticTokenProvider("t"), convention) == [
        ("Accept", "application/vnd.api+json"),
        ("X-XSRF-TOKEN", "t"),
    ]


def test_rails_convention_table():
    assert list(RAILS.default_headers) == DEFAULTS
    assert RAILS.csrf_header == "X-CSRF-Token"
    assert RAILS.is_csrf_exempt("get")
    assert not RAILS.is_csrf_exempt("HEAD")
