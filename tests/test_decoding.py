from enum import Enum

import pytest
from pydantic import BaseModel

from rails_http.core.decoding import Decoder, at, field, rails_errors
from rails_http.core.exceptions import DecodeError


class User(BaseModel):
    id: int
    name: str


class Attr(Enum):
    NAME = "name"
    EMAIL = "email"


def test_model_decoder():
    user = Decoder.of(User).decode_string('{"id": 1, "name": "Ada"}')

    assert user == User(id=1, name="Ada")


def test_model_decoder_mismatch():
    with pytest.raises(DecodeError) as info:
        Decoder.of(User).decode_string('{"id": "nope"}')

    assert isinstance(info.value, ValueError)


def test_invalid_json():
    with pytest.raises(DecodeError, match="invalid JSON"):
        Decoder.raw().decode_string("{oops")


def test_bytes_input():
    assert Decoder.of(list[int]).decode_string(b"[1, 2]") == [1, 2]


def test_field_reports_path():
    decoder = at(["errors", "name"], Decoder.of(list[str]))

    with pytest.raises(DecodeError) as info:
        decoder.decode_value({"errors": {"email": []}})

    assert info.value.path == ("errors", "name")


def test_field_on_non_object():
    with pytest.raises(DecodeError):
        field("a", Decoder.raw()).decode_value([1, 2])


def test_map():
    decoder = field("count", Decoder.of(int)).map(lambda n: n * 2)

    assert decoder.decode_string('{"count": 21}') == 42


def test_map_errors_become_decode_errors():
    decoder = Decoder.raw().map(lambda value: value["missing"])

    with pytest.raises(DecodeError):
        decoder.decode_value({})


def test_any_map_failure_becomes_decode_error():
    decoder = Decoder.raw().map(lambda value: value.missing_attr)

    with pytest.raises(DecodeError, match="missing_attr"):
        decoder.decode_string('{"a": 1}')


def test_succeed_ignores_body():
    assert Decoder.succeed("done").decode_string("") == "done"
    assert Decoder.succeed(None).decode_string("<html>") is None


def test_rails_errors_with_string_keys():
    errors = rails_errors().decode_string('{"errors": {"name": ["is too short"]}}')

    assert errors == {"name": ["is too short"]}


def test_rails_errors_with_field_mapping():
    decoder = rails_errors({"name": Attr.NAME, "email": Attr.EMAIL})

    errors = decoder.decode_string('{"errors": {"email": ["is invalid"]}}')

    assert errors == {Attr.EMAIL: ["is invalid"]}


def test_rails_errors_rejects_unknown_attribute():
    decoder = rails_errors({"name": Attr.NAME})

    with pytest.raises(DecodeError, match="unknown attribute 'age'"):
        decoder.decode_string('{"errors": {"age": ["must be positive"]}}')


def test_rails_errors_requires_errors_key():
    with pytest.raises(DecodeError):
        rails_errors().decode_string('{"error": "Not found"}')
