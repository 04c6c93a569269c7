from __future__ import annotations

from src.ggql.result import _UNPARSED, JSONResult

BODY = b'{"data":{"hello":"world","items":[{"name":"a"},{"name":"b"}],"empty":null},"errors":[{"message":"partial"}]}'


def test_get_by_dotted_path():
    assert JSONResult(BODY).get("data.hello").value == "world"


def test_get_array_index_and_wildcard():
    result = JSONResult(BODY)
    assert result.get("data.items[1].name").value == "b"
    assert result.get("data.items[*].name").value == ["a", "b"]


def test_missing_path_is_missing_node():
    node = JSONResult(BODY).get("data.nope.deeper")
    assert not node.exists
    assert node.value is None
    assert node.string(default="-") == "-"


def test_null_field_exists():
    node = JSONResult(BODY).get("data.empty")
    assert node.exists
    assert node.value is None


def test_item_access_and_envelope_shortcuts():
    result = JSONResult(BODY)
    assert result["data"]["items"][0]["name"].value == "a"
    assert result["data"]["items"][5].exists is False
    assert result.errors[0]["message"].string() == "partial"
    assert result.data.get("hello").value == "world"


def test_invalid_json_is_not_an_error():
    result = JSONResult(b"<html>bad gateway</html>")
    assert result.is_valid is False
    assert result.exists is False
    assert result.get("data.hello").exists is False
    assert result.text == "<html>bad gateway</html>"
    assert repr(result) == "JSONResult(<invalid>)"


def test_decoding_is_deferred_until_first_access():
    result = JSONResult(b"not json")
    assert result.raw == b"not json"
    assert result._value is _UNPARSED
    assert result.is_valid is False


def test_string_renders_non_strings_as_json():
    result = JSONResult(BODY)
    assert result.get("data.items[0]").string() == '{"name":"a"}'
    assert result.get("data.items[0]").raw == b'{"name":"a"}'
    assert JSONResult("[1, 2]").get("$").value == [1, 2]


def test_deeply_nested_body_is_invalid_not_an_error():
    result = JSONResult(b"[" * 100000 + b"]" * 100000)
    assert result.is_valid is False
    assert result.value is None
    assert result.get("$[0]").exists is False


def test_str_renders_node_text():
    result = JSONResult(BODY)
    assert str(result.get("data.hello")) == "world"
    assert str(result.get("data.items[0]")) == '{"name":"a"}'
    assert str(result.get("data.nope")) == ""
