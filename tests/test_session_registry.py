"""Tests for loading and parsing the session registry."""

import json

import pytest

from clawscope.errors import FileReadError, ParseError
from clawscope.session.registry import SessionEntry, load_registry, parse_registry


class TestParseRegistry:
    def test_parses_updated_at(self):
        registry = parse_registry(json.dumps({"agent:main:main": {"updatedAt": 1234}}))
        assert registry == {"agent:main:main": SessionEntry(updated_at=1234)}

    def test_extra_fields_ignored(self):
        content = json.dumps(
            {
                "s1": {
                    "updatedAt": 42,
                    "sessionId": "abc",
                    "chatType": "direct",
                    "origin": {"provider": "discord"},
                }
            }
        )
        assert parse_registry(content)["s1"].updated_at == 42

    def test_empty_object(self):
        assert parse_registry("{}") == {}

    def test_negative_timestamp_allowed(self):
        assert parse_registry('{"s": {"updatedAt": -1}}')["s"].updated_at == -1

    def test_invalid_json(self):
        with pytest.raises(ParseError, match="Failed to parse sessions.json"):
            parse_registry("{not json")

    def test_top_level_must_be_object(self):
        with pytest.raises(ParseError):
            parse_registry('[{"updatedAt": 1}]')

    def test_entry_must_be_object(self):
        with pytest.raises(ParseError):
            parse_registry('{"s": 1}')

    def test_missing_updated_at(self):
        with pytest.raises(ParseError, match="updatedAt"):
            parse_registry('{"s": {"sessionId": "x"}}')

    @pytest.mark.parametrize("value", ['"1234"', "12.5", "true", "null"])
    def test_updated_at_must_be_integer(self, value):
        with pytest.raises(ParseError):
            parse_registry('{"s": {"updatedAt": %s}}' % value)

    def test_error_chains_validation_error(self):
        with pytest.raises(ParseError) as exc_info:
            parse_registry("nope")
        assert exc_info.value.__cause__ is not None


class TestLoadRegistry:
    def test_loads_file(self, write_registry):
        path = write_registry({"a": {"updatedAt": 1}, "b": {"updatedAt": 2}})
        registry = load_registry(path)
        assert set(registry) == {"a", "b"}
        assert registry["b"].updated_at == 2

    def test_missing_file(self, tmp_path):
        path = tmp_path / "missing" / "sessions.json"
        with pytest.raises(FileReadError) as exc_info:
            load_registry(path)
        assert exc_info.value.path == path
        assert str(path) in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_directory_instead_of_file(self, tmp_path):
        with pytest.raises(FileReadError):
            load_registry(tmp_path)

    def test_invalid_utf8(self, sessions_file):
        sessions_file.parent.mkdir(parents=True)
        sessions_file.write_bytes(b'{"s": {"updatedAt": 1}, "\xff": 2}')
        with pytest.raises(FileReadError):
            load_registry(sessions_file)

    def test_malformed_file(self, write_registry):
        path = write_registry("{")
        with pytest.raises(ParseError):
            load_registry(path)
