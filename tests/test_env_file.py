"""Tests for .env file loading."""

from __future__ import annotations

import pytest

from envlex.env_file import parse_env_file, parse_env_string
from envlex.errors import MissingValueError


def test_parse_standard_env(sample_env):
    result = parse_env_file(sample_env)
    assert result["TWILIO_API_SID"] == "ACxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxx"
    assert result["MESSAGING_PROVIDER"] == "twilio"


def test_parse_indented_key(sample_env):
    assert parse_env_file(sample_env)["INDENTED"] == "yes"


def test_parse_inline_comment(sample_env):
    result = parse_env_file(sample_env)
    assert result["INLINE_COMMENT"] == "some_value"
    assert result["NO_SPACE_COMMENT"] == "abc"


def test_parse_colon_in_value(sample_env):
    assert parse_env_file(sample_env)["DATABASE_HOST"] == "db.internal:5432"


def test_file_order_preserved(sample_env):
    assert list(parse_env_file(sample_env)) == [
        "TWILIO_API_SID",
        "MESSAGING_PROVIDER",
        "INDENTED",
        "INLINE_COMMENT",
        "NO_SPACE_COMMENT",
        "DATABASE_HOST",
    ]


def test_empty_file(tmp_path):
    p = tmp_path / "empty.env"
    p.write_text("")
    assert parse_env_file(p) == {}


def test_comments_only(tmp_path):
    p = tmp_path / "comments.env"
    p.write_text("# just a comment\n# another\n")
    assert parse_env_file(p) == {}


def test_parse_error_propagates(bad_env):
    with pytest.raises(MissingValueError) as exc_info:
        parse_env_file(bad_env)
    assert exc_info.value.line == 2


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        parse_env_file(tmp_path / "nope.env")


def test_encoding(tmp_path):
    p = tmp_path / "latin.env"
    p.write_bytes("NAME=caf\xe9\n".encode("latin-1"))
    assert parse_env_file(p, encoding="latin-1") == {"NAME": "café"}
    with pytest.raises(UnicodeDecodeError):
        parse_env_file(p)


def test_parse_env_string():
    assert parse_env_string("A=1\nB=2") == {"A": "1", "B": "2"}
