"""Shared fixtures for envlex tests."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _isolate_environment(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no ENVLEX_* overrides.

    Keeps a developer's own .env, .envlex.toml or shell variables from
    leaking into SDK and CLI defaults.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ENVLEX_ENV_FILE", raising=False)
    monkeypatch.delenv("ENVLEX_ENCODING", raising=False)


@pytest.fixture()
def sample_env(tmp_path):
    """Create a sample .env file and return its path."""
    content = """\
# Service credentials
TWILIO_API_SID=ACxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxx
MESSAGING_PROVIDER=twilio

  INDENTED=yes
INLINE_COMMENT=some_value # this is a comment
NO_SPACE_COMMENT=abc#def
DATABASE_HOST=db.internal:5432
"""
    p = tmp_path / "sample.env"
    p.write_text(content)
    return p


@pytest.fixture()
def bad_env(tmp_path):
    """Create a .env file with a missing value on line 2 and return its path."""
    p = tmp_path / "bad.env"
    p.write_text("GOOD=value\nBROKEN=\n")
    return p
