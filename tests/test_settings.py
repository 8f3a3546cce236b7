"""Tests for environment settings parsing."""

import logging
from pathlib import Path

from navportal.settings import DEFAULT_DATA_DIR, load_settings, parse_credentials


def test_parse_credentials_by_prefix():
    env = {
        "ADMIN_2": "second:pw2",
        "ADMIN": "first:pw1",
        "USER_A": "guest:gpw",
        "PATH": "/usr/bin",
    }
    assert parse_credentials(env, "ADMIN") == [("first", "pw1"), ("second", "pw2")]
    assert parse_credentials(env, "USER") == [("guest", "gpw")]


def test_parse_credentials_password_with_colon():
    assert parse_credentials({"ADMIN": "me:a:b"}, "ADMIN") == [("me", "a:b")]


def test_parse_credentials_skips_malformed():
    assert parse_credentials({"ADMIN": "nocolon"}, "ADMIN") == []


def test_load_settings_from_mapping(tmp_path):
    settings = load_settings({
        "DATA_DIR": str(tmp_path),
        "SECRET_KEY": "s3cret",
        "ADMIN1": "a:b",
        "USER1": "c:d",
    })
    assert settings.data_dir == Path(tmp_path)
    assert settings.secret_key == "s3cret"
    assert settings.admins == [("a", "b")]
    assert settings.guests == [("c", "d")]


def test_load_settings_defaults():
    settings = load_settings({})
    assert settings.data_dir == DEFAULT_DATA_DIR
    assert settings.secret_key  # random fallback
    assert settings.admins == []
    assert settings.guests == []


def test_os_user_variables_ignored_quietly(caplog):
    env = {"USER": "alice", "USERNAME": "alice", "USERPROFILE": "/home/alice", "USER_1": "g:p"}
    with caplog.at_level(logging.WARNING, logger="navportal.settings"):
        assert parse_credentials(env, "USER") == [("g", "p")]
    assert caplog.records == []
