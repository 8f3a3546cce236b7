"""Tests for token issuance, verification and credential checks."""

import base64
from datetime import datetime, timezone

from jose import jwt

from navportal import auth
from navportal.models import Role


# ── Issue / decode ───────────────────────────────────────────


def test_issue_and_decode_roundtrip():
    token = auth.issue_token("alice", Role.ADMIN)
    claims = auth.decode_token(token)
    assert claims is not None
    assert claims.principal == "alice"
    assert claims.role is Role.ADMIN
    assert claims.issued_at <= datetime.now(timezone.utc)


def test_verify_guest_token():
    assert auth.verify_token(auth.issue_token("bob", Role.GUEST)) is Role.GUEST


def test_verify_missing_token_is_public():
    assert auth.verify_token(None) is Role.PUBLIC
    assert auth.verify_token("") is Role.PUBLIC


def test_verify_garbage_token_is_public():
    assert auth.verify_token("not-a-token") is Role.PUBLIC
    assert auth.verify_token("a.b.c") is Role.PUBLIC


def test_unsigned_legacy_token_rejected():
    """A plain base64 "user:role:ts" token no longer grants anything."""
    legacy = base64.b64encode(b"admin:admin:1700000000000").decode()
    assert auth.verify_token(legacy) is Role.PUBLIC


def test_token_signed_with_other_key_rejected():
    forged = jwt.encode({"sub": "eve", "role": "admin", "iat": 1}, "other-key", algorithm="HS256")
    assert auth.verify_token(forged) is Role.PUBLIC


def test_unknown_role_rejected():
    token = jwt.encode({"sub": "eve", "role": "superuser", "iat": 1}, "test-secret", algorithm="HS256")
    assert auth.decode_token(token) is None
    assert auth.verify_token(token) is Role.PUBLIC


def test_require_admin():
    assert auth.require_admin(auth.issue_token("a", Role.ADMIN)) is True
    assert auth.require_admin(auth.issue_token("g", Role.GUEST)) is False
    assert auth.require_admin(None) is False
    assert auth.require_admin("junk") is False


# ── Credentials ──────────────────────────────────────────────


def test_check_credentials_admin():
    assert auth.check_credentials("admin", "admin-pass", Role.ADMIN)
    assert auth.check_credentials("root", "root-pass", Role.ADMIN)
    assert not auth.check_credentials("admin", "wrong", Role.ADMIN)


def test_guest_credentials_do_not_grant_admin():
    assert auth.check_credentials("guest", "guest-pass", Role.GUEST)
    assert not auth.check_credentials("guest", "guest-pass", Role.ADMIN)
    assert not auth.check_credentials("admin", "admin-pass", Role.GUEST)


def test_check_credentials_non_ascii():
    auth.init_auth("k", admins=[("管理员", "密码")])
    assert auth.check_credentials("管理员", "密码", Role.ADMIN)
    assert not auth.check_credentials("管理员", "x", Role.ADMIN)


def test_login_issues_role_token():
    token = auth.login("guest", "guest-pass", Role.GUEST)
    assert token is not None
    assert auth.verify_token(token) is Role.GUEST


def test_login_failure_returns_none():
    assert auth.login("nobody", "nothing", Role.ADMIN) is None
