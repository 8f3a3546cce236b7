"""Token issuance and verification for the three-role access model.

Tokens are HS256-signed JWTs carrying `sub` (principal), `role` and `iat`.
They never expire and are never revoked server-side. Any token that fails to
decode, carries a bad signature or names an unknown role is treated as no
token at all: the caller is `public`.
"""

import hmac
import logging
import time
from dataclasses import dataclass
from datetime import datetime, timezone

from jose import jwt
from jose.exceptions import JOSEError

from navportal.models import Role
from navportal.settings import Credential

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"

_secret: str | None = None
_admins: list[Credential] = []
_guests: list[Credential] = []


@dataclass(frozen=True)
class TokenClaims:
    principal: str
    role: Role
    issued_at: datetime


def init_auth(
    secret: str,
    admins: list[Credential] | None = None,
    guests: list[Credential] | None = None,
) -> None:
    global _secret, _admins, _guests
    _secret = secret
    _admins = list(admins or [])
    _guests = list(guests or [])


def _key() -> str:
    assert _secret is not None, "Call init_auth() before using tokens"
    return _secret


def issue_token(principal: str, role: Role) -> str:
    claims = {"sub": principal, "role": role.value, "iat": int(time.time())}
    return jwt.encode(claims, _key(), algorithm=ALGORITHM)


def decode_token(token: str | None) -> TokenClaims | None:
    """Decode a token. Returns None for anything that does not verify."""
    if not token:
        return None
    try:
        payload = jwt.decode(token, _key(), algorithms=[ALGORITHM])
    except (JOSEError, ValueError) as e:
        logger.debug("rejected token: %s", e)
        return None
    try:
        role = Role(payload.get("role"))
        issued_at = datetime.fromtimestamp(int(payload.get("iat", 0)), tz=timezone.utc)
    except (ValueError, TypeError):
        logger.debug("rejected token claims: %r", payload)
        return None
    return TokenClaims(principal=str(payload.get("sub", "")), role=role, issued_at=issued_at)


def verify_token(token: str | None) -> Role:
    """Role carried by a token, or PUBLIC when it does not verify."""
    claims = decode_token(token)
    return claims.role if claims else Role.PUBLIC


def require_admin(token: str | None) -> bool:
    return verify_token(token) is Role.ADMIN


def check_credentials(username: str, password: str, role: Role) -> bool:
    """True if the pair matches a configured credential for role."""
    pool = {Role.ADMIN: _admins, Role.GUEST: _guests}.get(role, [])
    for u, p in pool:
        if hmac.compare_digest(u.encode(), username.encode()) and hmac.compare_digest(
            p.encode(), password.encode()
        ):
            return True
    return False


def login(username: str, password: str, role: Role) -> str | None:
    """Issue a token for role if the credentials match, else None."""
    if not check_credentials(username, password, role):
        logger.warning("failed %s login for %r", role.value, username)
        return None
    return issue_token(username, role)
