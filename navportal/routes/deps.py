"""Shared request helpers: bearer token extraction and outcome mapping."""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from navportal import auth
from navportal.errors import Outcome, Status

bearer_scheme = HTTPBearer(auto_error=False)

_STATUS_CODES = {
    Status.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    Status.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    Status.INVALID: status.HTTP_400_BAD_REQUEST,
}


async def bearer_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str | None:
    """The raw bearer token, or None. Verification happens in the store."""
    if credentials is None:
        return None
    return credentials.credentials


def raise_for_outcome(outcome: Outcome) -> None:
    if not outcome.ok:
        raise HTTPException(_STATUS_CODES[outcome.status], outcome.message)


async def admin_token(token: str | None = Depends(bearer_token)) -> str:
    """Bearer token that must carry the admin role.

    Dependencies resolve before the request body is validated, so callers
    without admin rights get 403 whatever body they send.
    """
    if not auth.require_admin(token):
        raise HTTPException(status.HTTP_403_FORBIDDEN, "Admin role required")
    return token
