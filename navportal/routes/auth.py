"""Admin and guest login endpoints."""

from fastapi import APIRouter, HTTPException

from navportal import auth
from navportal.models import Role

from .models import LoginBody

router = APIRouter()


def _login(body: LoginBody, role: Role, error: str) -> dict:
    token = auth.login(body.username, body.password, role)
    if token is None:
        raise HTTPException(401, error)
    return {"success": True, "role": role.value, "token": token}


@router.post("/login")
async def admin_login(body: LoginBody):
    """Exchange admin credentials for an admin token."""
    return _login(body, Role.ADMIN, "Invalid username or password")


@router.post("/guest-login")
async def guest_login(body: LoginBody):
    """Exchange guest credentials for a guest token."""
    return _login(body, Role.GUEST, "Invalid guest username or password")
