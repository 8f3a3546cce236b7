"""Health check and site configuration endpoints."""

from fastapi import APIRouter, Depends

from navportal import storage

from .deps import admin_token, raise_for_outcome
from .models import UpdateConfigBody

router = APIRouter()


@router.get("/health")
async def health():
    """Health check."""
    return {"status": "ok"}


@router.get("/config")
async def get_config():
    """Get title, subtitle and background image URLs."""
    return await storage.get_config()


@router.post("/config")
async def update_config(body: UpdateConfigBody, token: str = Depends(admin_token)):
    """Overwrite title and subtitle, optionally clearing all backgrounds."""
    outcome = await storage.update_config(
        token, body.title, body.subtitle, reset_background=body.reset_background
    )
    raise_for_outcome(outcome)
    return {"success": True}
