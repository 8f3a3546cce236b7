"""Category tree endpoints."""

from fastapi import APIRouter, Depends

from navportal import auth, storage
from navportal.models import Category

from .deps import admin_token, raise_for_outcome

router = APIRouter()


@router.get("/categories")
async def get_categories(token: str | None = None):
    """Get the category tree. Private entries need a guest or admin token."""
    return await storage.get_tree(auth.verify_token(token))


@router.post("/categories")
async def replace_categories(body: list[Category], token: str = Depends(admin_token)):
    """Replace the whole category tree."""
    raise_for_outcome(await storage.replace_tree(token, body))
    return {"success": True}
