"""Background image upload, delete and serving endpoints."""

from typing import Any

from fastapi import APIRouter, Depends, File, HTTPException, Response, UploadFile

from navportal import storage

from .deps import admin_token, raise_for_outcome
from .models import DeleteBackgroundBody

router = APIRouter()

# Served outside /api so image URLs in the config resolve directly.
image_router = APIRouter()


def _position(value: Any) -> int | None:
    """Integer position from a path segment or JSON value, else None."""
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None


@router.post("/background")
async def upload_background(
    background: UploadFile | None = File(None),
    token: str = Depends(admin_token),
):
    """Append an uploaded image (multipart field "background")."""
    if background is None:
        raise HTTPException(400, "No file found")
    data = await background.read()
    outcome = await storage.append_background(token, data, background.content_type or "")
    raise_for_outcome(outcome)
    return {"success": True, "backgroundImageUrl": storage.background_url(outcome.value)}


@router.delete("/background")
async def delete_background(body: DeleteBackgroundBody, token: str = Depends(admin_token)):
    """Delete the image at body.index. Later images shift down one position."""
    position = _position(body.index)
    if position is None:
        raise HTTPException(404, "Image not found")
    raise_for_outcome(await storage.delete_background(token, position))
    return {"success": True}


@image_router.get("/background-image/{position}")
async def get_background_image(position: str):
    """Serve the raw bytes of a background image."""
    index = _position(position)
    image = None if index is None else await storage.fetch_background(index)
    if image is None:
        raise HTTPException(404, "Not Found")
    data, mime_type = image
    return Response(content=data, media_type=mime_type)
