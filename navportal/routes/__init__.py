"""FastAPI endpoints.

API endpoints live under /api: login, guest-login, config, categories,
background (upload/delete), health. Background images themselves are served
at /background-image/{position}, outside the API prefix, because that is the
URL form handed out in the config.
"""

from fastapi import APIRouter

from .auth import router as auth_router
from .backgrounds import image_router
from .backgrounds import router as backgrounds_router
from .categories import router as categories_router
from .config import router as config_router

router = APIRouter()
router.include_router(config_router)
router.include_router(auth_router)
router.include_router(categories_router)
router.include_router(backgrounds_router)

__all__ = ["router", "image_router"]
