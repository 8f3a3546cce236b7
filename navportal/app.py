import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from navportal import auth, storage
from navportal.errors import UpstreamError
from navportal.routes import image_router, router
from navportal.settings import Settings, load_settings

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, store: storage.KVStore | None = None) -> FastAPI:
    settings = settings or load_settings()
    storage.init_storage(settings.data_dir, store=store)
    auth.init_auth(settings.secret_key, settings.admins, settings.guests)

    app = FastAPI(title="Nav Portal")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.exception_handler(UpstreamError)
    async def upstream_error_handler(request: Request, exc: UpstreamError):
        logger.error("store failure on %s %s: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=502, content={"error": exc.message})

    app.include_router(router, prefix="/api")
    app.include_router(image_router)
    return app
