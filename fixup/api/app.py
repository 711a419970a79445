# fixup/api/app.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fixup.core.config import settings
from fixup.core.errors import register_exception_handlers
from fixup.core.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(title: str, routers=()) -> FastAPI:
    """FastAPI app with the shared middleware, error envelope and ``/v1`` routers."""
    setup_logging(settings)

    app = FastAPI(title=title, redirect_slashes=False)
    register_exception_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins_list(),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Accept", "Authorization", "Content-Type", "X-CSRF-Token"],
        max_age=300,
    )

    for router in routers:
        app.include_router(router, prefix="/v1")

    return app
