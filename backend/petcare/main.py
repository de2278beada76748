"""Module: main."""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from petcare.api.v1.api import api_router
from petcare.api.v1.routes.health import health_payload
from petcare.core.config import settings
from petcare.core.errors import register_exception_handlers
from petcare.core.logging_config import setup_logging
from petcare.core.uploads import URL_PREFIX, ensure_upload_dirs
from petcare.db.init_db import init_db


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


def create_app() -> FastAPI:
    setup_logging(settings.log_level)

    app = FastAPI(title=settings.app_name, version=settings.app_version, lifespan=lifespan)

    origins = settings.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Browsers reject credentials with a wildcard origin.
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(api_router, prefix="/api")
    app.mount(URL_PREFIX, StaticFiles(directory=ensure_upload_dirs()), name="uploads")

    @app.get("/health", tags=["health"])
    def health():
        return {"success": True, "message": "Server is running", **health_payload()}

    return app


app = create_app()


def run() -> None:
    uvicorn.run("petcare.main:app", host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
