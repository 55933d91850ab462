import time

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from posts_gateway.application import di
from posts_gateway.application.di import Container
from posts_gateway.fastapi.api.router import router as api_router
from posts_gateway.fastapi.errors import register_error_handlers
from posts_gateway.fastapi.misc.router import router as misc_router


def init(container: Container) -> FastAPI:
    app_settings = container.settings.app()

    # interactive docs are only served in development
    docs_enabled = app_settings.is_development
    app = FastAPI(
        title=app_settings.name,
        version=app_settings.release_ver,
        docs_url="/docs" if docs_enabled else None,
        redoc_url=None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(misc_router)
    app.include_router(api_router, prefix="/api")
    register_error_handlers(app)

    app.state.container = container
    app.state.logger = structlog.getLogger()
    app.state.started_at = time.monotonic()

    @app.on_event("startup")
    async def on_startup() -> None:
        # shutdown closes only the handle opened here
        match container.settings.app().storage_backend:
            case "supabase":
                app.state.close_storage = container.database.http_client().aclose
            case "postgres":
                app.state.close_storage = container.database.engine().dispose

    @app.on_event("shutdown")
    async def on_shutdown() -> None:
        await app.state.close_storage()

    return app


def get_asgi_app() -> FastAPI:
    container = di.init()
    return init(container)
