"""
FastAPI application entry point.
Builds the store client, mounts routes, metrics and static pages; the lifespan
creates the schema and seeds categories.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from prometheus_client import make_asgi_app

from buildstore.api.errors import register_exception_handlers
from buildstore.api.router import api_router
from buildstore.config import Settings, get_settings
from buildstore.core.logging import configure_logging
from buildstore.db.init_db import init_db
from buildstore.db.session import build_engine, build_session_maker
from buildstore.web import mount_static


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: create tables and seed categories. Shutdown: release the engine."""
    await init_db(app.state.engine)
    yield
    await app.state.engine.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Building-materials catalog and account API.",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Store client, injected into request handlers through get_db
    app.state.settings = settings
    app.state.engine = build_engine(settings)
    app.state.session_maker = build_session_maker(app.state.engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(api_router)

    # Prometheus metrics at /metrics
    app.mount("/metrics", make_asgi_app())

    mount_static(app, settings.static_dir)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn on the configured port."""
    settings = app.state.settings
    logger.info("Server is running on http://localhost:{}", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
