"""FastAPI application factory."""

from fastapi import FastAPI

from quill.interface.api.errors import register_error_handlers
from quill.interface.api.routes import articles, comments, health, users
from quill.util.di.container import create_container, setup_di
from quill.util.observability import instrument_fastapi

ROUTERS = (health.router, articles.router, comments.router, users.router)


def create_app() -> FastAPI:
    """Build the API.

    Logfire must already be configured (``scripts/start_app.py`` does this),
    otherwise the instrumentation only logs to the console.
    """
    app = FastAPI(
        title="Quill API",
        description="Blog engine with threaded comments and group permissions",
        version="0.1.0",
    )
    instrument_fastapi(app)
    setup_di(app, create_container())
    register_error_handlers(app)

    for router in ROUTERS:
        app.include_router(router)
    return app
