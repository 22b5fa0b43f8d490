"""Logfire setup.

Services log with ``logfire.info``/``warn``/``error`` and wrap operations in
``logfire.span("<service>.<method>", ...)``. This module only wires the
exporters and the FastAPI and SQLAlchemy integrations.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from quill.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once at process start.

    Without a token (and without ``send_to_logfire`` forced on) everything
    stays on the console.
    """
    observability = settings.observability
    send_to_logfire = observability.send_to_logfire
    if send_to_logfire is None:
        send_to_logfire = observability.logfire_token is not None

    logfire.configure(
        service_name="quill",
        service_version="0.1.0",
        environment=settings.environment,
        token=observability.logfire_token,
        send_to_logfire=send_to_logfire,
        console=logfire.ConsoleOptions(
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )
    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request handled by ``app``."""
    # Headers would leak the session cookie
    logfire.instrument_fastapi(app, capture_headers=False)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement run through ``engine``."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
