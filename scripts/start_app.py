#!/usr/bin/env python3
"""Serve the Quill API with uvicorn."""

import sys

import logfire
import uvicorn

from quill.config import Settings
from quill.util.logging import setup_logging
from quill.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    logfire.info("Starting Quill", host=settings.host, port=settings.port)
    try:
        uvicorn.run(
            "quill.interface.api.app:create_app",
            factory=True,
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception:
        logfire.exception("Quill failed to start")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
