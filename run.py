#!/usr/bin/env python3
"""
Entry point script to run the relay.

This script should be run from the project root directory:
    python run.py

Environment variables:
    APP_HOST: Host to bind to (default: 127.0.0.1)
    APP_PORT: Port to bind to (default: 8000)
    APP_DEBUG: Enable debug mode (default: false)
    APP_LOG_FILE: Log file path (default: app-log.log)
    APP_LOG_LEVEL: Root log level (default: INFO)
"""
import asyncio
import logging

from hypercorn.asyncio import serve
from hypercorn.config import Config

if __name__ == "__main__":
    from application.app import app, configure_logging
    from common.config import config as settings

    configure_logging()
    logger = logging.getLogger("run")

    config = Config()
    config.bind = [f"{settings.APP_HOST}:{settings.APP_PORT}"]

    if settings.APP_DEBUG:
        config.loglevel = "DEBUG"
        config.accesslog = "-"  # Log to stdout
        config.errorlog = "-"

    logger.info(f"Starting relay on {settings.APP_HOST}:{settings.APP_PORT}")
    logger.info(f"Upstream timeout: {settings.UPSTREAM_TIMEOUT_SECONDS} seconds")
    logger.info(f"Debug mode: {settings.APP_DEBUG}")

    asyncio.run(serve(app, config))
