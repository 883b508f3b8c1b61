import sys
from pathlib import Path

# Load environment variables FIRST, before any other imports
from dotenv import load_dotenv
load_dotenv()

# Add project root to path (for IDE compatibility when running directly)
project_root = Path(__file__).parent.parent.resolve()
project_root_str = str(project_root)

if sys.path and Path(sys.path[0]).name == 'application':
    sys.path[0] = project_root_str
elif project_root_str not in sys.path:
    sys.path.insert(0, project_root_str)

import asyncio
import logging

from quart import Quart
from quart_rate_limiter import RateLimiter
from quart_schema import QuartSchema

from application.routes import chat_bp, contact_bp, status_bp
from application.routes.common.cors import apply_cors
from application.routes.common.error_handlers import register_error_handlers
from common.config import config as settings

logger = logging.getLogger(__name__)


def configure_logging(level: str = settings.APP_LOG_LEVEL, log_file: str = settings.APP_LOG_FILE) -> None:
    """Configure root logging to both stdout and a file for debugging/triage."""
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="a"))

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=log_format,
        handlers=handlers,
    )


def create_app() -> Quart:
    """Build the relay application with its blueprints and middleware."""
    app = Quart(__name__)

    # Initialize rate limiter
    RateLimiter(app)

    QuartSchema(
        app,
        info={"title": "Portfolio Relay", "version": "1.0.0"},
        tags=[
            {"name": "Chat", "description": "Chat relay to the upstream AI provider"},
            {"name": "Contact", "description": "Contact form verification and email"},
            {"name": "System", "description": "System and health endpoints"},
        ],
    )

    register_error_handlers(app)

    # CORS headers on every response, errors included
    app.after_request(apply_cors)

    # Register blueprints
    app.register_blueprint(chat_bp, url_prefix="/api")
    app.register_blueprint(contact_bp, url_prefix="/api")
    app.register_blueprint(status_bp)

    return app


app = create_app()


if __name__ == "__main__":
    from hypercorn.asyncio import serve
    from hypercorn.config import Config

    configure_logging()

    config = Config()
    config.bind = [f"{settings.APP_HOST}:{settings.APP_PORT}"]

    if settings.APP_DEBUG:
        config.loglevel = "DEBUG"
        config.accesslog = "-"  # Log to stdout
        config.errorlog = "-"

    logger.info(f"Starting relay on {settings.APP_HOST}:{settings.APP_PORT}")
    logger.info(f"Debug mode: {settings.APP_DEBUG}")

    asyncio.run(serve(app, config))
