"""Main FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.responses import ORJSONResponse

from api.exception_handlers import setup_exception_handlers
from api.middleware.cors import CORSHeadersMiddleware
from api.middleware.logging import RequestLoggingMiddleware
from api.middleware.request_id import RequestIDMiddleware
from api.routes.health import VERSION
from api.routes.health import router as health_router
from api.routes.webhook import router as webhook_router
from core.config import settings
from core.logging import setup_logging
from infrastructure.database.session import engine

logger = structlog.get_logger()

# Initialize structured logging
setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager for startup/shutdown tasks."""
    logger.info("bot_started", webhook_path=settings.webhook_path, env=settings.app_env)
    yield
    await engine.dispose()
    logger.info("bot_stopped")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
        title=settings.app_name,
        description=(
            "## JUSTICE Telegram Bot\n\n"
            "Webhook that answers Telegram bot commands with data from the "
            "JUSTICE social platform.\n\n"
            "### Commands\n"
            "- `/start`: welcome text with the chat id used to link an account\n"
            "- `/posts`: the five latest published posts\n"
            "- `/myprofile`: the linked profile with post and like totals\n"
            "- `/help`: command overview\n\n"
            "### Acknowledgment\n"
            "Every parseable update is acknowledged with `{\"ok\": true}`. "
            "Only a malformed body yields a 500."
        ),
        version=VERSION,
        debug=settings.debug,
        license_info={
            "name": "MIT",
        },
        openapi_tags=[
            {
                "name": "health",
                "description": "Health check endpoints",
            },
            {
                "name": "telegram",
                "description": "Telegram webhook",
            },
        ],
    )

    # Middleware (LIFO order - last added = outermost)
    app.add_middleware(CORSHeadersMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Setup exception handlers
    setup_exception_handlers(app)

    # Include routers
    app.include_router(health_router)
    app.include_router(webhook_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production,
    )
