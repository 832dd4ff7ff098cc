"""FastAPI application receiving Telegram webhook updates."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from exam_bot import __version__
from exam_bot.config import Settings, get_settings
from exam_bot.container import Container
from exam_bot.handlers.http_handler import setup_routes

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Builds the container unless one was injected, registers the webhook
    when a public URL is configured, and closes client sessions on shutdown.
    """
    if app.state.settings is None:
        app.state.settings = get_settings()
    settings: Settings = app.state.settings
    logging.getLogger().setLevel(settings.log_level.upper())
    logger.info("Starting application...")

    owns_container = app.state.container is None
    if owns_container:
        app.state.container = Container(settings)
    container: Container = app.state.container

    if settings.telegram_webhook_url:
        await container.bot.set_webhook(
            url=settings.telegram_webhook_url,
            secret_token=settings.telegram_webhook_secret,
            allowed_updates=["message"],
        )
        logger.info("Telegram webhook registered")

    logger.info("Application started successfully")

    yield

    logger.info("Shutting down application...")
    if owns_container:
        await container.close()
    logger.info("Application shutdown complete")


def create_app(settings: Settings | None = None, container: Container | None = None) -> FastAPI:
    app = FastAPI(
        title="Exam Helper Bot",
        description="Answers exam questions sent to a Telegram bot as text or photo",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.container = container
    setup_routes(app)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("exam_bot.main:app", host="0.0.0.0", port=8000)
