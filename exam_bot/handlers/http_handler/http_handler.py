"""HTTP handlers - FastAPI routes for health check and the Telegram webhook."""

import logging
import secrets

from fastapi import FastAPI, Header, HTTPException, Request
from fastapi.responses import JSONResponse

from exam_bot.config import Settings
from exam_bot.errors import ExamBotError, ParseError
from exam_bot.handlers.http_handler.dto import WebhookAck
from exam_bot.services.answer_service import AnswerService

logger = logging.getLogger(__name__)


def setup_routes(app: FastAPI) -> None:
    """Register HTTP routes on the FastAPI app."""

    @app.get("/health")
    async def health_check():
        return {"status": "ok"}

    @app.post("/webhook", response_model=WebhookAck)
    async def telegram_webhook(
        request: Request,
        x_telegram_bot_api_secret_token: str | None = Header(default=None),
    ):
        settings: Settings = request.app.state.settings
        answer_service: AnswerService = request.app.state.container.answer_service

        secret = settings.telegram_webhook_secret
        if secret and not secrets.compare_digest(
            (x_telegram_bot_api_secret_token or "").encode(), secret.encode()
        ):
            logger.warning("Rejected webhook call with a wrong secret token")
            raise HTTPException(status_code=403, detail="Forbidden")

        body = await request.body()

        try:
            result = await answer_service.handle_update(body)
        except ParseError as e:
            logger.error(f"Malformed update: {e}")
            return JSONResponse(
                content=WebhookAck(ok=False, error="malformed update").model_dump(),
                status_code=400,
            )
        except ExamBotError as e:
            logger.error(f"Failed to handle update: {e}")
            return JSONResponse(
                content=WebhookAck(ok=False, error="update failed").model_dump(),
                status_code=500,
            )

        logger.info(f"Handled {result.kind.value} update, {result.chunks_sent} message(s) sent")
        return WebhookAck()
