"""Dependency container - builds repositories and services from settings."""

import logging

from aiogram import Bot
from aiogram.client.session.aiohttp import AiohttpSession

from exam_bot.config import Settings
from exam_bot.repository.llm_repo import CompletionRepository
from exam_bot.repository.ocr_repo import OCRRepository
from exam_bot.repository.telegram_repo import TelegramRepository
from exam_bot.services.answer_service import AnswerService
from exam_bot.services.prompt_service import PromptService

logger = logging.getLogger(__name__)


def create_bot(settings: Settings) -> Bot:
    """Create Telegram bot with a bounded request timeout."""
    session = AiohttpSession(timeout=settings.http_timeout)
    bot = Bot(token=settings.telegram_bot_token, session=session)
    logger.info("Telegram bot created")
    return bot


class Container:
    """Owns every client session needed to answer updates."""

    def __init__(self, settings: Settings, bot: Bot | None = None):
        self.settings = settings
        self.bot = bot or create_bot(settings)
        self.telegram_repo = TelegramRepository(self.bot, timeout=settings.http_timeout)
        self.ocr_repo = OCRRepository(settings)
        self.llm_repo = CompletionRepository(settings)
        self.prompt_service = PromptService(settings.system_prompt_path)
        self.answer_service = AnswerService(
            settings=settings,
            telegram_repo=self.telegram_repo,
            ocr_repo=self.ocr_repo,
            llm_repo=self.llm_repo,
            prompt_service=self.prompt_service,
        )

    async def close(self) -> None:
        await self.ocr_repo.close()
        await self.llm_repo.close()
        await self.bot.session.close()

    async def __aenter__(self) -> "Container":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
