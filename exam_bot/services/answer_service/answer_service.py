"""Answer service - classifies an update and drives OCR, completion and replies."""

import logging

from pydantic import ValidationError

from exam_bot.config import Settings
from exam_bot.constants import (
    ANSWER_FAILED_MESSAGE,
    ONBOARDING_MESSAGE,
    PHOTO_FAILED_MESSAGE,
    UNSUPPORTED_INPUT_MESSAGE,
)
from exam_bot.errors import ExamBotError, ParseError
from exam_bot.repository.llm_repo import CompletionRepository
from exam_bot.repository.ocr_repo import OCRRepository
from exam_bot.repository.telegram_repo import OutboundReply, TelegramRepository
from exam_bot.services.answer_service.dto import (
    HandleResult,
    InboundMessage,
    InboundUpdate,
    UpdateKind,
)
from exam_bot.services.prompt_service import PromptService
from exam_bot.utils.chunking import split_message
from exam_bot.utils.scratch import read_scratch, scratch_file

logger = logging.getLogger(__name__)


class AnswerService:
    """Turns one inbound webhook update into zero or more replies."""

    def __init__(
        self,
        settings: Settings,
        telegram_repo: TelegramRepository,
        ocr_repo: OCRRepository,
        llm_repo: CompletionRepository,
        prompt_service: PromptService,
    ):
        self.settings = settings
        self.telegram = telegram_repo
        self.ocr = ocr_repo
        self.llm = llm_repo
        self.prompts = prompt_service
        self.commands = frozenset(settings.start_commands)

    @staticmethod
    def parse_update(body: str | bytes) -> InboundUpdate:
        try:
            return InboundUpdate.model_validate_json(body)
        except ValidationError as e:
            raise ParseError(f"an error has occurred when parsing body: {e}") from e

    def classify(self, message: InboundMessage) -> UpdateKind:
        # Text wins over photo when both are present
        if message.text:
            if message.text in self.commands:
                return UpdateKind.COMMAND
            return UpdateKind.TEXT
        if not message.photo:
            return UpdateKind.UNSUPPORTED
        return UpdateKind.PHOTO

    async def handle_update(self, body: str | bytes) -> HandleResult:
        """
        Process a raw webhook body.

        Raises:
            ParseError: body is not a valid update
            ExamBotError: reply could not be sent, or photo processing failed
                in strict mode
        """
        update = self.parse_update(body)
        message = update.message
        if message is None:
            logger.info(f"Update {update.update_id} carries no message, skipping")
            return HandleResult(kind=UpdateKind.IGNORED)

        kind = self.classify(message)
        logger.info(
            f"Received {kind.value} message {message.message_id} in chat {message.chat.id}"
        )

        if kind is UpdateKind.COMMAND:
            text = ONBOARDING_MESSAGE
        elif kind is UpdateKind.TEXT:
            text = await self._answer(message.text or "")
        elif kind is UpdateKind.UNSUPPORTED:
            text = UNSUPPORTED_INPUT_MESSAGE
        else:
            text = await self._answer_photo(message)

        reply = OutboundReply(
            chat_id=message.chat.id,
            text=text,
            reply_to_message_id=message.message_id,
            parse_mode=self.settings.reply_parse_mode,
        )
        chunks_sent = await self._send(reply)
        return HandleResult(kind=kind, reply=reply, chunks_sent=chunks_sent)

    async def _answer(self, prompt: str) -> str:
        system_prompt = self.prompts.get_system_prompt()
        try:
            return await self.llm.complete(system_prompt, prompt)
        except ExamBotError as e:
            logger.error(f"Failed to proceed prompt in YaGPT: {e}")
            return ANSWER_FAILED_MESSAGE

    async def _answer_photo(self, message: InboundMessage) -> str:
        # Last size is the largest one
        file_id = message.photo[-1].file_id
        try:
            prompt = await self._recognize_photo(file_id)
        except ExamBotError as e:
            if not self.settings.degrade_photo_failures:
                raise
            logger.error(f"Failed to recognize photo {file_id}: {e}")
            return PHOTO_FAILED_MESSAGE

        if not prompt.strip():
            logger.warning(f"No text recognized on photo {file_id}")
        return await self._answer(prompt)

    async def _recognize_photo(self, file_id: str) -> str:
        url = await self.telegram.resolve_file_url(file_id)
        with scratch_file(suffix=".jpg", directory=self.settings.scratch_dir) as path:
            await self.telegram.download(url, path)
            image = read_scratch(path)
        return await self.ocr.recognize(image)

    async def _send(self, reply: OutboundReply) -> int:
        chunks = split_message(reply.text, self.settings.max_message_length)
        for chunk in chunks:
            await self.telegram.send_reply(
                OutboundReply(
                    chat_id=reply.chat_id,
                    text=chunk,
                    reply_to_message_id=reply.reply_to_message_id,
                    parse_mode=reply.parse_mode,
                )
            )
        return len(chunks)
