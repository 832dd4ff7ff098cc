"""Telegram repository - file lookup, download and replies over aiogram."""

import asyncio
import logging
import math
from pathlib import Path

import aiohttp
from aiogram import Bot
from aiogram.exceptions import (
    TelegramAPIError,
    TelegramBadRequest,
    TelegramConflictError,
    TelegramEntityTooLarge,
    TelegramForbiddenError,
    TelegramNetworkError,
    TelegramNotFound,
    TelegramRetryAfter,
    TelegramServerError,
    TelegramUnauthorizedError,
)
from aiogram.types import ReplyParameters

from exam_bot.errors import NetworkError, ParseError, RequestError, SendError, StorageError
from exam_bot.repository.telegram_repo.dto import OutboundReply

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: dict[type[TelegramAPIError], int] = {
    TelegramBadRequest: 400,
    TelegramUnauthorizedError: 401,
    TelegramForbiddenError: 403,
    TelegramNotFound: 404,
    TelegramConflictError: 409,
    TelegramRetryAfter: 429,
    TelegramServerError: 500,
}


def _status_of(error: TelegramAPIError) -> int | None:
    for error_type, status in _STATUS_BY_ERROR.items():
        if isinstance(error, error_type):
            return status
    return None


class TelegramRepository:
    """Thin wrapper over the Telegram Bot API."""

    def __init__(self, bot: Bot, timeout: float = 30.0):
        self.bot = bot
        self.timeout = timeout

    @property
    def _request_timeout(self) -> int:
        # aiohttp treats 0 as "no timeout"
        return max(1, math.ceil(self.timeout))

    async def resolve_file_url(self, file_id: str) -> str:
        """Look up file metadata and build its download URL."""
        try:
            file = await self.bot.get_file(file_id, request_timeout=self._request_timeout)
        except TelegramEntityTooLarge as e:
            raise RequestError(f"failed to get file path: {e}", status=413, body=e.message) from e
        except TelegramNetworkError as e:
            raise NetworkError(f"failed to get file path: {e}") from e
        except TelegramAPIError as e:
            raise RequestError(
                f"failed to get file path: {e}",
                status=_status_of(e),
                body=e.message,
            ) from e

        if not file.file_path:
            raise ParseError(f"getFile returned no file_path for {file_id}")

        return self.bot.session.api.file_url(self.bot.token, file.file_path)

    async def download(self, url: str, destination: Path) -> int:
        """
        Stream a file into destination.

        Returns:
            Number of bytes written
        """
        written = 0
        try:
            with open(destination, "wb") as f:
                async for chunk in self.bot.session.stream_content(
                    url=url,
                    timeout=self._request_timeout,
                    raise_for_status=True,
                ):
                    f.write(chunk)
                    written += len(chunk)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise NetworkError(f"failed to download image: {e}") from e
        except OSError as e:
            raise StorageError(f"failed to write image to {destination}: {e}") from e

        logger.debug(f"Downloaded {written} bytes into {destination}")
        return written

    async def send_reply(self, reply: OutboundReply) -> None:
        """Send one message as a reply. Any API error is fatal for the caller."""
        try:
            await self.bot.send_message(
                chat_id=reply.chat_id,
                text=reply.text,
                parse_mode=reply.parse_mode,
                reply_parameters=ReplyParameters(message_id=reply.reply_to_message_id),
                request_timeout=self._request_timeout,
            )
        except TelegramEntityTooLarge as e:
            raise SendError(
                f"failed to send reply tg message: 413 {e.message}",
                status=413,
                body=e.message,
            ) from e
        except TelegramNetworkError as e:
            raise NetworkError(f"failed to send reply: {e}") from e
        except TelegramAPIError as e:
            status = _status_of(e)
            raise SendError(
                f"failed to send reply tg message: {status} {e.message}",
                status=status,
                body=e.message,
            ) from e
