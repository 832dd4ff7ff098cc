"""LLM repository - raw YandexGPT completion calls."""

import logging

import aiohttp

from exam_bot.config import Settings
from exam_bot.constants import NO_ANSWER_SENTINEL
from exam_bot.errors import ParseError
from exam_bot.repository.base import BaseHTTPRepository
from exam_bot.repository.llm_repo.dto import CompletionMessage, CompletionRequest

logger = logging.getLogger(__name__)


class CompletionRepository(BaseHTTPRepository):
    """YandexGPT Foundation Models completion client."""

    service_name = "yagpt"

    def __init__(self, settings: Settings, session: aiohttp.ClientSession | None = None):
        super().__init__(timeout=settings.http_timeout, session=session)
        self.settings = settings

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"{self.settings.llm_auth_scheme} {self.settings.llm_api_key}",
        }

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        """
        Ask the model to answer user_prompt under system_prompt.

        Returns:
            Text of the first alternative, or NO_ANSWER_SENTINEL when there are none

        Raises:
            RequestError: non-success status
            NetworkError: transport failure
            ParseError: malformed answer
        """
        request = CompletionRequest(
            model_uri=self.settings.llm_model_uri,
            messages=[
                CompletionMessage(role="system", text=system_prompt),
                CompletionMessage(role="user", text=user_prompt),
            ],
            temperature=self.settings.llm_temperature,
            max_tokens=self.settings.llm_max_tokens,
        )

        data = await self._post_json(self.settings.llm_url, request.to_payload(), self._headers())

        try:
            alternatives = (data.get("result") or {}).get("alternatives") or []
            if not alternatives:
                logger.warning("Completion returned no alternatives")
                return NO_ANSWER_SENTINEL
            text = alternatives[0]["message"]["text"]
        except (AttributeError, KeyError, IndexError, TypeError) as e:
            raise ParseError(f"yagpt returned malformed result: {e}") from e

        # Telegram refuses empty messages
        if not isinstance(text, str) or not text.strip():
            logger.warning("Completion returned an empty alternative")
            return NO_ANSWER_SENTINEL

        usage = data["result"].get("usage")
        if not isinstance(usage, dict):
            usage = {}
        logger.info(
            f"Completion done: {len(text)} chars, "
            f"total tokens {usage.get('totalTokens', '?')}"
        )
        return text
