"""Shared JSON-over-HTTP plumbing for Yandex Cloud repositories."""

import asyncio
import json
import logging
from typing import Any

import aiohttp

from exam_bot.errors import NetworkError, ParseError, RequestError

logger = logging.getLogger(__name__)


class BaseHTTPRepository:
    """Base class owning a lazily created aiohttp session."""

    service_name: str = "upstream"

    def __init__(self, timeout: float = 30.0, session: aiohttp.ClientSession | None = None):
        self.timeout = timeout
        self._session = session
        self._owns_session = session is None

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            )
        return self._session

    async def _post_json(
        self,
        url: str,
        body: dict[str, Any],
        headers: dict[str, str],
    ) -> dict[str, Any]:
        """
        POST a JSON body and decode the JSON answer.

        Raises:
            NetworkError: transport failure or timeout
            RequestError: non-2xx status
            ParseError: answer is not a JSON object
        """
        session = self._get_session()
        try:
            async with session.post(url, json=body, headers=headers) as resp:
                try:
                    text = await resp.text()
                except UnicodeDecodeError as e:
                    if resp.status >= 300:
                        raise RequestError(
                            f"{self.service_name} request failed with status: {resp.status} {resp.reason}",
                            status=resp.status,
                        ) from e
                    raise ParseError(f"{self.service_name} returned undecodable body: {e}") from e
                if resp.status >= 300:
                    raise RequestError(
                        f"{self.service_name} request failed with status: {resp.status} {resp.reason}",
                        status=resp.status,
                        body=text,
                    )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise NetworkError(f"{self.service_name} request failed: {e}") from e

        try:
            data = json.loads(text)
        except ValueError as e:
            raise ParseError(f"{self.service_name} returned invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise ParseError(f"{self.service_name} returned unexpected JSON: {text[:200]}")

        return data

    async def close(self) -> None:
        if self._session is not None and self._owns_session:
            await self._session.close()
        self._session = None
