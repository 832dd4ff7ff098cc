"""OCR repository - Yandex Vision recognizeText calls."""

import base64
import logging

import aiohttp

from exam_bot.config import Settings
from exam_bot.errors import ParseError
from exam_bot.repository.base import BaseHTTPRepository
from exam_bot.repository.ocr_repo.dto import OCRRequest

logger = logging.getLogger(__name__)


class OCRRepository(BaseHTTPRepository):
    """Recognizes text on images with Yandex Vision OCR."""

    service_name = "ocr"

    def __init__(self, settings: Settings, session: aiohttp.ClientSession | None = None):
        super().__init__(timeout=settings.http_timeout, session=session)
        self.settings = settings

    def _headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Api-Key {self.settings.ocr_api_key}",
            "x-data-logging-enabled": "true",
        }
        if self.settings.yandex_folder_id:
            headers["x-folder-id"] = self.settings.yandex_folder_id
        return headers

    async def recognize(self, image: bytes) -> str:
        """Return the full recognized text, or "" when nothing was found."""
        request = OCRRequest(
            content=base64.b64encode(image).decode("ascii"),
            mime_type=self.settings.ocr_mime_type,
            language_codes=list(self.settings.ocr_language_codes),
            model=self.settings.ocr_model,
        )

        data = await self._post_json(self.settings.ocr_url, request.to_payload(), self._headers())

        result = data.get("result") or {}
        if not isinstance(result, dict):
            raise ParseError(f"ocr returned malformed result: {str(data)[:200]}")

        annotation = result.get("textAnnotation") or {}
        if not isinstance(annotation, dict):
            raise ParseError(f"ocr returned malformed textAnnotation: {str(data)[:200]}")

        text = annotation.get("fullText") or ""
        logger.info(f"Recognized {len(text)} characters from {len(image)} byte image")
        return text
