import json
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from exam_bot.config import Settings
from exam_bot.repository.llm_repo import CompletionRepository
from exam_bot.repository.ocr_repo import OCRRepository
from exam_bot.repository.telegram_repo import TelegramRepository
from exam_bot.services.answer_service import AnswerService
from exam_bot.services.prompt_service import PromptService

SYSTEM_PROMPT = "Ты экзаменатор по операционным системам."
IMAGE_BYTES = b"\xff\xd8\xff\xe0fake-jpeg"


class FakeResponse:
    def __init__(self, status: int = 200, body: str | dict = "", reason: str = "OK", error=None, raw: bytes | None = None):
        self.status = status
        self.reason = reason
        self._body = json.dumps(body) if isinstance(body, dict) else body
        self._error = error
        self._raw = raw

    async def text(self) -> str:
        if self._raw is not None:
            return self._raw.decode("utf-8")
        return self._body

    async def __aenter__(self):
        if self._error is not None:
            raise self._error
        return self

    async def __aexit__(self, *exc_info):
        return False


class FakeSession:
    """Stands in for aiohttp.ClientSession.post()."""

    def __init__(self, response: FakeResponse):
        self.response = response
        self.calls: list[dict] = []
        self.closed = False

    def post(self, url, json=None, headers=None):
        self.calls.append({"url": url, "json": json, "headers": headers})
        return self.response

    async def close(self):
        self.closed = True


@pytest.fixture
def prompt_file(tmp_path: Path) -> Path:
    path = tmp_path / "setup.txt"
    path.write_text(SYSTEM_PROMPT, encoding="utf-8")
    return path


@pytest.fixture
def settings(tmp_path: Path, prompt_file: Path) -> Settings:
    return Settings(
        telegram_bot_token="123456:test-token",
        ocr_api_key="ocr-key",
        llm_api_key="llm-key",
        yandex_folder_id="folder1",
        system_prompt_path=prompt_file,
        scratch_dir=tmp_path / "scratch",
    )


@pytest.fixture
def telegram_repo() -> AsyncMock:
    repo = AsyncMock(spec=TelegramRepository)
    repo.resolve_file_url.return_value = "https://api.telegram.org/file/bot123456:test-token/photos/big.jpg"

    async def download(url: str, destination: Path) -> int:
        destination.write_bytes(IMAGE_BYTES)
        return len(IMAGE_BYTES)

    repo.download.side_effect = download
    return repo


@pytest.fixture
def ocr_repo() -> AsyncMock:
    repo = AsyncMock(spec=OCRRepository)
    repo.recognize.return_value = "1. Управление памятью: принцип локальности."
    return repo


@pytest.fixture
def llm_repo() -> AsyncMock:
    repo = AsyncMock(spec=CompletionRepository)
    repo.complete.return_value = "Ответ на билет"
    return repo


@pytest.fixture
def answer_service(settings, telegram_repo, ocr_repo, llm_repo) -> AnswerService:
    return AnswerService(
        settings=settings,
        telegram_repo=telegram_repo,
        ocr_repo=ocr_repo,
        llm_repo=llm_repo,
        prompt_service=PromptService(settings.system_prompt_path),
    )


@pytest.fixture
def mock_bot() -> MagicMock:
    from aiogram.client.telegram import PRODUCTION

    bot = MagicMock()
    bot.token = "123456:test-token"
    bot.session.api = PRODUCTION
    bot.get_file = AsyncMock()
    bot.send_message = AsyncMock()
    return bot
