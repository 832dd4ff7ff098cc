"""Application configuration using pydantic-settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Telegram Bot
    telegram_bot_token: str
    telegram_webhook_url: str | None = None
    telegram_webhook_secret: str | None = None

    # Yandex Cloud
    yandex_folder_id: str = "b1g163vdicpkeevao9ga"

    # Vision OCR
    ocr_api_key: str
    ocr_url: str = "https://ocr.api.cloud.yandex.net/ocr/v1/recognizeText"
    ocr_mime_type: str = "JPEG"
    ocr_language_codes: list[str] = ["ru"]
    ocr_model: str = "page"

    # YandexGPT completion
    llm_api_key: str
    llm_url: str = "https://llm.api.cloud.yandex.net/foundationModels/v1/completion"
    llm_model: str = "yandexgpt-lite"
    llm_temperature: float = 0.3
    llm_max_tokens: int = 2000
    llm_auth_scheme: Literal["Api-Key", "Bearer"] = "Api-Key"

    # Timeout for every outbound call, seconds
    http_timeout: float = 30.0

    # System prompt asset, re-read on every request
    system_prompt_path: Path = PACKAGE_DIR / "prompts" / "system_prompt.txt"

    # Downloaded images live here only until OCR is done (None = system temp dir)
    scratch_dir: Path | None = None

    # Replies
    max_message_length: int = 4096
    reply_parse_mode: str | None = "Markdown"
    start_commands: list[str] = ["/start", "/help", "start", "help"]

    # False: photo download/OCR errors fail the request; True: user gets a fixed message
    degrade_photo_failures: bool = False

    log_level: str = "INFO"

    @property
    def llm_model_uri(self) -> str:
        return f"gpt://{self.yandex_folder_id}/{self.llm_model}"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
