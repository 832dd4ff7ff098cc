"""System prompt source - a text asset with a hardcoded fallback."""

import logging
from pathlib import Path

from exam_bot.constants import DEFAULT_SYSTEM_PROMPT

logger = logging.getLogger(__name__)


class PromptService:
    """Loads the system prompt. The file is re-read on every call so it can be edited live."""

    def __init__(self, path: Path | None, default: str = DEFAULT_SYSTEM_PROMPT):
        self.path = path
        self.default = default

    def get_system_prompt(self) -> str:
        if self.path is None:
            return self.default

        try:
            content = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.warning(f"System prompt file {self.path} was not found, using default")
            return self.default
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"System prompt file {self.path} is invalid, using default: {e}")
            return self.default

        content = content.strip()
        if not content:
            logger.warning(f"System prompt file {self.path} is empty, using default")
            return self.default

        return content
