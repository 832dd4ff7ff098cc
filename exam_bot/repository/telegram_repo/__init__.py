from exam_bot.repository.telegram_repo.dto import OutboundReply
from exam_bot.repository.telegram_repo.telegram_repo import TelegramRepository

__all__ = ["OutboundReply", "TelegramRepository"]
