from exam_bot.services.answer_service.answer_service import AnswerService
from exam_bot.services.answer_service.dto import (
    HandleResult,
    InboundMessage,
    InboundUpdate,
    PhotoSize,
    UpdateKind,
)

__all__ = [
    "AnswerService",
    "HandleResult",
    "InboundMessage",
    "InboundUpdate",
    "PhotoSize",
    "UpdateKind",
]
