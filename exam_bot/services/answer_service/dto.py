"""DTOs for answer service."""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from exam_bot.repository.telegram_repo.dto import OutboundReply


class PhotoSize(BaseModel):
    model_config = ConfigDict(extra="ignore")

    file_id: str
    file_unique_id: str | None = None
    width: int = 0
    height: int = 0


class Chat(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int


class InboundMessage(BaseModel):
    """Subset of a Telegram message. Photo sizes come smallest first."""

    model_config = ConfigDict(extra="ignore")

    message_id: int
    chat: Chat
    text: str | None = None
    photo: list[PhotoSize] = Field(default_factory=list)

    @field_validator("photo", mode="before")
    @classmethod
    def _null_photo(cls, value):
        return [] if value is None else value


class InboundUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    update_id: int | None = None
    message: InboundMessage | None = None


class UpdateKind(str, Enum):
    COMMAND = "command"
    TEXT = "text"
    PHOTO = "photo"
    UNSUPPORTED = "unsupported"
    IGNORED = "ignored"


@dataclass
class HandleResult:
    kind: UpdateKind
    reply: OutboundReply | None = None
    chunks_sent: int = 0
