"""DTOs for Telegram repository."""

from dataclasses import dataclass


@dataclass
class OutboundReply:
    chat_id: int
    text: str
    reply_to_message_id: int
    parse_mode: str | None = "Markdown"
