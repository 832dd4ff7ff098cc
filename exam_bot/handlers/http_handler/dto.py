"""DTOs for HTTP handler."""

from pydantic import BaseModel


class WebhookAck(BaseModel):
    ok: bool = True
    error: str | None = None
