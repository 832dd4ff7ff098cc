"""Error taxonomy shared by repositories and services."""


class ExamBotError(Exception):
    """Base class for all handled failures."""


class ParseError(ExamBotError):
    """Inbound payload or upstream response could not be decoded."""


class NetworkError(ExamBotError):
    """Transport failure talking to an upstream service."""


class StorageError(ExamBotError):
    """Scratch file could not be written or read."""


class RequestError(ExamBotError):
    """Upstream answered with a non-success status."""

    def __init__(self, message: str, status: int | None = None, body: str = ""):
        super().__init__(message)
        self.status = status
        self.body = body


class SendError(RequestError):
    """Telegram refused to deliver a reply."""
