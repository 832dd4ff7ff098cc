"""Splitting replies to fit Telegram message limits."""

from exam_bot.constants import MAX_MESSAGE_LENGTH


def utf16_length(text: str) -> int:
    """Length as Telegram counts it, in UTF-16 code units."""
    return len(text.encode("utf-16-le")) // 2


def split_message(text: str, limit: int = MAX_MESSAGE_LENGTH) -> list[str]:
    """
    Split text into consecutive chunks of at most `limit` UTF-16 code units.

    Characters outside the BMP count as two units and are never split.

    Args:
        text: Reply text
        limit: Maximum length of a single message

    Returns:
        List of chunks; a text within the limit (including "") is a single chunk
    """
    if limit <= 0:
        raise ValueError("limit must be positive")

    if utf16_length(text) <= limit:
        return [text]

    chunks: list[str] = []
    start = 0
    units = 0
    for i, char in enumerate(text):
        width = 2 if ord(char) > 0xFFFF else 1
        if units + width > limit and i > start:
            chunks.append(text[start:i])
            start = i
            units = 0
        units += width
    chunks.append(text[start:])
    return chunks
