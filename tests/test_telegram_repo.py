import aiohttp
import pytest
from aiogram.exceptions import TelegramBadRequest, TelegramEntityTooLarge, TelegramNetworkError
from aiogram.methods import GetFile, SendMessage
from aiogram.types import File

from exam_bot.errors import NetworkError, ParseError, RequestError, SendError
from exam_bot.repository.telegram_repo import OutboundReply, TelegramRepository


async def test_resolve_file_url(mock_bot):
    mock_bot.get_file.return_value = File(
        file_id="large", file_unique_id="l", file_path="photos/file_1.jpg"
    )
    repo = TelegramRepository(mock_bot)

    url = await repo.resolve_file_url("large")

    assert url == "https://api.telegram.org/file/bot123456:test-token/photos/file_1.jpg"
    assert mock_bot.get_file.await_args.args == ("large",)


async def test_resolve_file_url_without_path(mock_bot):
    mock_bot.get_file.return_value = File(file_id="large", file_unique_id="l")

    with pytest.raises(ParseError):
        await TelegramRepository(mock_bot).resolve_file_url("large")


async def test_resolve_file_url_api_error(mock_bot):
    mock_bot.get_file.side_effect = TelegramBadRequest(
        method=GetFile(file_id="large"), message="Bad Request: invalid file_id"
    )

    with pytest.raises(RequestError) as exc_info:
        await TelegramRepository(mock_bot).resolve_file_url("large")

    assert exc_info.value.status == 400


async def test_download_streams_into_destination(mock_bot, tmp_path):
    seen = {}

    async def stream_content(**kwargs):
        seen.update(kwargs)
        yield b"abc"
        yield b"def"

    mock_bot.session.stream_content = stream_content
    destination = tmp_path / "large.jpg"

    written = await TelegramRepository(mock_bot, timeout=10).download("https://files/x.jpg", destination)

    assert written == 6
    assert destination.read_bytes() == b"abcdef"
    assert seen["url"] == "https://files/x.jpg"
    assert seen["timeout"] == 10


async def test_download_network_failure(mock_bot, tmp_path):
    async def stream_content(**kwargs):
        raise aiohttp.ClientConnectionError("reset")
        yield b""

    mock_bot.session.stream_content = stream_content

    with pytest.raises(NetworkError):
        await TelegramRepository(mock_bot).download("https://files/x.jpg", tmp_path / "x.jpg")


async def test_send_reply(mock_bot):
    repo = TelegramRepository(mock_bot)

    await repo.send_reply(OutboundReply(chat_id=42, text="ответ", reply_to_message_id=7))

    kwargs = mock_bot.send_message.await_args.kwargs
    assert kwargs["chat_id"] == 42
    assert kwargs["text"] == "ответ"
    assert kwargs["parse_mode"] == "Markdown"
    assert kwargs["reply_parameters"].message_id == 7


async def test_send_reply_rejected(mock_bot):
    mock_bot.send_message.side_effect = TelegramBadRequest(
        method=SendMessage(chat_id=42, text="*"), message="Bad Request: can't parse entities"
    )

    with pytest.raises(SendError) as exc_info:
        await TelegramRepository(mock_bot).send_reply(
            OutboundReply(chat_id=42, text="*", reply_to_message_id=7)
        )

    assert exc_info.value.status == 400
    assert "can't parse entities" in exc_info.value.body


async def test_send_reply_network_error(mock_bot):
    mock_bot.send_message.side_effect = TelegramNetworkError(
        method=SendMessage(chat_id=42, text="x"), message="Request timeout error"
    )

    with pytest.raises(NetworkError):
        await TelegramRepository(mock_bot).send_reply(
            OutboundReply(chat_id=42, text="x", reply_to_message_id=7)
        )


async def test_send_reply_too_large_is_send_error(mock_bot):
    mock_bot.send_message.side_effect = TelegramEntityTooLarge(
        method=SendMessage(chat_id=42, text="x"), message="Request Entity Too Large"
    )

    with pytest.raises(SendError) as exc_info:
        await TelegramRepository(mock_bot).send_reply(
            OutboundReply(chat_id=42, text="x", reply_to_message_id=7)
        )

    assert exc_info.value.status == 413


async def test_sub_second_timeout_is_rounded_up(mock_bot):
    repo = TelegramRepository(mock_bot, timeout=0.5)

    await repo.send_reply(OutboundReply(chat_id=42, text="x", reply_to_message_id=7))

    assert mock_bot.send_message.await_args.kwargs["request_timeout"] == 1


async def test_fractional_timeout_is_not_truncated(mock_bot):
    mock_bot.get_file.return_value = File(file_id="f", file_unique_id="u", file_path="p.jpg")

    await TelegramRepository(mock_bot, timeout=2.5).resolve_file_url("f")

    assert mock_bot.get_file.await_args.kwargs["request_timeout"] == 3
