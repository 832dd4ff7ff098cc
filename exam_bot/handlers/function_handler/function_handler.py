"""Serverless entry point for Yandex Cloud Functions behind API Gateway."""

import asyncio
import binascii
import logging
from typing import Any

from exam_bot.config import get_settings
from exam_bot.container import Container
from exam_bot.errors import ParseError
from exam_bot.handlers.function_handler.dto import APIGatewayRequest, APIGatewayResponse

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


async def handle_event(request: APIGatewayRequest) -> APIGatewayResponse:
    try:
        body = request.decoded_body()
    except (binascii.Error, ValueError) as e:
        raise ParseError(f"an error has occurred when decoding body: {e}") from e

    settings = get_settings()
    logging.getLogger().setLevel(settings.log_level.upper())
    async with Container(settings) as container:
        result = await container.answer_service.handle_update(body)

    logger.info(f"Handled {result.kind.value} update, {result.chunks_sent} message(s) sent")
    return APIGatewayResponse(status_code=200)


def handler(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
    """
    Function entry point.

    Errors propagate to the runtime, which reports the invocation as failed;
    the user gets no reply in that case.
    """
    logger.info("Received message")
    request = APIGatewayRequest.from_event(event)
    response = asyncio.run(handle_event(request))
    return response.to_dict()
