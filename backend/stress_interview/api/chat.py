import logging

import httpx
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from stress_interview.core.config import ConfigurationError, Settings, get_settings
from stress_interview.schemas import (
    ErrorResponse,
    InterviewChatResponse,
    InvalidRequestError,
    parse_chat_request,
)
from stress_interview.services.gateway import GatewayClient, GatewayFailure, get_http_client

logger = logging.getLogger(__name__)

router = APIRouter()


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@router.post(
    "/interview-chat",
    response_model=InterviewChatResponse,
    responses={402: {"model": ErrorResponse}, 429: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def interview_chat(
    request: Request,
    settings: Settings = Depends(get_settings),
    http_client: httpx.AsyncClient = Depends(get_http_client),
):
    # Body is read by hand so malformed input ends up as a 500 like every other failure
    try:
        chat_request = parse_chat_request(await request.body())
        api_key = settings.require_api_key()

        logger.info(
            "Interview chat request: message_count=%s is_start=%s",
            len(chat_request.messages) if isinstance(chat_request.messages, list) else None,
            chat_request.isStart,
        )

        turn = chat_request.to_turn()
    except (InvalidRequestError, ConfigurationError) as e:
        logger.error("Interview chat error: %s", e)
        return error_response(500, str(e))

    gateway = GatewayClient(http_client, settings, api_key)
    result = await gateway.complete(turn.build_messages())

    if isinstance(result, GatewayFailure):
        logger.error("Interview chat error (%s): %s", result.kind.value, result.message)
        return error_response(result.status_code, result.message)

    logger.info("AI response generated successfully")
    return InterviewChatResponse(response=result.text)
