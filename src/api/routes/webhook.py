"""Telegram webhook endpoint."""

from fastapi import APIRouter, Depends, Request, Response
from pydantic import ValidationError

from api.dependencies.bot import get_bot_service
from api.middleware.cors import CORS_HEADERS
from api.schemas.telegram import TelegramUpdate, WebhookAck
from core.config import settings
from core.exceptions import InvalidUpdateError
from domain.services.bot_service import BotService

router = APIRouter(tags=["telegram"])


@router.options(settings.webhook_path, summary="CORS preflight")
async def webhook_preflight() -> Response:
    """Answer preflight requests with an empty 200 response."""
    return Response(status_code=200, headers=CORS_HEADERS)


@router.post(
    settings.webhook_path,
    response_model=WebhookAck,
    summary="Receive a Telegram update",
    responses={
        200: {"description": "Update accepted, whatever the command outcome"},
        500: {"description": "Body is not a valid Telegram update"},
    },
)
async def receive_update(
    request: Request,
    service: BotService = Depends(get_bot_service),
) -> WebhookAck:
    """
    Handle one Telegram update.

    The body is parsed by hand so a malformed payload surfaces as a 500
    instead of FastAPI's 422. Command failures are answered in the chat and
    never change the acknowledgment.
    """
    try:
        payload = await request.json()
        update = TelegramUpdate.model_validate(payload)
    except (ValueError, ValidationError) as exc:
        # ValueError covers undecodable bytes and invalid JSON
        raise InvalidUpdateError(str(exc)) from exc

    inbound = update.to_domain()
    if inbound is not None:
        await service.handle_update(inbound)

    return WebhookAck(ok=True)
