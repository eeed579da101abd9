"""Telegram Bot API messaging gateway."""

from typing import Any

import httpx
import structlog

from core.exceptions import DeliveryError
from domain.entities.update import OutboundMessage

logger = structlog.get_logger()


class TelegramGateway:
    """Sends messages through the Telegram Bot API ``sendMessage`` method.

    The response body is decoded and returned but not validated: a
    ``{"ok": false}`` answer from Telegram is logged, not raised.
    """

    def __init__(
        self,
        bot_token: str,
        api_base_url: str = "https://api.telegram.org",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = f"{api_base_url.rstrip('/')}/bot{bot_token}/sendMessage"
        self._transport = transport

    async def send_message(self, message: OutboundMessage) -> Any:
        payload = {
            "chat_id": message.chat_id,
            "text": message.text,
            "parse_mode": message.parse_mode,
        }
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(self._url, json=payload)
            body = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            # ValueError: body was not JSON
            raise DeliveryError(message.chat_id, str(exc)) from exc

        if isinstance(body, dict) and not body.get("ok", False):
            logger.warning(
                "telegram_send_rejected",
                chat_id=message.chat_id,
                status_code=response.status_code,
                description=body.get("description"),
            )
        return body
