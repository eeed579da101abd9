"""Messaging gateway protocol."""

from typing import Any, Protocol

from domain.entities.update import OutboundMessage


class IMessagingGateway(Protocol):
    """Delivers replies to chats."""

    async def send_message(self, message: OutboundMessage) -> Any:
        """Send a message and return the gateway's decoded response.

        Raises DeliveryError when the message could not be delivered.
        """
        ...
