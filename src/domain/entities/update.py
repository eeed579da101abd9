"""Transient chat values: inbound updates and outbound replies."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Sender:
    """Identity of the Telegram user who sent a message."""

    id: int
    username: str | None = None
    first_name: str | None = None


@dataclass(frozen=True, slots=True)
class InboundUpdate:
    """One chat event delivered by Telegram, reduced to what the bot reads."""

    chat_id: int
    text: str | None = None
    sender: Sender | None = None

    @property
    def sender_id(self) -> int:
        """Telegram id of the sender, 0 when Telegram omitted it."""
        return self.sender.id if self.sender else 0


@dataclass(frozen=True, slots=True)
class OutboundMessage:
    """A reply to deliver to a chat."""

    chat_id: int
    text: str
    parse_mode: str = "HTML"
