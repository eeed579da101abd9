"""Pydantic schemas for inbound Telegram updates."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from domain.entities.update import InboundUpdate, Sender


class TelegramChat(BaseModel):
    """Chat the message was posted in."""

    id: int | None = None
    type: str | None = None


class TelegramUser(BaseModel):
    """Telegram account that sent the message."""

    id: int
    username: str | None = None
    first_name: str | None = None


class TelegramMessage(BaseModel):
    """The subset of a Telegram ``Message`` the bot reads."""

    model_config = ConfigDict(populate_by_name=True)

    chat: TelegramChat | None = None
    text: str | None = None
    from_: TelegramUser | None = Field(None, alias="from")

    @model_validator(mode="after")
    def require_chat_for_text(self) -> "TelegramMessage":
        # Text is answered in its chat; without one there is nowhere to reply
        if self.text and (self.chat is None or self.chat.id is None):
            raise ValueError("message has text but no chat")
        return self


class TelegramUpdate(BaseModel):
    """Schema for a webhook update. Unknown fields are ignored."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "update_id": 10000,
                "message": {
                    "message_id": 1,
                    "chat": {"id": 123456789, "type": "private"},
                    "from": {"id": 123456789, "username": "jdoe", "first_name": "Jane"},
                    "text": "/posts",
                },
            }
        },
    )

    message: TelegramMessage | None = None

    def to_domain(self) -> InboundUpdate | None:
        """Reduce to the domain update, None when there is no text to answer."""
        message = self.message
        if message is None or not message.text or message.chat is None or message.chat.id is None:
            return None
        sender = None
        if message.from_ is not None:
            sender = Sender(
                id=message.from_.id,
                username=message.from_.username,
                first_name=message.from_.first_name,
            )
        return InboundUpdate(
            chat_id=message.chat.id,
            text=message.text,
            sender=sender,
        )


class WebhookAck(BaseModel):
    """Acknowledgment returned to Telegram."""

    ok: bool = True
