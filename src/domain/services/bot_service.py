"""Bot service: routes Telegram commands to their handlers."""

from typing import Callable

import structlog

from core.exceptions import DeliveryError, StoreError
from domain.entities.command import Command, parse_command
from domain.entities.profile import ProfileStats
from domain.entities.update import InboundUpdate, OutboundMessage
from domain.gateways.messaging_gateway import IMessagingGateway
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services import replies

logger = structlog.get_logger()

LATEST_POSTS_LIMIT = 5


class BotService:
    """Service layer for the Telegram command dispatcher.

    Each update produces at most one outbound message. Store failures are
    answered with an apology; delivery failures are only logged.
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        gateway: IMessagingGateway,
    ) -> None:
        self._uow_factory = uow_factory
        self._gateway = gateway

    async def handle_update(self, update: InboundUpdate) -> None:
        """Dispatch one inbound update. Updates without text are ignored."""
        if not update.text:
            logger.debug("update_ignored", chat_id=update.chat_id)
            return

        command = parse_command(update.text)
        logger.info("command_received", command=command.name, chat_id=update.chat_id)

        match command:
            case Command.START:
                await self.handle_start(update)
            case Command.POSTS:
                await self.handle_posts(update)
            case Command.PROFILE:
                await self.handle_profile(update)
            case Command.HELP:
                await self.handle_help(update)
            case Command.UNKNOWN:
                await self._reply(update.chat_id, replies.UNKNOWN_COMMAND_TEXT)

    async def handle_start(self, update: InboundUpdate) -> None:
        await self._reply(update.chat_id, replies.welcome_text(update.chat_id))

    async def handle_help(self, update: InboundUpdate) -> None:
        await self._reply(update.chat_id, replies.HELP_TEXT)

    async def handle_posts(self, update: InboundUpdate) -> None:
        """Reply with the latest published posts."""
        try:
            async with self._uow_factory() as uow:
                items = await uow.posts.get_latest_published(LATEST_POSTS_LIMIT)
        except StoreError:
            logger.exception("posts_fetch_failed", chat_id=update.chat_id)
            await self._reply(update.chat_id, replies.POSTS_ERROR_TEXT)
            return

        await self._reply(update.chat_id, replies.posts_text(items))

    async def handle_profile(self, update: InboundUpdate) -> None:
        """Reply with the sender's linked profile and post aggregates."""
        telegram_id = str(update.sender_id)
        try:
            stats = await self.get_profile_stats(telegram_id)
        except StoreError:
            logger.exception(
                "profile_fetch_failed",
                chat_id=update.chat_id,
                telegram_id=telegram_id,
            )
            await self._reply(update.chat_id, replies.PROFILE_ERROR_TEXT)
            return

        if stats is None:
            await self._reply(update.chat_id, replies.not_linked_text(telegram_id))
            return

        await self._reply(update.chat_id, replies.profile_text(stats))

    async def get_profile_stats(self, telegram_id: str) -> ProfileStats | None:
        """Look up the linked profile and aggregate its posts, None when unlinked."""
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_telegram_id(telegram_id)
            if profile is None:
                return None

            posts = await uow.posts.get_all_for_user(profile.id)
            return ProfileStats(
                profile=profile,
                post_count=len(posts),
                total_likes=sum(post.likes_count for post in posts),
            )

    async def _reply(self, chat_id: int, text: str) -> None:
        try:
            await self._gateway.send_message(OutboundMessage(chat_id=chat_id, text=text))
        except DeliveryError as exc:
            logger.warning(
                "message_delivery_failed",
                chat_id=chat_id,
                reason=exc.details.get("reason") if exc.details else None,
            )
