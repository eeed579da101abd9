"""Dependency injection factories for the bot."""

from functools import lru_cache
from typing import Callable

from core.config import settings
from domain.services.bot_service import BotService
from infrastructure.database.session import async_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
from infrastructure.telegram.gateway import TelegramGateway


def get_uow_factory() -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(async_session_factory)

    return factory


@lru_cache
def get_telegram_gateway() -> TelegramGateway:
    """Get Telegram gateway instance."""
    return TelegramGateway(
        bot_token=settings.telegram_bot_token,
        api_base_url=settings.telegram_api_base_url,
    )


@lru_cache
def get_bot_service() -> BotService:
    """Get Bot service instance."""
    return BotService(get_uow_factory(), get_telegram_gateway())
