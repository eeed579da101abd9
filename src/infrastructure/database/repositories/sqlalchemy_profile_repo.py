"""SQLAlchemy implementation of Profile repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import StoreError
from domain.entities.profile import Profile
from infrastructure.database.errors import STORE_FAILURES
from infrastructure.database.models import ProfileModel


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_telegram_id(self, telegram_id: str) -> Profile | None:
        """Get the profile linked to a Telegram user id."""
        stmt = select(ProfileModel).where(ProfileModel.telegram_id == telegram_id)
        try:
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()
        except STORE_FAILURES as exc:
            raise StoreError("get_by_telegram_id", str(exc)) from exc
        return self._to_entity(model) if model else None

    @staticmethod
    def _to_entity(model: ProfileModel) -> Profile:
        return Profile(
            id=model.id,
            username=model.username,
            full_name=model.full_name,
            telegram_id=model.telegram_id,
            created_at=model.created_at,
        )
