"""SQLAlchemy implementation of Post repository."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import StoreError
from domain.entities.post import Post, PostStatus, PostWithAuthor
from infrastructure.database.errors import STORE_FAILURES
from infrastructure.database.models import PostModel, ProfileModel


class SQLAlchemyPostRepository:
    """SQLAlchemy implementation of IPostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_latest_published(self, limit: int) -> list[PostWithAuthor]:
        """Get the newest published posts with their author's username."""
        stmt = (
            select(PostModel, ProfileModel.username)
            .outerjoin(ProfileModel, PostModel.user_id == ProfileModel.id)
            .where(PostModel.status == PostStatus.PUBLISHED.value)
            .order_by(PostModel.created_at.desc())
            .limit(limit)
        )
        try:
            result = await self._session.execute(stmt)
        except STORE_FAILURES as exc:
            raise StoreError("get_latest_published", str(exc)) from exc

        return [
            PostWithAuthor(post=self._to_entity(model), author_username=username)
            for model, username in result
        ]

    async def get_all_for_user(self, user_id: UUID) -> list[Post]:
        """Get every post owned by a profile."""
        stmt = select(PostModel).where(PostModel.user_id == user_id)
        try:
            result = await self._session.execute(stmt)
        except STORE_FAILURES as exc:
            raise StoreError("get_all_for_user", str(exc)) from exc

        return [self._to_entity(model) for model in result.scalars()]

    @staticmethod
    def _to_entity(model: PostModel) -> Post:
        """Convert ORM model to domain entity."""
        return Post(
            id=model.id,
            user_id=model.user_id,
            title=model.title,
            content=model.content or "",
            likes_count=model.likes_count or 0,
            status=PostStatus(model.status),
            created_at=model.created_at,
        )
