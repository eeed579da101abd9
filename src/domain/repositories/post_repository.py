"""Post repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.post import Post, PostWithAuthor


class IPostRepository(Protocol):
    """Read-only repository interface for Post entities."""

    async def get_latest_published(self, limit: int) -> list[PostWithAuthor]:
        """Get the newest published posts with their author's username."""
        ...

    async def get_all_for_user(self, user_id: UUID) -> list[Post]:
        """Get every post owned by a profile, regardless of status."""
        ...
