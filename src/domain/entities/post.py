"""Post domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from uuid import UUID, uuid4


class PostStatus(StrEnum):
    """Publication state of a post."""

    DRAFT = "draft"
    PUBLISHED = "published"


@dataclass
class Post:
    """Domain entity for an authored post."""

    user_id: UUID
    title: str
    content: str
    id: UUID = field(default_factory=uuid4)
    likes_count: int = 0
    status: PostStatus = PostStatus.DRAFT
    created_at: datetime = field(default_factory=datetime.utcnow)


@dataclass(frozen=True, slots=True)
class PostWithAuthor:
    """Read-only value object: a Post bundled with its author's username."""

    post: Post
    author_username: str | None
