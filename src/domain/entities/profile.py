"""Profile domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class Profile:
    """Domain entity for a platform account, optionally linked to a Telegram user."""

    username: str
    id: UUID = field(default_factory=uuid4)
    full_name: str | None = None
    telegram_id: str | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)


@dataclass(frozen=True, slots=True)
class ProfileStats:
    """Read-only value object: a Profile with aggregates over its posts."""

    profile: Profile
    post_count: int
    total_likes: int
