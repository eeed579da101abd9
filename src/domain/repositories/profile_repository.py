"""Profile repository protocol."""

from typing import Protocol

from domain.entities.profile import Profile


class IProfileRepository(Protocol):
    """Read-only repository interface for Profile entities."""

    async def get_by_telegram_id(self, telegram_id: str) -> Profile | None:
        """Get the profile linked to a Telegram user id."""
        ...
