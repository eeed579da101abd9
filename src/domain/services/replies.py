"""Reply texts sent back to Telegram chats.

All texts use Telegram's HTML parse mode. User-provided values are escaped
before they are interpolated.
"""

from datetime import datetime
from html import escape

from domain.entities.post import PostWithAuthor
from domain.entities.profile import ProfileStats

BODY_PREVIEW_LENGTH = 100

HELP_TEXT = (
    "<b>JUSTICE Bot Commands:</b>\n\n"
    "/start - Start the bot\n"
    "/posts - View latest posts\n"
    "/myprofile - View your profile\n"
    "/help - Show this help\n\n"
    "<b>About JUSTICE:</b>\n"
    "JUSTICE is a social platform for sharing posts, connecting with others, "
    "and building community.\n\n"
    "Visit the web app to create posts and manage your account!"
)
UNKNOWN_COMMAND_TEXT = "Unknown command. Type /help to see available commands."
NO_POSTS_TEXT = "No posts available yet."
POSTS_ERROR_TEXT = "Error fetching posts. Please try again later."
PROFILE_ERROR_TEXT = "Error fetching profile. Please try again later."


def welcome_text(chat_id: int) -> str:
    """Greeting for /start. The chat id is what users paste into the web app."""
    return (
        "Welcome to JUSTICE! \U0001f44b\n\n"
        "I'm your JUSTICE bot assistant. Here's what you can do:\n\n"
        "/posts - View latest posts\n"
        "/myprofile - View your profile\n"
        "/help - Show this help message\n\n"
        f"To link your account, please use the web app and add your Telegram ID: {chat_id}"
    )


def not_linked_text(telegram_id: str) -> str:
    """Instruction for a sender whose Telegram id is not linked to a profile."""
    return (
        "Your Telegram account is not linked. Please link it in the web app "
        f"by adding your Telegram ID: {telegram_id}"
    )


def truncate_body(content: str, limit: int = BODY_PREVIEW_LENGTH) -> str:
    """Cut ``content`` to ``limit`` characters, marking the cut with an ellipsis."""
    if len(content) > limit:
        return content[:limit] + "..."
    return content


def format_date(value: datetime) -> str:
    """Render a date as M/D/YYYY."""
    return f"{value.month}/{value.day}/{value.year}"


def posts_text(items: list[PostWithAuthor]) -> str:
    """Numbered digest of posts, or the empty-feed notice."""
    if not items:
        return NO_POSTS_TEXT

    message = "<b>Latest Posts:</b>\n\n"
    for index, item in enumerate(items, start=1):
        post = item.post
        author = item.author_username or "Unknown"
        message += f"<b>{index}. {escape(post.title)}</b>\n"
        message += f"By @{escape(author)}\n"
        message += f"{escape(truncate_body(post.content))}\n"
        message += f"❤️ {post.likes_count} likes\n\n"
    return message


def profile_text(stats: ProfileStats) -> str:
    """Profile card with post count, total likes and join date."""
    profile = stats.profile
    return (
        "<b>Your Profile</b>\n\n"
        f"Username: @{escape(profile.username)}\n"
        f"Name: {escape(profile.full_name or 'Not set')}\n"
        f"Posts: {stats.post_count}\n"
        f"Total Likes: {stats.total_likes}\n"
        f"Joined: {format_date(profile.created_at)}"
    )
