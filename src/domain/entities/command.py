"""Bot command enumeration and parsing."""

from enum import StrEnum


class Command(StrEnum):
    """Commands the bot understands. Value is the leading token."""

    START = "/start"
    POSTS = "/posts"
    PROFILE = "/myprofile"
    HELP = "/help"
    UNKNOWN = ""


# Checked in order, first prefix match wins.
KNOWN_COMMANDS: tuple[Command, ...] = (
    Command.START,
    Command.POSTS,
    Command.PROFILE,
    Command.HELP,
)


def parse_command(text: str) -> Command:
    """Map raw message text to a command by case-sensitive prefix.

    ``/postsfoo`` is ``POSTS``; ``/Posts`` is ``UNKNOWN``.
    """
    for command in KNOWN_COMMANDS:
        if text.startswith(command.value):
            return command
    return Command.UNKNOWN
