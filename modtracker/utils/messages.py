"""Utilities for Discord messages."""

import random

from disnake import Color, Embed

from modtracker.interactions import CommandRequest, Visibility

NEGATIVE_REPLIES = {
    "Noooooo!!",
    "Nope.",
    "I'm sorry Dave, I'm afraid I can't do that.",
    "I don't think so.",
    "Not gonna happen.",
    "Out of the question.",
    "Huh? No.",
    "Nah.",
    "Naw.",
    "Not likely.",
    "No way, José.",
    "Not in a million years.",
    "Fat chance.",
    "Certainly not.",
    "NEGATORY.",
    "Nuh-uh.",
    "Not in my house!",
}


async def send_denial(request: CommandRequest, reason: str) -> None:
    """Privately replies with an embed denying the member with the given reason."""
    embed = Embed(description=reason, color=Color.red())
    embed.title = random.choice(tuple(NEGATIVE_REPLIES))

    await request.reply(embed=embed, visibility=Visibility.PRIVATE)


def user_mention(user_id: int) -> str:
    """Returns a mention for a user ID."""
    return f"<@{user_id}>"


def role_mention(role_id: int) -> str:
    """Returns a mention for a role ID."""
    return f"<@&{role_id}>"


def format_user(user_id: int) -> str:
    """Returns a string for a user ID which has their mention and ID."""
    return f"{user_mention(user_id)} (`{user_id}`)"
