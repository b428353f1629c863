"""Moderation notices sent to the action and log channels."""

from dataclasses import dataclass, field
from typing import Optional

import disnake
from disnake import Color, Embed, Guild
from loguru import logger

from modtracker.models import GuildConfig


@dataclass(frozen=True)
class Notice:
    """A moderation notice, rendered as an embed."""

    title: str
    color: Color
    fields: list[tuple[str, str]] = field(default_factory=list)

    def to_embed(self) -> Embed:
        """Builds the embed for this notice."""
        embed = Embed(title=self.title, color=self.color)
        for name, value in self.fields:
            embed.add_field(name=name, value=value, inline=False)
        return embed


async def _send(guild: Guild, channel_id: Optional[int], embed: Embed, kind: str) -> bool:
    """Sends `embed` to one channel and returns whether it was delivered."""
    if channel_id is None:
        logger.trace(f"No {kind} channel configured in guild {guild.id}; skipping notice.")
        return False

    channel = guild.get_channel(channel_id)
    if channel is None:
        logger.debug(f"Configured {kind} channel {channel_id} could not be found in guild {guild.id}.")
        return False

    try:
        await channel.send(embed=embed)
    except disnake.HTTPException as error:
        logger.warning(f"Failed to send {kind} notice to channel {channel_id} in guild {guild.id}: {error}")
        return False
    except Exception as error:  # pylint: disable=broad-except
        logger.opt(exception=error).warning(f"Failed to send {kind} notice to channel {channel_id} in guild {guild.id}.")
        return False

    return True


async def notify(guild: Guild, config: GuildConfig, notice: Notice, *, action: bool = True, log: bool = True) -> int:
    """Sends `notice` to the server's action and/or log channel.

    Each delivery is attempted on its own and failures are only logged.
    Returns how many channels received the notice.
    """
    embed = notice.to_embed()
    delivered = 0

    if action and await _send(guild, config.action_channel_id, embed, "action"):
        delivered += 1
    if log and await _send(guild, config.log_channel_id, embed, "log"):
        delivered += 1

    return delivered
