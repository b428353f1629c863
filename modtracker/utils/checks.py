"""Permission checks used by the moderation commands."""

from disnake import Guild, Member

from modtracker.models import GuildConfig


def has_staff_permission(member: Member, config: GuildConfig) -> bool:
    """Returns whether `member` currently holds the server's staff role.

    Nobody passes if no staff role has been configured, including the owner.
    """
    if config.staff_role_id is None:
        return False
    return any(role.id == config.staff_role_id for role in member.roles)


def is_guild_owner(member: Member, guild: Guild) -> bool:
    """Returns whether `member` owns `guild`."""
    return guild.owner_id == member.id
