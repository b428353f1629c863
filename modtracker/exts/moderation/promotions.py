"""Staff promotions."""

import disnake
from disnake import ApplicationCommandInteraction
from disnake.ext.commands import Cog, slash_command

from modtracker.bot import ModTrackerBot
from modtracker.interactions import CommandRequest


class Promotions(Cog):
    """Granting promotable roles to members."""

    def __init__(self, bot: ModTrackerBot):
        self.bot = bot

    @slash_command()
    async def promote(self, inter: ApplicationCommandInteraction, user: disnake.User, role: disnake.Role) -> None:
        """Promote a staff member.

        Parameters
        ----------
        user: The member to promote
        role: The role to grant
        """
        await self.bot.handlers.promote(CommandRequest.from_interaction(inter, user=user, role=role))


def setup(bot: ModTrackerBot) -> None:
    """Loads the promotions cog."""
    bot.add_cog(Promotions(bot))
