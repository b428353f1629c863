"""Infractions and related commands."""

import disnake
from disnake import ApplicationCommandInteraction
from disnake.ext.commands import Cog, slash_command

from modtracker.bot import ModTrackerBot
from modtracker.interactions import CommandRequest


class Infractions(Cog):
    """Issuing, revoking and looking up infractions."""

    def __init__(self, bot: ModTrackerBot):
        self.bot = bot

    @slash_command()
    async def infraction(self, inter: ApplicationCommandInteraction) -> None:
        """Infraction commands."""

    @infraction.sub_command()
    async def issue(self, inter: ApplicationCommandInteraction, user: disnake.User, reason: str) -> None:
        """Issue an infraction to a user.

        Parameters
        ----------
        user: The user to sanction
        reason: Why the infraction is being issued
        """
        await self.bot.handlers.issue_infraction(CommandRequest.from_interaction(inter, user=user, reason=reason))

    @infraction.sub_command()
    async def revoke(self, inter: ApplicationCommandInteraction, caseid: str) -> None:
        """Revoke an active infraction.

        Parameters
        ----------
        caseid: The infraction's case ID
        """
        await self.bot.handlers.revoke_infraction(CommandRequest.from_interaction(inter, caseid=caseid))

    @infraction.sub_command()
    async def lookup(self, inter: ApplicationCommandInteraction, caseid: str) -> None:
        """Show an infraction by its case ID.

        Parameters
        ----------
        caseid: The infraction's case ID
        """
        await self.bot.handlers.lookup_infraction(CommandRequest.from_interaction(inter, caseid=caseid))

    @infraction.sub_command()
    async def history(self, inter: ApplicationCommandInteraction, user: disnake.User) -> None:
        """List a user's most recent infractions.

        Parameters
        ----------
        user: The user to look up
        """
        await self.bot.handlers.infraction_history(CommandRequest.from_interaction(inter, user=user))


def setup(bot: ModTrackerBot) -> None:
    """Loads the infractions cog."""
    bot.add_cog(Infractions(bot))
