"""Owner-only commands for configuring moderation in a server."""

from typing import Optional

import disnake
from disnake import ApplicationCommandInteraction
from disnake.ext.commands import Cog, slash_command

from modtracker.bot import ModTrackerBot
from modtracker.interactions import CommandRequest


class Configuration(Cog):
    """Server moderation settings."""

    def __init__(self, bot: ModTrackerBot):
        self.bot = bot

    @slash_command(name="addrole")
    async def add_role(self, inter: ApplicationCommandInteraction, role: disnake.Role) -> None:
        """Set the staff role allowed to manage infractions and promotions.

        Parameters
        ----------
        role: The staff role
        """
        await self.bot.handlers.set_staff_role(CommandRequest.from_interaction(inter, role=role))

    @slash_command(name="setchannel")
    async def set_channel(self, inter: ApplicationCommandInteraction, channel: disnake.TextChannel) -> None:
        """Set the channel where moderation actions are announced.

        Parameters
        ----------
        channel: The action channel
        """
        await self.bot.handlers.set_action_channel(CommandRequest.from_interaction(inter, channel=channel))

    @slash_command(name="setlogs")
    async def set_logs(self, inter: ApplicationCommandInteraction, channel: disnake.TextChannel) -> None:
        """Set the channel where moderation actions are logged.

        Parameters
        ----------
        channel: The log channel
        """
        await self.bot.handlers.set_log_channel(CommandRequest.from_interaction(inter, channel=channel))

    @slash_command(name="createpromotionreq")
    async def create_promotion_requirements(
        self,
        inter: ApplicationCommandInteraction,
        role1: disnake.Role,
        role2: Optional[disnake.Role] = None,
        role3: Optional[disnake.Role] = None,
        role4: Optional[disnake.Role] = None,
        role5: Optional[disnake.Role] = None,
        role6: Optional[disnake.Role] = None,
    ) -> None:
        """Define the roles staff may promote members to.

        Parameters
        ----------
        role1: A promotable role
        role2: A promotable role
        role3: A promotable role
        role4: A promotable role
        role5: A promotable role
        role6: A promotable role
        """
        # pylint: disable=too-many-arguments
        request = CommandRequest.from_interaction(
            inter, role1=role1, role2=role2, role3=role3, role4=role4, role5=role5, role6=role6
        )
        await self.bot.handlers.set_promotable_roles(request)


def setup(bot: ModTrackerBot) -> None:
    """Loads the configuration cog."""
    bot.add_cog(Configuration(bot))
