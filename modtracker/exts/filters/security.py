"""Security-related checks."""

from disnake import ApplicationCommandInteraction
from disnake.ext.commands import Cog, NoPrivateMessage

from modtracker.bot import ModTrackerBot


class Security(Cog):
    """Security-related checks for the bot."""

    def __init__(self, bot: ModTrackerBot):
        self.bot = bot
        # Global checks: no bots can run any commands, and commands can't be run in a DM.
        self.bot.add_app_command_check(self.check_not_bot, slash_commands=True)
        self.bot.add_app_command_check(self.check_on_guild, slash_commands=True)

    def cog_unload(self) -> None:
        """Removes the global checks."""
        self.bot.remove_app_command_check(self.check_not_bot, slash_commands=True)
        self.bot.remove_app_command_check(self.check_on_guild, slash_commands=True)

    @staticmethod
    def check_not_bot(inter: ApplicationCommandInteraction) -> bool:
        """Check if the interaction is from a bot user."""
        return not inter.author.bot

    @staticmethod
    def check_on_guild(inter: ApplicationCommandInteraction) -> bool:
        """Check if the interaction is in a guild."""
        if inter.guild is None:
            raise NoPrivateMessage("This command cannot be used in private messages.")
        return True


def setup(bot: ModTrackerBot) -> None:
    """Loads the security cog."""
    bot.add_cog(Security(bot))
