"""Command error handling."""

from disnake import ApplicationCommandInteraction
from disnake.ext.commands import Cog, errors
from loguru import logger

from modtracker.bot import ModTrackerBot
from modtracker.interactions import CommandRequest
from modtracker.utils.messages import send_denial


class ErrorHandling(Cog):
    """The command error handler for the bot."""

    def __init__(self, bot: ModTrackerBot):
        self.bot = bot

    @Cog.listener()
    async def on_slash_command_error(self, inter: ApplicationCommandInteraction, error: errors.CommandError) -> None:
        """Handles errors that occur while executing a slash command."""
        request = CommandRequest.from_interaction(inter)

        debug_message = (
            f"Command {inter.application_command.qualified_name} invoked by {inter.author} with error "
            f"{error.__class__.__name__}: {error}"
        )

        if isinstance(error, errors.CheckFailure):
            logger.debug(debug_message)
            await self.handle_check_failure(request, error)
        elif isinstance(error, errors.CommandInvokeError):
            await self.handle_unexpected_error(request, error.original)
        else:
            await self.handle_unexpected_error(request, error)

    @staticmethod
    async def handle_check_failure(request: CommandRequest, error: errors.CheckFailure) -> None:
        """Handles check failures."""
        if isinstance(error, errors.NoPrivateMessage):
            await send_denial(request, "Sorry, I can't do that in DMs.")
        elif isinstance(error, errors.BotMissingPermissions):
            logger.opt(exception=error).warning(f"Missing permissions to execute command invoked by {request.actor}")
            await send_denial(request, "Sorry, it looks like I don't have the permissions I need to do that.")
        else:
            await send_denial(request, "You can't use this command.")

    @staticmethod
    async def handle_unexpected_error(request: CommandRequest, error: Exception) -> None:
        """Handles unexpected errors, including storage failures."""
        logger.opt(exception=error).error(f"Error executing command invoked by {request.actor}")

        await send_denial(request, "An unexpected error occurred. Please let us know!")


def setup(bot: ModTrackerBot) -> None:
    """Loads the error handling cog."""
    bot.add_cog(ErrorHandling(bot))
