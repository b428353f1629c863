"""Our custom instance of disnake.ext.commands.InteractionBot."""

from __future__ import annotations

from typing import Optional

from beanie import init_beanie
from disnake import AllowedMentions, Intents
from disnake.ext import commands
from loguru import logger
from motor.motor_asyncio import AsyncIOMotorClient

from modtracker import constants, models
from modtracker.database import ConfigStore, RecordStore
from modtracker.handlers import ModerationHandlers


class ModTrackerBot(commands.InteractionBot):
    """Our custom instance of disnake.ext.commands.InteractionBot."""

    # pylint: disable=abstract-method,too-many-ancestors

    def __init__(self, *args, handlers: Optional[ModerationHandlers] = None, **kwargs):
        super().__init__(*args, **kwargs)

        self.database: Optional[AsyncIOMotorClient] = None
        self.handlers = handlers or ModerationHandlers(ConfigStore(), RecordStore())

    async def _init_db(self) -> None:
        """Initializes the database."""
        self.database = AsyncIOMotorClient(constants.Database.uri)

        await init_beanie(self.database[constants.Database.name], document_models=models.DOCUMENT_MODELS)

        logger.info("Database initialized")

    @classmethod
    def create(cls) -> ModTrackerBot:
        """Creates an instance of the bot."""
        intents = Intents.default()
        intents.members = True

        return cls(
            allowed_mentions=AllowedMentions(everyone=False, roles=False),
            intents=intents,
            test_guilds=constants.Bot.test_guilds or None,
        )

    def load_extensions(self) -> None:
        """Loads all extensions."""
        # This is done here to avoid circular imports.
        from modtracker.utils.extensions import EXTENSIONS  # pylint: disable=import-outside-toplevel

        for extension in sorted(EXTENSIONS):
            logger.debug(f"Loading extension {extension}")
            self.load_extension(extension)

    async def start(self, *args, **kwargs) -> None:
        """Connects to the database before logging in, so no command runs without it."""
        await self._init_db()
        await super().start(*args, **kwargs)

    async def close(self) -> None:
        """Closes the Discord connection and then the database client."""
        await super().close()

        if self.database is not None:
            self.database.close()
            logger.info("Database connection closed")

    async def on_connect(self):
        """Logs when the bot connects to Discord."""
        logger.info(f"Connected to Discord as {self.user}")

    async def on_ready(self) -> None:
        """Logs when the bot is ready."""
        logger.info(f"Bot is ready in {len(self.guilds)} guild(s)")

    async def on_disconnect(self) -> None:
        """Logs when the bot disconnects from Discord."""
        logger.critical("Disconnected from Discord")

    async def on_resumed(self) -> None:
        """Logs when the bot resumes from a disconnection."""
        logger.info("Resumed Discord session")
