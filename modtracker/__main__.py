"""The main interface for the bot."""

import sys

from loguru import logger

from modtracker import constants
from modtracker.bot import ModTrackerBot

logger.remove()
logger.add(sys.stderr, level=constants.Bot.log_level)

instance = ModTrackerBot.create()
instance.load_extensions()
instance.run(constants.Bot.token)
