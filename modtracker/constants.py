"""Constant values for the bot."""

from os import environ

from disnake import Color


class Bot:
    """Bot-related settings."""

    token: str = environ["TOKEN"]
    log_level: str = environ.get("LOG_LEVEL", "INFO")

    test_guilds: list[int] = [int(guild) for guild in environ.get("TEST_GUILDS", "").split(",") if guild]


class Database:
    """Database connection settings."""

    uri: str = environ.get("MONGO_URI", "mongodb://localhost:27017")
    name: str = environ.get("MONGO_DATABASE", "modtracker")


class Moderation:
    """Limits for moderation records."""

    max_promotable_roles: int = 6
    case_id_bytes: int = 5
    history_limit: int = 10


def _get_color_env(name: str, default: tuple[int, int, int]) -> Color:
    """Gets an RGB color value from the environment."""
    color_str = environ.get(name, None)

    rgb = default if color_str is None else tuple(map(int, color_str.split(",")))

    return Color.from_rgb(*rgb)


class Colors:
    """Color objects."""

    red: Color = _get_color_env("COLOR_RED", (237, 66, 69))
    green: Color = _get_color_env("COLOR_GREEN", (87, 242, 135))
    blurple: Color = _get_color_env("COLOR_BLURPLE", (88, 101, 242))
