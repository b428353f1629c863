"""
ModTracker - Test Fixtures
==========================

Shared fixtures for all tests.
"""

import os
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
import pytest_asyncio

# Constants are read from the environment at import time.
os.environ.setdefault("TOKEN", "test-token")

GUILD_ID = 987654321
OWNER_ID = 111111111
STAFF_ID = 222222222
MEMBER_ID = 333333333
STAFF_ROLE_ID = 444444444
PROMOTABLE_ROLE_ID = 555555555
OTHER_ROLE_ID = 666666666
ACTION_CHANNEL_ID = 777777777
LOG_CHANNEL_ID = 888888888


def make_role(role_id):
    """Create a mock Discord role."""
    role = MagicMock()
    role.id = role_id
    role.mention = f"<@&{role_id}>"
    return role


def make_member(member_id, role_ids=()):
    """Create a mock Discord member holding the given roles."""
    member = MagicMock()
    member.id = member_id
    member.bot = False
    member.mention = f"<@{member_id}>"
    member.roles = [make_role(role_id) for role_id in role_ids]
    member.add_roles = AsyncMock()
    return member


def make_channel(channel_id):
    """Create a mock Discord text channel."""
    channel = MagicMock()
    channel.id = channel_id
    channel.mention = f"<#{channel_id}>"
    channel.send = AsyncMock()
    return channel


def make_config(**fields):
    """Create a stand-in for a GuildConfig document."""
    defaults = dict(
        guild_id=GUILD_ID,
        staff_role_id=STAFF_ROLE_ID,
        action_channel_id=None,
        log_channel_id=None,
        promotable_role_ids=[PROMOTABLE_ROLE_ID],
    )
    defaults.update(fields)
    return SimpleNamespace(**defaults)


def make_request(actor, guild, **args):
    """Create a CommandRequest whose replies are recorded on `request.responder`."""
    from modtracker.interactions import CommandRequest

    return CommandRequest(actor=actor, community=guild, args=args, responder=AsyncMock())


def reply_kwargs(request):
    """Return the keyword arguments of the single reply sent for `request`."""
    request.responder.assert_awaited_once()
    return request.responder.await_args.kwargs


@pytest.fixture
def mock_guild():
    """Create a mock Discord guild with action and log channels."""
    channels = {ACTION_CHANNEL_ID: make_channel(ACTION_CHANNEL_ID), LOG_CHANNEL_ID: make_channel(LOG_CHANNEL_ID)}

    guild = MagicMock()
    guild.id = GUILD_ID
    guild.owner_id = OWNER_ID
    guild.channels_by_id = channels
    guild.get_channel = MagicMock(side_effect=channels.get)
    guild.get_member = MagicMock(return_value=None)
    guild.fetch_member = AsyncMock()
    return guild


@pytest.fixture
def owner():
    """The guild owner, who holds no roles."""
    return make_member(OWNER_ID)


@pytest.fixture
def staff_member():
    """A member holding the staff role."""
    return make_member(STAFF_ID, [STAFF_ROLE_ID])


@pytest.fixture
def regular_member():
    """A member without any roles."""
    return make_member(MEMBER_ID)


@pytest.fixture
def mock_configs():
    """A mock configuration store returning a configured GuildConfig."""
    configs = MagicMock()
    configs.config = make_config()
    configs.get_or_create = AsyncMock(return_value=configs.config)
    configs.update = AsyncMock(side_effect=lambda config, **fields: config)
    return configs


@pytest.fixture
def mock_records():
    """A mock record store that hands out fixed case IDs."""
    records = MagicMock()
    records.create_infraction = AsyncMock(return_value=SimpleNamespace(case_id="a1b2c3d4e5"))
    records.create_promotion = AsyncMock(return_value=SimpleNamespace(case_id="f6e5d4c3b2"))
    records.revoke_infraction = AsyncMock(return_value=SimpleNamespace(case_id="a1b2c3d4e5"))
    records.get_infraction = AsyncMock(return_value=None)
    records.list_infractions = AsyncMock(return_value=[])
    return records


@pytest.fixture
def mock_notifier():
    """A notifier that records notices instead of sending them."""
    return AsyncMock(return_value=0)


@pytest.fixture
def handlers(mock_configs, mock_records, mock_notifier):
    """Command handlers wired to mock stores."""
    from modtracker.handlers import ModerationHandlers

    return ModerationHandlers(mock_configs, mock_records, mock_notifier)


@pytest_asyncio.fixture
async def database():
    """Initialise beanie against an in-memory MongoDB."""
    from beanie import init_beanie
    from mongomock_motor import AsyncMongoMockClient

    from modtracker.models import DOCUMENT_MODELS

    client = AsyncMongoMockClient()
    db = client[f"modtracker_test_{uuid4().hex}"]
    await init_beanie(database=db, document_models=DOCUMENT_MODELS)
    yield db
