"""
ModTracker - Notification Tests
===============================

Tests for sending moderation notices to the action and log channels.
"""

from unittest.mock import MagicMock

import disnake
import pytest

from conftest import ACTION_CHANNEL_ID, LOG_CHANNEL_ID, make_config
from modtracker.constants import Colors
from modtracker.utils.notices import Notice, notify


@pytest.fixture
def notice():
    return Notice(title="🚨 Infraction Issued", color=Colors.red, fields=[("User", "<@1>"), ("Case ID", "abc")])


class TestNotice:
    """Tests for rendering notices."""

    def test_to_embed(self, notice):
        """Fields keep their order and aren't inline."""
        embed = notice.to_embed()

        assert embed.title == "🚨 Infraction Issued"
        assert embed.color == Colors.red
        assert [(field.name, field.value, field.inline) for field in embed.fields] == [
            ("User", "<@1>", False),
            ("Case ID", "abc", False),
        ]


class TestNotify:
    """Tests for delivering notices."""

    @pytest.mark.asyncio
    async def test_sends_to_both_channels(self, mock_guild, notice):
        """Both configured channels receive the notice."""
        config = make_config(action_channel_id=ACTION_CHANNEL_ID, log_channel_id=LOG_CHANNEL_ID)

        delivered = await notify(mock_guild, config, notice)

        assert delivered == 2
        for channel_id in (ACTION_CHANNEL_ID, LOG_CHANNEL_ID):
            channel = mock_guild.channels_by_id[channel_id]
            channel.send.assert_awaited_once()
            assert channel.send.await_args.kwargs["embed"].title == notice.title

    @pytest.mark.asyncio
    async def test_skips_unconfigured_channels(self, mock_guild, notice):
        """Nothing is sent when no channels are configured."""
        delivered = await notify(mock_guild, make_config(), notice)

        assert delivered == 0
        mock_guild.get_channel.assert_not_called()

    @pytest.mark.asyncio
    async def test_log_only(self, mock_guild, notice):
        """`action=False` leaves the action channel alone."""
        config = make_config(action_channel_id=ACTION_CHANNEL_ID, log_channel_id=LOG_CHANNEL_ID)

        delivered = await notify(mock_guild, config, notice, action=False)

        assert delivered == 1
        mock_guild.channels_by_id[ACTION_CHANNEL_ID].send.assert_not_awaited()
        mock_guild.channels_by_id[LOG_CHANNEL_ID].send.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unresolvable_channel_is_skipped(self, mock_guild, notice):
        """A deleted action channel doesn't stop the log notice."""
        config = make_config(action_channel_id=123, log_channel_id=LOG_CHANNEL_ID)

        delivered = await notify(mock_guild, config, notice)

        assert delivered == 1
        mock_guild.channels_by_id[LOG_CHANNEL_ID].send.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_delivery_failure_is_swallowed(self, mock_guild, notice):
        """A failed send is logged and the other channel still gets the notice."""
        action_channel = mock_guild.channels_by_id[ACTION_CHANNEL_ID]
        action_channel.send.side_effect = disnake.Forbidden(MagicMock(status=403, reason="Forbidden"), "")
        config = make_config(action_channel_id=ACTION_CHANNEL_ID, log_channel_id=LOG_CHANNEL_ID)

        delivered = await notify(mock_guild, config, notice)

        assert delivered == 1
        mock_guild.channels_by_id[LOG_CHANNEL_ID].send.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_connection_error_is_swallowed(self, mock_guild, notice):
        """A non-HTTP failure such as a dropped connection is treated like any other failed send."""
        mock_guild.channels_by_id[ACTION_CHANNEL_ID].send.side_effect = OSError("connection reset")
        config = make_config(action_channel_id=ACTION_CHANNEL_ID, log_channel_id=LOG_CHANNEL_ID)

        delivered = await notify(mock_guild, config, notice)

        assert delivered == 1
        mock_guild.channels_by_id[LOG_CHANNEL_ID].send.assert_awaited_once()
