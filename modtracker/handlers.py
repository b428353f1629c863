"""Command handlers for server configuration, promotions and infractions."""

import functools
import typing as t

import arrow
import disnake
from discord_timestamps import TimestampType, format_timestamp
from disnake import Embed
from loguru import logger

from modtracker.constants import Colors, Moderation
from modtracker.database import ConfigStore, RecordStore
from modtracker.errors import ModerationError, PermissionDenied, ValidationError
from modtracker.interactions import CommandRequest, Visibility
from modtracker.models import GuildConfig, Infraction
from modtracker.utils.checks import has_staff_permission, is_guild_owner
from modtracker.utils.messages import format_user, role_mention, send_denial, user_mention
from modtracker.utils.notices import Notice, notify

Handler = t.Callable[["ModerationHandlers", CommandRequest], t.Awaitable[None]]

PROMOTABLE_ROLE_OPTIONS = tuple(f"role{n}" for n in range(1, Moderation.max_promotable_roles + 1))


def reports_denials(func: Handler) -> Handler:
    """Replies privately with the reason when a handler rejects its request."""

    @functools.wraps(func)
    async def wrapper(self: "ModerationHandlers", request: CommandRequest) -> None:
        try:
            await func(self, request)
        except ModerationError as error:
            logger.debug(
                f"{func.__name__} denied for {request.actor} ({request.actor.id}) "
                f"in guild {request.community.id}: {error}"
            )
            await send_denial(request, str(error))

    return wrapper


class ModerationHandlers:
    """Handles the moderation commands, independent of how they were invoked."""

    def __init__(
        self,
        configs: ConfigStore,
        records: RecordStore,
        notifier: t.Callable[..., t.Awaitable[int]] = notify,
    ):
        self.configs = configs
        self.records = records
        self.notify = notifier

    @staticmethod
    def _require_owner(request: CommandRequest) -> None:
        if not is_guild_owner(request.actor, request.community):
            raise PermissionDenied("Owner only.")

    async def _staff_config(self, request: CommandRequest) -> GuildConfig:
        """Loads the server's configuration, making sure the actor is staff."""
        config = await self.configs.get_or_create(request.community.id)
        if not has_staff_permission(request.actor, config):
            raise PermissionDenied("No permission.")
        return config

    # Configuration

    @reports_denials
    async def set_staff_role(self, request: CommandRequest) -> None:
        """Sets the role allowed to manage infractions and promotions."""
        self._require_owner(request)

        role = request.args["role"]
        config = await self.configs.get_or_create(request.community.id)
        await self.configs.update(config, staff_role_id=role.id)

        await request.reply(f"Staff role set to {role.mention}")

    @reports_denials
    async def set_action_channel(self, request: CommandRequest) -> None:
        """Sets the channel where moderation actions are announced."""
        self._require_owner(request)

        channel = request.args["channel"]
        config = await self.configs.get_or_create(request.community.id)
        await self.configs.update(config, action_channel_id=channel.id)

        await request.reply(f"Action channel set to {channel.mention}")

    @reports_denials
    async def set_log_channel(self, request: CommandRequest) -> None:
        """Sets the channel where moderation actions are logged."""
        self._require_owner(request)

        channel = request.args["channel"]
        config = await self.configs.get_or_create(request.community.id)
        await self.configs.update(config, log_channel_id=channel.id)

        await request.reply(f"Log channel set to {channel.mention}")

    @reports_denials
    async def set_promotable_roles(self, request: CommandRequest) -> None:
        """Replaces the list of roles staff may promote members to.

        Options that weren't given are skipped, so one role results in a one-item list.
        """
        self._require_owner(request)

        roles = (request.args.get(option) for option in PROMOTABLE_ROLE_OPTIONS)
        role_ids = list(dict.fromkeys(role.id for role in roles if role is not None))

        config = await self.configs.get_or_create(request.community.id)
        await self.configs.update(config, promotable_role_ids=role_ids)

        await request.reply("Promotion requirements saved.")

    # Promotions

    @reports_denials
    async def promote(self, request: CommandRequest) -> None:
        """Grants a promotable role to a member and records the promotion."""
        config = await self._staff_config(request)
        guild = request.community
        user = request.args["user"]
        role = request.args["role"]

        if role.id not in config.promotable_role_ids:
            raise ValidationError("That role is not promotable.")

        member = guild.get_member(user.id)
        if member is None:
            try:
                member = await guild.fetch_member(user.id)
            except disnake.NotFound as error:
                raise ValidationError("That user isn't a member of this server.") from error

        try:
            await member.add_roles(role, reason=f"Promoted by {request.actor} ({request.actor.id})")
        except disnake.Forbidden as error:
            raise ValidationError(f"I don't have permission to grant {role.mention}.") from error

        promotion = await self.records.create_promotion(guild.id, member.id, request.actor.id, role.id)

        notice = Notice(
            title="📈 Promotion Issued",
            color=Colors.green,
            fields=[
                ("User", user_mention(member.id)),
                ("Role", role_mention(role.id)),
                ("Case ID", promotion.case_id),
            ],
        )
        await self.notify(guild, config, notice)

        logger.info(f"Promotion {promotion.case_id}: {member} ({member.id}) granted role {role.id} by {request.actor}")
        await request.reply("Promotion successful.", visibility=Visibility.PRIVATE)

    # Infractions

    @reports_denials
    async def issue_infraction(self, request: CommandRequest) -> None:
        """Records an infraction against a user."""
        config = await self._staff_config(request)
        guild = request.community
        user = request.args["user"]
        reason = request.args["reason"].strip()

        if not reason:
            raise ValidationError("A reason is required.")

        infraction = await self.records.create_infraction(guild.id, user.id, request.actor.id, reason)

        notice = Notice(
            title="🚨 Infraction Issued",
            color=Colors.red,
            fields=[
                ("User", user_mention(user.id)),
                ("Reason", reason),
                ("Case ID", infraction.case_id),
            ],
        )
        await self.notify(guild, config, notice)

        logger.info(f"Infraction {infraction.case_id}: issued to {user} ({user.id}) by {request.actor}")
        await request.reply(f"Infraction issued. Case ID: `{infraction.case_id}`", visibility=Visibility.PRIVATE)

    @reports_denials
    async def revoke_infraction(self, request: CommandRequest) -> None:
        """Revokes an active infraction. Only the log channel is told."""
        config = await self._staff_config(request)
        case_id = request.args["caseid"].strip()

        infraction = await self.records.revoke_infraction(request.community.id, case_id, request.actor.id)
        if infraction is None:
            raise ValidationError("Invalid case ID.")

        notice = Notice(
            title="❌ Infraction Revoked",
            color=Colors.green,
            fields=[
                ("Case ID", infraction.case_id),
                ("Revoked by", user_mention(request.actor.id)),
            ],
        )
        await self.notify(request.community, config, notice, action=False)

        logger.info(f"Infraction {infraction.case_id}: revoked by {request.actor} ({request.actor.id})")
        await request.reply("Infraction revoked.", visibility=Visibility.PRIVATE)

    @reports_denials
    async def lookup_infraction(self, request: CommandRequest) -> None:
        """Shows a single infraction from this server."""
        await self._staff_config(request)
        case_id = request.args["caseid"].strip()

        infraction = await self.records.get_infraction(request.community.id, case_id)
        if infraction is None:
            raise ValidationError("Invalid case ID.")

        await request.reply(embed=infraction_embed(infraction), visibility=Visibility.PRIVATE)

    @reports_denials
    async def infraction_history(self, request: CommandRequest) -> None:
        """Lists a user's most recent infractions in this server."""
        await self._staff_config(request)
        user = request.args["user"]

        infractions = await self.records.list_infractions(request.community.id, user.id)
        if not infractions:
            await request.reply(f"{user.mention} has no infractions.", visibility=Visibility.PRIVATE)
            return

        embed = Embed(title=f"Infractions for {user}", color=Colors.blurple)
        embed.description = "\n".join(_history_line(infraction) for infraction in infractions)
        embed.set_footer(text=f"Showing the latest {len(infractions)}")

        await request.reply(embed=embed, visibility=Visibility.PRIVATE)


def _timestamp(value) -> str:
    return format_timestamp(arrow.get(value), TimestampType.RELATIVE)


def _history_line(infraction: Infraction) -> str:
    status = "active" if infraction.active else "revoked"
    return f"`{infraction.case_id}` ({status}, {_timestamp(infraction.created_at)}): {infraction.reason}"


def infraction_embed(infraction: Infraction) -> Embed:
    """Builds an embed describing one infraction."""
    embed = Embed(
        title=f"Infraction {infraction.case_id}",
        color=Colors.red if infraction.active else Colors.green,
    )
    embed.add_field(name="User", value=format_user(infraction.subject_id), inline=False)
    embed.add_field(name="Issued by", value=format_user(infraction.issuer_id), inline=False)
    embed.add_field(name="Reason", value=infraction.reason, inline=False)
    embed.add_field(name="Issued", value=_timestamp(infraction.created_at))

    if infraction.active:
        embed.add_field(name="Status", value="Active")
    else:
        embed.add_field(
            name="Status",
            value=f"Revoked {_timestamp(infraction.revoked_at)} by {user_mention(infraction.revoked_by)}",
        )

    return embed
