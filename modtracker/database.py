"""Storage for server configuration and moderation records."""

from datetime import datetime, timezone
from typing import Callable, Optional, TypeVar

from beanie import Document, UpdateResponse
from beanie.operators import Set
from loguru import logger
from pymongo.errors import DuplicateKeyError

from modtracker.constants import Moderation
from modtracker.errors import StorageError, ValidationError
from modtracker.models import GuildConfig, Infraction, Promotion
from modtracker.utils.helpers import new_case_id

RecordT = TypeVar("RecordT", bound=Document)


class ConfigStore:
    """One `GuildConfig` per server, created the first time it's needed."""

    async def get_or_create(self, guild_id: int) -> GuildConfig:
        """Returns the server's configuration, inserting an empty one if it doesn't exist yet."""
        config = await GuildConfig.find_one(GuildConfig.guild_id == guild_id)
        if config is not None:
            return config

        config = GuildConfig(guild_id=guild_id)
        try:
            await config.insert()
        except DuplicateKeyError:
            # Another command created it between our read and insert.
            logger.debug(f"Configuration for guild {guild_id} was created concurrently; reloading it.")
            return await GuildConfig.find_one(GuildConfig.guild_id == guild_id)

        logger.info(f"Created configuration for guild {guild_id}")
        return config

    async def update(self, config: GuildConfig, **fields) -> GuildConfig:
        """Sets the given fields on `config` and saves it."""
        roles = fields.get("promotable_role_ids")
        if roles is not None and len(roles) > Moderation.max_promotable_roles:
            raise ValidationError(f"At most {Moderation.max_promotable_roles} promotable roles can be set.")

        for name, value in fields.items():
            setattr(config, name, value)

        await config.save()
        logger.debug(f"Updated configuration for guild {config.guild_id}: {fields}")
        return config


class RecordStore:
    """Infraction and promotion records, addressed by case ID."""

    def __init__(self, case_id_factory: Callable[[], str] = new_case_id):
        self._new_case_id = case_id_factory

    async def _insert(self, record: RecordT) -> RecordT:
        """Inserts a new record, refusing to replace one with the same case ID."""
        try:
            await record.insert()
        except DuplicateKeyError as error:
            raise StorageError(f"Case ID {record.case_id} is already in use.") from error
        return record

    async def create_infraction(self, guild_id: int, subject_id: int, issuer_id: int, reason: str) -> Infraction:
        """Stores a new active infraction."""
        infraction = Infraction(
            case_id=self._new_case_id(),
            guild_id=guild_id,
            subject_id=subject_id,
            issuer_id=issuer_id,
            reason=reason,
        )
        return await self._insert(infraction)

    async def create_promotion(self, guild_id: int, subject_id: int, promoter_id: int, role_id: int) -> Promotion:
        """Stores a new promotion."""
        promotion = Promotion(
            case_id=self._new_case_id(),
            guild_id=guild_id,
            subject_id=subject_id,
            promoter_id=promoter_id,
            role_id=role_id,
        )
        return await self._insert(promotion)

    async def revoke_infraction(self, guild_id: int, case_id: str, revoked_by: int) -> Optional[Infraction]:
        """Marks an active infraction as revoked and returns it.

        Returns None if there's no active infraction with that case ID. The
        update only matches active records, so an infraction is revoked at most once.
        """
        # pylint: disable=singleton-comparison
        return await Infraction.find_one(
            Infraction.guild_id == guild_id,
            Infraction.case_id == case_id,
            Infraction.active == True,  # noqa: E712
        ).update(
            Set(
                {
                    Infraction.active: False,
                    Infraction.revoked_at: datetime.now(timezone.utc),
                    Infraction.revoked_by: revoked_by,
                }
            ),
            response_type=UpdateResponse.NEW_DOCUMENT,
        )

    async def get_infraction(self, guild_id: int, case_id: str) -> Optional[Infraction]:
        """Finds an infraction, active or not, issued in the given server."""
        return await Infraction.find_one(Infraction.guild_id == guild_id, Infraction.case_id == case_id)

    async def list_infractions(
        self, guild_id: int, subject_id: int, limit: int = Moderation.history_limit
    ) -> list[Infraction]:
        """Returns a member's most recent infractions in the given server, newest first."""
        return (
            await Infraction.find(Infraction.guild_id == guild_id, Infraction.subject_id == subject_id)
            .sort(-Infraction.created_at)
            .limit(limit)
            .to_list()
        )
