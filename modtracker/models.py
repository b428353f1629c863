"""Database models."""

from datetime import datetime, timezone
from typing import Optional

from beanie import Document, Indexed
from pydantic import Field

from modtracker.constants import Moderation


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class GuildConfig(Document):
    """Per-server moderation settings."""

    guild_id: Indexed(int, unique=True)

    staff_role_id: Optional[int] = None
    action_channel_id: Optional[int] = None
    log_channel_id: Optional[int] = None

    promotable_role_ids: list[int] = Field(default_factory=list, max_length=Moderation.max_promotable_roles)

    class Settings:
        name = "guild_configs"
        validate_on_save = True


class Infraction(Document):
    """A user infraction."""

    case_id: Indexed(str, unique=True)
    guild_id: int

    subject_id: int
    issuer_id: int
    reason: str = Field(min_length=1)

    active: bool = True
    created_at: datetime = Field(default_factory=_utcnow)
    revoked_at: Optional[datetime] = None
    revoked_by: Optional[int] = None

    class Settings:
        name = "infractions"
        validate_on_save = True


class Promotion(Document):
    """A role granted to a member by staff.

    The revocation fields are kept for parity with `Infraction`; nothing sets them yet.
    """

    case_id: Indexed(str, unique=True)
    guild_id: int

    subject_id: int
    promoter_id: int
    role_id: int

    active: bool = True
    created_at: datetime = Field(default_factory=_utcnow)
    revoked_at: Optional[datetime] = None
    revoked_by: Optional[int] = None

    class Settings:
        name = "promotions"
        validate_on_save = True


DOCUMENT_MODELS = [GuildConfig, Infraction, Promotion]
