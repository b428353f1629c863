"""The request object passed from slash commands to the command handlers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Mapping, Optional

from disnake import ApplicationCommandInteraction, Embed, Guild, Member


class Visibility(Enum):
    """Who can see a reply."""

    PUBLIC = "public"
    PRIVATE = "private"


@dataclass(frozen=True)
class CommandRequest:
    """A validated command invocation.

    `args` holds the command's options by name, already converted by disnake
    (members, roles, channels, strings).
    """

    actor: Member
    community: Guild
    args: Mapping[str, Any]
    responder: Callable[..., Awaitable[Any]]

    async def reply(
        self, content: Optional[str] = None, *, embed: Optional[Embed] = None, visibility: Visibility = Visibility.PUBLIC
    ) -> None:
        """Replies to the member who invoked the command."""
        kwargs = {"ephemeral": visibility is Visibility.PRIVATE}
        if content is not None:
            kwargs["content"] = content
        if embed is not None:
            kwargs["embed"] = embed

        await self.responder(**kwargs)

    @classmethod
    def from_interaction(cls, inter: ApplicationCommandInteraction, **args) -> CommandRequest:
        """Builds a request from a slash command interaction."""
        return cls(actor=inter.author, community=inter.guild, args=args, responder=inter.send)
