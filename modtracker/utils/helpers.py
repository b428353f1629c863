"""Helpers that don't fit into another category."""

import secrets

from modtracker.constants import Moderation


def new_case_id() -> str:
    """Returns a short random case identifier, e.g. `"9f86d0818c"`.

    Nothing here guarantees uniqueness; the unique index on `case_id` does.
    """
    return secrets.token_hex(Moderation.case_id_bytes)
