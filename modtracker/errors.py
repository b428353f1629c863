"""Errors raised while handling moderation commands."""


class ModerationError(Exception):
    """Base class for errors reported back to the invoking member."""


class PermissionDenied(ModerationError):
    """The invoking member may not run this command."""


class ValidationError(ModerationError):
    """The command's arguments don't refer to something we can act on."""


class StorageError(Exception):
    """A record could not be written.

    This isn't reported as a denial; it propagates to the command error handler.
    """
