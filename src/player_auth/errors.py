"""Exceptions raised by the code store and authorization service."""


class PlayerAuthError(Exception):
    """Base class for player-auth errors."""


class StorageError(PlayerAuthError):
    """The backing database could not complete the operation."""


class UniqueViolation(PlayerAuthError):
    """An insert conflicted with a pending code or player."""
