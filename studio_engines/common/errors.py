"""Error taxonomy shared by the studio engines."""
from __future__ import annotations


class StudioError(Exception):
    """Base class for studio engine failures."""


class StorageUnavailable(StudioError):
    """A client-side key/value storage could not be read or written."""


class RepositoryError(StudioError):
    """The backing table store failed on read or write."""

    def __init__(self, message: str, resource_kind: str = "store") -> None:
        super().__init__(message)
        self.message = message
        self.resource_kind = resource_kind
