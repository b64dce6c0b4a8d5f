from __future__ import annotations


class BlobNotFound(LookupError):
    """The stored document does not exist yet."""


class StorageError(RuntimeError):
    """The backend failed to read or write the document."""


class CorruptDataError(StorageError):
    """The stored bytes do not parse as a JSON array."""


class AuthorizationFailure(PermissionError):
    """A request presented the wrong shared secret."""
