"""
Byte-level adapters for the single stored document.

Two variants share one interface:
    - LocalFileBlobStore: a fixed path on disk
    - GcsBlobStore: a fixed object key inside a Google Cloud Storage bucket

Both overwrite the whole document on every write.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Protocol

from google.api_core.exceptions import GoogleAPIError, NotFound
from google.auth.exceptions import GoogleAuthError
from requests.exceptions import RequestException

from ..config import DOCUMENT_NAME, Settings
from .errors import BlobNotFound, StorageError

logger = logging.getLogger(__name__)

# Transport failures surface as requests or socket errors, not GoogleAPIError.
_BACKEND_ERRORS = (GoogleAPIError, GoogleAuthError, RequestException, OSError)


class BlobStore(Protocol):
    """Bytes stored under one fixed key."""

    kind: str

    def read(self) -> bytes:
        """Return the stored bytes, or raise BlobNotFound."""
        ...

    def write(self, data: bytes) -> None:
        """Replace the stored bytes, or raise StorageError."""
        ...

    def describe(self) -> str:
        """Human-readable location, used in logs."""
        ...


class LocalFileBlobStore:
    """Store the document in a file on the local filesystem."""

    kind = "local"

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def read(self) -> bytes:
        try:
            return self.path.read_bytes()
        except FileNotFoundError as exc:
            raise BlobNotFound(str(self.path)) from exc
        except OSError as exc:
            raise StorageError(str(exc)) from exc

    def write(self, data: bytes) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_bytes(data)
        except OSError as exc:
            raise StorageError(str(exc)) from exc

    def describe(self) -> str:
        return f"file://{self.path.resolve()}"


class GcsBlobStore:
    """Store the document as one object in a GCS bucket."""

    kind = "gcs"

    def __init__(self, bucket_name: str, key: str = DOCUMENT_NAME, client: Optional[Any] = None) -> None:
        if client is None:
            from google.cloud import storage

            client = storage.Client()
        self.bucket_name = bucket_name
        self.key = key
        self._blob = client.bucket(bucket_name).blob(key)

    def read(self) -> bytes:
        try:
            return self._blob.download_as_bytes()
        except NotFound as exc:
            raise BlobNotFound(self.describe()) from exc
        except _BACKEND_ERRORS as exc:
            raise StorageError(str(exc)) from exc

    def write(self, data: bytes) -> None:
        try:
            self._blob.upload_from_string(data, content_type="application/json")
        except _BACKEND_ERRORS as exc:
            raise StorageError(str(exc)) from exc

    def describe(self) -> str:
        return f"gs://{self.bucket_name}/{self.key}"


def build_blob_store(settings: Settings, client: Optional[Any] = None) -> BlobStore:
    """
    Pick the storage variant for this process.

    Args:
        settings: Loaded settings; a bucket name selects GCS, otherwise local disk.
        client: Optional pre-built `google.cloud.storage.Client`.

    Returns:
        The adapter every request will use.
    """
    if settings.use_local:
        store: BlobStore = LocalFileBlobStore(settings.local_path)
    else:
        store = GcsBlobStore(settings.bucket_name or "", client=client)
    logger.info("Document storage selected", extra={"storage": store.describe()})
    return store
