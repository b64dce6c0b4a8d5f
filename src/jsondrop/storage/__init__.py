"""
Storage layer: raw-bytes adapters plus the JSON document repository.
"""

from .blob import BlobStore, GcsBlobStore, LocalFileBlobStore, build_blob_store
from .errors import AuthorizationFailure, BlobNotFound, CorruptDataError, StorageError
from .repository import DataRepository, loads_strict, make_record

__all__ = [
    "AuthorizationFailure",
    "BlobNotFound",
    "BlobStore",
    "CorruptDataError",
    "DataRepository",
    "GcsBlobStore",
    "LocalFileBlobStore",
    "StorageError",
    "build_blob_store",
    "loads_strict",
    "make_record",
]
