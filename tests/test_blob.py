import pytest
import requests
from google.api_core.exceptions import ServiceUnavailable

from jsondrop.config import Settings
from jsondrop.storage import (
    BlobNotFound,
    GcsBlobStore,
    LocalFileBlobStore,
    StorageError,
    build_blob_store,
)


def test_local_missing_file_is_not_found(tmp_path):
    store = LocalFileBlobStore(tmp_path / "data.json")
    with pytest.raises(BlobNotFound):
        store.read()


def test_local_write_creates_parent_and_overwrites(tmp_path):
    store = LocalFileBlobStore(tmp_path / "nested" / "data.json")
    store.write(b"[1]")
    store.write(b"[2]")
    assert store.read() == b"[2]"


def test_local_other_os_errors_are_storage_errors(tmp_path):
    # A directory where the file should be.
    (tmp_path / "data.json").mkdir()
    store = LocalFileBlobStore(tmp_path / "data.json")
    with pytest.raises(StorageError):
        store.read()
    with pytest.raises(StorageError):
        store.write(b"[]")


def test_gcs_missing_object_is_not_found(fake_gcs):
    store = GcsBlobStore("drop-bucket", client=fake_gcs)
    with pytest.raises(BlobNotFound):
        store.read()


def test_gcs_write_then_read(fake_gcs):
    store = GcsBlobStore("drop-bucket", client=fake_gcs)
    store.write(b'[{"x": 1}]')

    blob = fake_gcs.bucket("drop-bucket").blob("data.json")
    assert blob.content_type == "application/json"
    assert store.read() == b'[{"x": 1}]'
    assert store.describe() == "gs://drop-bucket/data.json"


def test_gcs_backend_failure_is_storage_error(fake_gcs):
    store = GcsBlobStore("drop-bucket", client=fake_gcs)
    fake_gcs.bucket("drop-bucket").blob("data.json").error = ServiceUnavailable("backend down")

    with pytest.raises(StorageError, match="backend down"):
        store.read()
    with pytest.raises(StorageError, match="backend down"):
        store.write(b"[]")


def test_build_selects_local_without_bucket(tmp_path):
    store = build_blob_store(Settings(data_dir=tmp_path))
    assert isinstance(store, LocalFileBlobStore)
    assert store.path == tmp_path / "data.json"
    assert store.kind == "local"


def test_build_selects_gcs_with_bucket(fake_gcs):
    store = build_blob_store(Settings(bucket_name="drop-bucket"), client=fake_gcs)
    assert isinstance(store, GcsBlobStore)
    assert store.kind == "gcs"
    assert "drop-bucket" in fake_gcs.buckets


@pytest.mark.parametrize(
    "error", [requests.exceptions.ConnectionError("connection reset"), TimeoutError("connection reset")]
)
def test_gcs_transport_failure_is_storage_error(fake_gcs, error):
    store = GcsBlobStore("drop-bucket", client=fake_gcs)
    fake_gcs.bucket("drop-bucket").blob("data.json").error = error

    with pytest.raises(StorageError, match="connection reset"):
        store.read()
    with pytest.raises(StorageError, match="connection reset"):
        store.write(b"[]")
