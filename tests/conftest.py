from __future__ import annotations

from typing import Optional

import pytest
from fastapi.testclient import TestClient
from google.api_core.exceptions import NotFound

from jsondrop.api import create_app
from jsondrop.config import Settings


class FakeBlob:
    """Stands in for google.cloud.storage.Blob."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.data: Optional[bytes] = None
        self.content_type: Optional[str] = None
        self.error: Optional[Exception] = None

    def download_as_bytes(self) -> bytes:
        if self.error is not None:
            raise self.error
        if self.data is None:
            raise NotFound(f"No such object: {self.name}")
        return self.data

    def upload_from_string(self, data: bytes, content_type: Optional[str] = None) -> None:
        if self.error is not None:
            raise self.error
        self.data = data
        self.content_type = content_type


class FakeBucket:
    def __init__(self, name: str) -> None:
        self.name = name
        self.blobs: dict[str, FakeBlob] = {}

    def blob(self, key: str) -> FakeBlob:
        return self.blobs.setdefault(key, FakeBlob(f"{self.name}/{key}"))


class FakeGcsClient:
    def __init__(self) -> None:
        self.buckets: dict[str, FakeBucket] = {}

    def bucket(self, name: str) -> FakeBucket:
        return self.buckets.setdefault(name, FakeBucket(name))


@pytest.fixture
def fake_gcs() -> FakeGcsClient:
    return FakeGcsClient()


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(send_key="w1", view_key="r1", data_dir=tmp_path)


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c
