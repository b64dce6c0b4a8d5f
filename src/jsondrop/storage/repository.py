"""
JSON document repository on top of a BlobStore.

The whole document is reloaded on every call. Appends inside one process go
through a single asyncio.Lock; processes sharing a backend still overwrite
each other's appends (last writer wins).
"""

from __future__ import annotations

import asyncio
import json
import logging
from datetime import datetime, timezone
from typing import Any, Optional

from .blob import BlobStore
from .errors import BlobNotFound, CorruptDataError

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def loads_strict(raw: bytes | str) -> Any:
    """`json.loads` without the NaN and Infinity extensions."""
    return json.loads(raw, parse_constant=_reject_constant)


def _iso_utc(now: datetime) -> str:
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def make_record(payload: Any, now: Optional[datetime] = None) -> dict[str, Any]:
    """Build one `{timestamp, payload}` record stamped with the current UTC time."""
    return {"timestamp": _iso_utc(now or datetime.now(timezone.utc)), "payload": payload}


class DataRepository:
    def __init__(self, store: BlobStore) -> None:
        self.store = store
        self._write_lock = asyncio.Lock()

    async def load_records(self) -> list[Any]:
        """
        Return every stored record in arrival order.

        Raises:
            StorageError: the backend failed.
            CorruptDataError: the stored bytes are not a JSON array.
        """
        return await asyncio.to_thread(self._load_sync)

    async def append_record(self, payload: Any) -> int:
        """
        Append one record and persist the whole document.

        Returns:
            Number of records after the append.
        """
        async with self._write_lock:
            records = await self.load_records()
            records.append(make_record(payload))
            data = json.dumps(records, indent=2, ensure_ascii=False, allow_nan=False).encode("utf-8")
            await asyncio.to_thread(self.store.write, data)
        return len(records)

    def _load_sync(self) -> list[Any]:
        try:
            raw = self.store.read()
        except BlobNotFound:
            logger.debug("No stored document yet, treating as empty")
            return []

        try:
            records = loads_strict(raw)
        except ValueError as exc:
            raise CorruptDataError(f"Stored document is not valid JSON: {exc}") from exc

        if not isinstance(records, list):
            raise CorruptDataError(f"Stored document is a JSON {type(records).__name__}, expected an array")
        return records
