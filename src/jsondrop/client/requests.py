"""
# jsondrop HTTP Client

Thin wrapper around the service routes:

- GET  /health
- POST /data   (x-send-key)
- GET  /data   (x-view-key)

## Usage
from jsondrop.client import DropApiClient

client = DropApiClient("http://127.0.0.1:8080", send_key="test-send", view_key="test-view")
print(client.send({"temperature": 21.5}))
for record in client.view():
    print(record.timestamp, record.payload)
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

import requests

JsonDict = Dict[str, Any]
Json = Union[JsonDict, List[Any], str, int, float, bool, None]


class DropApiError(RuntimeError):
    """
    Exception raised when the service returns a non-2xx response.
    """

    def __init__(self, status_code: int, message: str, url: str) -> None:
        super().__init__(f"[DropApiError] {status_code} {message} | url={url}")
        self.status_code = status_code
        self.message = message
        self.url = url


@dataclass(frozen=True)
class Record:
    """
    Client-side representation of one stored record.
    """

    timestamp: str
    payload: Any

    @staticmethod
    def from_row(row: JsonDict) -> "Record":
        return Record(timestamp=str(row["timestamp"]), payload=row.get("payload"))


@dataclass(frozen=True)
class DropApiClient:
    """
    A small client for the jsondrop endpoints.

    Attributes:
        base_url: Base URL for the service, e.g. "http://127.0.0.1:8080"
        send_key: Write secret sent as x-send-key.
        view_key: Read secret sent as x-view-key.
        timeout_s: Request timeout in seconds.
        session: Optional requests.Session for connection reuse.
    """

    base_url: str
    send_key: Optional[str] = None
    view_key: Optional[str] = None
    timeout_s: float = 10.0
    session: Optional[Any] = None

    def _url(self, path: str) -> str:
        return f"{self.base_url.rstrip('/')}{path}"

    def _request(
        self,
        method: str,
        path: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        data: Optional[bytes] = None,
    ) -> Json:
        """
        Perform an HTTP request and return the parsed JSON response.

        Raises:
            DropApiError: If server returns non-2xx response.
            requests.RequestException: For network errors/timeouts.
            ValueError: If a 2xx response is not JSON.
        """
        url = self._url(path)
        sess = self.session or requests

        resp = sess.request(method, url, headers=headers, data=data, timeout=self.timeout_s)

        # Error bodies are {"error": ...}; fall back to the raw text.
        try:
            payload = resp.json()
        except ValueError:
            payload = None

        if not (200 <= resp.status_code < 300):
            if isinstance(payload, dict) and "error" in payload:
                message = str(payload["error"])
            else:
                message = resp.text
            raise DropApiError(resp.status_code, message, url)

        if payload is None and resp.text.strip() != "null":
            raise ValueError(f"Expected JSON response from {url}")
        return payload

    def health(self) -> JsonDict:
        """GET /health"""
        payload = self._request("GET", "/health")
        if not isinstance(payload, dict):
            raise ValueError("Expected a JSON object from /health")
        return payload

    def send(self, payload: Json) -> int:
        """
        POST /data

        Returns:
            Number of stored records after this one was appended.
        """
        body = json.dumps(payload).encode("utf-8")
        headers = {"x-send-key": self.send_key or "", "Content-Type": "application/json"}
        resp = self._request("POST", "/data", headers=headers, data=body)
        if not isinstance(resp, dict):
            raise ValueError("Expected a JSON object from POST /data")
        return int(resp["count"])

    def view(self) -> List[Record]:
        """GET /data, parsed into Record objects in arrival order."""
        rows = self._request("GET", "/data", headers={"x-view-key": self.view_key or ""})
        if not isinstance(rows, list):
            raise ValueError("Expected a JSON array from GET /data")
        return [Record.from_row(r) for r in rows]
