"""Environment-driven settings, read once at startup."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

DOCUMENT_NAME = "data.json"


@dataclass(frozen=True)
class Settings:
    """
    Service configuration.

    Attributes:
        bucket_name: GCS bucket holding the document. None selects local-file mode.
        send_key: Shared secret required in `x-send-key` to append.
        view_key: Shared secret required in `x-view-key` to list.
        host: Interface the server binds to.
        port: Port the server listens on.
        data_dir: Directory holding the local document.
        log_level: Root log level name.
    """

    bucket_name: Optional[str] = None
    send_key: str = "test-send"
    view_key: str = "test-view"
    host: str = "0.0.0.0"
    port: int = 8080
    data_dir: Path = Path(".")
    log_level: str = "INFO"

    @property
    def use_local(self) -> bool:
        return not self.bucket_name

    @property
    def local_path(self) -> Path:
        return self.data_dir / DOCUMENT_NAME

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Env vars:
            BUCKET_NAME, SEND_KEY, VIEW_KEY, HOST, PORT, DATA_DIR, LOG_LEVEL
        """
        env = os.environ if environ is None else environ
        return cls(
            bucket_name=env.get("BUCKET_NAME") or None,
            send_key=env.get("SEND_KEY", "test-send"),
            view_key=env.get("VIEW_KEY", "test-view"),
            host=env.get("HOST", "0.0.0.0"),
            port=int(env.get("PORT", "8080")),
            data_dir=Path(env.get("DATA_DIR", ".")).expanduser(),
            log_level=env.get("LOG_LEVEL", "INFO"),
        )


__all__ = ["DOCUMENT_NAME", "Settings"]
