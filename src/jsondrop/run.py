#!/usr/bin/env python3
"""
jsondrop run script.

Serves the HTTP API with uvicorn using settings from the environment;
command-line flags override host and port.
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

import uvicorn

from jsondrop import __version__
from jsondrop.config import Settings
from jsondrop.log import configure_logging, logging_config

logger = logging.getLogger(__name__)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="jsondrop server")
    parser.add_argument("--version", action="version", version=f"jsondrop {__version__}")
    parser.add_argument("--host", type=str, default=settings.host, help="Interface to bind")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to listen on")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes (development)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    settings = Settings.from_env()
    args = build_parser(settings).parse_args(argv)

    configure_logging(settings.log_level)
    logger.info("Server running", extra={"host": args.host, "port": args.port})

    uvicorn.run(
        "jsondrop.api.run:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_config=logging_config(settings.log_level),
    )


if __name__ == "__main__":
    main()
