"""
Administrative commands for the hoops service.

    hoops-admin [--config FILE] push KEY_OR_PATH [KEY_OR_PATH ...]
    hoops-admin [--config FILE] serve [--host HOST] [--port PORT]

``push`` re-reads records from the local data directory and appends them
to the configured spreadsheet. Each argument is either a storage key or the
path to a saved ``.json`` record.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path

from hoops.application.services import HoopReplicationService
from hoops.config import Settings, get_settings
from hoops.infrastructure.dependencies import build_replication_service
from hoops.infrastructure.logging.log_config import setup_logging

logger = logging.getLogger(__name__)


def _load_settings(config_file: str | None) -> Settings:
    if config_file:
        # ``serve`` reloads settings inside uvicorn; make the file visible there too.
        os.environ["CONFIG_FILE"] = config_file
        get_settings.cache_clear()
    return get_settings()


def _looks_like_path(target: str) -> bool:
    return target.endswith(".json") or os.sep in target or Path(target).is_file()


async def push(service: HoopReplicationService, targets: list[str]) -> int:
    """Replicate every target; returns the number that failed."""
    failures = 0
    for target in targets:
        try:
            if _looks_like_path(target):
                hoop = await service.push_file(target)
            else:
                hoop = await service.push(target)
        except Exception as exc:
            failures += 1
            logger.debug("Push of %s failed", target, exc_info=True)
            print(f"{target}: {exc}", file=sys.stderr)
        else:
            print(f"Pushed hoop {hoop.id}")
    return failures


def _serve(settings: Settings, host: str, port: int | None) -> None:
    import uvicorn

    uvicorn.run("hoops.main:app", host=host, port=port or settings.port)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hoops-admin", description="Hoops administration")
    parser.add_argument(
        "--config",
        default=None,
        help="JSON configuration file layered over the environment",
    )
    subcommands = parser.add_subparsers(dest="command", required=True)

    push_parser = subcommands.add_parser(
        "push", help="Append saved hoops to the spreadsheet"
    )
    push_parser.add_argument(
        "targets",
        nargs="+",
        help="Storage key or path of a saved .json record",
    )

    serve_parser = subcommands.add_parser("serve", help="Run the submission API")
    serve_parser.add_argument("--host", default="0.0.0.0")
    serve_parser.add_argument("--port", type=int, default=None)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = _load_settings(args.config)
    setup_logging(settings)

    if args.command == "serve":
        _serve(settings, args.host, args.port)
        return 0

    if not settings.spreadsheet_key:
        print("No spreadsheet key configured (SPREADSHEET_KEY)", file=sys.stderr)
        return 1

    service = build_replication_service(settings)
    failures = asyncio.run(push(service, args.targets))
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
