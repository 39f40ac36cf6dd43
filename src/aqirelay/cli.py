"""Command-line entry point: ``aqirelay`` / ``python -m aqirelay``."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from aiohttp import web
from dotenv import load_dotenv

from aqirelay.config import RelayConfig
from aqirelay.exceptions import RelayConfigError
from aqirelay.server import create_app

_logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aqirelay",
        description="Serve cached air-quality and weather readings for a signage display.",
    )
    parser.add_argument("--host", help="Interface to bind (default: RELAY_HOST or 0.0.0.0)")
    parser.add_argument("--port", type=int, help="Port to listen on (default: RELAY_PORT or 3000)")
    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Dotenv file to load before reading the environment (default: ./.env if present)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    load_dotenv(args.env_file or Path(".env"))

    overrides: dict[str, object] = {}
    if args.host is not None:
        overrides["host"] = args.host
    if args.port is not None:
        overrides["port"] = args.port

    try:
        config = RelayConfig.from_env(**overrides)
    except RelayConfigError as exc:
        _logger.error("Invalid configuration: %s", exc)
        return 2

    web.run_app(create_app(config), host=config.host, port=config.port, print=None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
