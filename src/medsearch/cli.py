"""CLI entry point for the MedSearch server."""

from __future__ import annotations

import argparse
import os
import sys
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

from medsearch import __version__

if TYPE_CHECKING:
    from medsearch.config.settings import Settings


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point for the MedSearch server."""
    parser = argparse.ArgumentParser(
        prog="medsearch",
        description="MedSearch — Federated search over cases, articles, courses and archive entries",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--data",
        "-d",
        type=str,
        default=None,
        help="Path to YAML/JSON catalogue of collections (overrides config)",
    )
    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Server bind address (overrides config)",
    )
    parser.add_argument(
        "--port",
        "-p",
        type=int,
        default=None,
        help="Server port (overrides config)",
    )
    parser.add_argument(
        "--workers",
        "-w",
        type=int,
        default=None,
        help="Number of worker processes (overrides config)",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["debug", "info", "warning", "error"],
        default=None,
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"MedSearch {__version__}",
    )

    args = parser.parse_args(argv)

    from medsearch.config.settings import Settings
    from medsearch.observability.logging import setup_logging

    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: Config file not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        settings = Settings.from_yaml(config_path)
    else:
        settings = Settings()

    if args.data:
        settings.search.data_path = Path(args.data)
    if args.host:
        settings.server.host = args.host
    if args.port:
        settings.server.port = args.port
    if args.workers:
        settings.server.workers = args.workers
    if args.log_level:
        settings.observability.log_level = args.log_level

    if settings.search.data_path is not None and not settings.search.data_path.exists():
        print(f"Error: Catalogue file not found: {settings.search.data_path}", file=sys.stderr)
        sys.exit(1)

    setup_logging(settings.observability)

    import uvicorn

    from medsearch.api.app import create_app

    if args.reload or settings.server.workers > 1:
        # Reload and multi-worker modes import the factory in fresh
        # interpreters, so the resolved settings travel through a file
        os.environ["MEDSEARCH_CONFIG"] = str(_export_settings(settings))
        uvicorn.run(
            "medsearch.api.app:create_app",
            factory=True,
            host=settings.server.host,
            port=settings.server.port,
            workers=settings.server.workers if not args.reload else 1,
            reload=args.reload,
            log_level=settings.observability.log_level,
        )
        return

    uvicorn.run(
        create_app(settings),
        host=settings.server.host,
        port=settings.server.port,
        log_level=settings.observability.log_level,
    )


def _export_settings(settings: Settings) -> Path:
    """Write ``settings`` to a temporary YAML file readable by ``Settings.from_yaml``."""
    import yaml  # type: ignore[import-untyped]

    with tempfile.NamedTemporaryFile(
        "w", prefix="medsearch-", suffix=".yaml", delete=False, encoding="utf-8"
    ) as f:
        yaml.safe_dump(settings.model_dump(mode="json"), f, allow_unicode=True)
    return Path(f.name)


if __name__ == "__main__":
    main()
