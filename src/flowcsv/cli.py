"""Command-line entry point: run a batch of export requests from a JSON file.

Usage::

    flowcsv export requests.json --env-file .env
    flowcsv export requests.json --dry-run
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Sequence

from flowcsv.application.export import CsvExportAction, ExportRequest, ExportSettings
from flowcsv.application.files import FileStore, InMemoryFileStore
from flowcsv.config.settings import DotenvSettingsLoader, EnvSettingsLoader, SettingsFactory, SettingsLoader
from flowcsv.kernel.errors import BaseError, ExportValidationError
from flowcsv.observability.logging import JsonLoggerFactory, get_logger

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID = 2

_log = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="flowcsv", description="Export records to CSV files.")
    sub = parser.add_subparsers(dest="command", required=True)

    export = sub.add_parser("export", help="Run a batch of export requests.")
    export.add_argument("requests", type=Path, help="JSON file holding an array of export requests.")
    export.add_argument("--env-file", help="Load settings from this .env file first.")
    export.add_argument(
        "--dry-run",
        action="store_true",
        help="Store files in memory instead of Salesforce.",
    )
    return parser


def _loaders(env_file: str | None) -> list[SettingsLoader]:
    return [DotenvSettingsLoader(env_file)] if env_file else [EnvSettingsLoader()]


def _load_requests(path: Path) -> list[ExportRequest]:
    payload = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(payload, dict):
        payload = [payload]
    return [ExportRequest.from_dict(item) for item in payload]


def _store(dry_run: bool, loaders: list[SettingsLoader]) -> FileStore:
    if dry_run:
        return InMemoryFileStore()
    from flowcsv.adapters.salesforce import SalesforceFileStore, SalesforceSettings, connect

    sf_settings = SettingsFactory.create(SalesforceSettings, loaders)
    return SalesforceFileStore(connect(sf_settings))


def run_export(args: argparse.Namespace) -> int:
    loaders = _loaders(args.env_file)
    try:
        settings = SettingsFactory.create(ExportSettings, loaders)
        JsonLoggerFactory.configure(settings.log_level_number)
        requests = _load_requests(args.requests)
        action = CsvExportAction(_store(args.dry_run, loaders), settings)
        responses = action.invoke(requests)
    except ExportValidationError as exc:
        print(exc.message, file=sys.stderr)
        return EXIT_INVALID
    except BaseError as exc:
        _log.error("csv_export.failed", **exc.to_dict())
        print(exc.message, file=sys.stderr)
        return EXIT_FAILURE
    except (OSError, json.JSONDecodeError) as exc:
        print(f"Cannot read {args.requests}: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    json.dump([r.to_dict() for r in responses], sys.stdout, indent=2)
    sys.stdout.write("\n")
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.command == "export":
        return run_export(args)
    return EXIT_FAILURE  # pragma: no cover


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
