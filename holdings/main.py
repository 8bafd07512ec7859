import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any

from holdings.config.settings import Settings
from holdings.database.connection import close_pool, init_pool
from holdings.database.exceptions import StoreError
from holdings.database.factory import StoreFactory
from holdings.database.repositories.base import BaseStore
from holdings.database.repositories.postgres_store import PostgresStore
from holdings.ingest.ingestor import StatementIngestor, hash_requester
from holdings.logging.logger import Log
from holdings.processor.exceptions import StatementError
from holdings.processor.processor import build_processor

DEFAULT_REQUESTER = "127.0.0.1"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="holdings",
        description="Parse and verify scanned brokerage statements.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    parse_cmd = commands.add_parser("parse", help="Parse a statement and print the record.")
    parse_cmd.add_argument("file", type=Path)
    parse_cmd.add_argument("--requester", default=DEFAULT_REQUESTER)

    ingest_cmd = commands.add_parser("ingest", help="Parse statements and store them.")
    ingest_cmd.add_argument("files", type=Path, nargs="+")
    ingest_cmd.add_argument("--requester", default=DEFAULT_REQUESTER)

    list_cmd = commands.add_parser("transactions", help="List stored transactions.")
    list_cmd.add_argument("--cusip")

    commands.add_parser("totals", help="Print share totals per CUSIP.")
    commands.add_parser("migrate", help="Apply the database schema.")
    commands.add_parser("reset", help="Delete all transactions and positions.")
    return parser


def _print_json(payload: Any) -> None:
    print(json.dumps(payload, default=str, indent=2))


def _parse(settings: Settings, args: argparse.Namespace) -> int:
    processor = build_processor(settings)
    stored = processor.process(args.file.read_bytes(), hash_requester(args.requester))
    _print_json({"transaction": asdict(stored)})
    return 0


def _ingest(settings: Settings, store: BaseStore, args: argparse.Namespace) -> int:
    ingestor = StatementIngestor(
        processor=build_processor(settings),
        store=store,
        max_document_bytes=settings.max_document_bytes,
    )
    failures = 0
    for path in args.files:
        try:
            stored = ingestor.ingest(path.read_bytes(), args.requester)
        except (StatementError, StoreError) as exc:
            failures += 1
            Log.error(f"Failed to ingest {path.name}: {exc}")
            continue
        _print_json({"file": path.name, "transaction": asdict(stored)})
    return 1 if failures else 0


def _run(settings: Settings, args: argparse.Namespace) -> int:
    if args.command == "parse":
        return _parse(settings, args)

    store = StoreFactory.create(settings)
    if args.command == "ingest":
        return _ingest(settings, store, args)
    if args.command == "transactions":
        transactions = (
            store.get_transactions(args.cusip) if args.cusip else store.list_transactions()
        )
        _print_json({"transactions": [asdict(tx) for tx in transactions]})
    elif args.command == "totals":
        _print_json({cusip: asdict(total) for cusip, total in store.get_totals().items()})
    elif args.command == "migrate":
        if isinstance(store, PostgresStore):
            store.migrate()
            Log.info("Database schema is up to date")
        else:
            Log.info(f"Store backend '{settings.store_backend}' needs no migration")
    elif args.command == "reset":
        store.reset()
        Log.info("Store reset")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point: parse args -> configure logging -> run the command."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    uses_database = settings.store_backend.lower() == "postgres" and args.command != "parse"
    if uses_database:
        init_pool(settings)
    try:
        return _run(settings, args)
    except (StatementError, StoreError) as exc:
        Log.error(f"{args.command} failed: {exc}")
        return 1
    finally:
        if uses_database:
            close_pool()


if __name__ == "__main__":
    sys.exit(main())
